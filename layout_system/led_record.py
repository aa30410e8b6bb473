#!/usr/bin/env python3
"""
LED record type for the window layout
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class LEDRecord:
    """Position and block-local metadata for one physical LED"""

    point: Tuple[float, float, float]
    grid_xy: Tuple[int, int]
    block_xy: Tuple[float, float]
    block_angle: float

    def to_json(self) -> Dict[str, Any]:
        """
        Build the JSON object the downstream renderer reads.

        Field names and their order are part of the layout file format.
        """
        return {
            'point': list(self.point),
            'gridXY': list(self.grid_xy),
            'blockXY': list(self.block_xy),
            'blockAngle': self.block_angle,
        }

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> 'LEDRecord':
        return cls(
            point=tuple(data['point']),
            grid_xy=tuple(int(v) for v in data['gridXY']),
            block_xy=tuple(data['blockXY']),
            block_angle=float(data['blockAngle']),
        )
