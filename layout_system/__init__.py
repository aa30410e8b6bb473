#!/usr/bin/env python3
"""
Window Layout System

Generates the physical LED layout of the 6x12 glass block window, in
Fadecandy wiring order.
"""

from .builders import (
    CHAIN_WIRING,
    CLOCKWISE,
    COUNTERCLOCKWISE,
    MODULE_CHAINS,
    SIDE_BOTTOM,
    SIDE_LEFT,
    SIDE_RIGHT,
    SIDE_TOP,
    block_edge,
    build_chain,
    build_installation,
    build_module,
    wiring_slots,
)
from .layout_buffer import LayoutBuffer, LayoutError, LayoutRegion
from .led_record import LEDRecord

__version__ = "1.0.0"
__all__ = [
    "CHAIN_WIRING",
    "CLOCKWISE",
    "COUNTERCLOCKWISE",
    "MODULE_CHAINS",
    "SIDE_BOTTOM",
    "SIDE_LEFT",
    "SIDE_RIGHT",
    "SIDE_TOP",
    "LEDRecord",
    "LayoutBuffer",
    "LayoutError",
    "LayoutRegion",
    "block_edge",
    "build_chain",
    "build_installation",
    "build_module",
    "wiring_slots",
]
