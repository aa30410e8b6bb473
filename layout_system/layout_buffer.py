#!/usr/bin/env python3
"""
Pre-sized output buffer for the layout, indexed by physical LED address.

The builders never touch the buffer directly. Each level is handed a
LayoutRegion covering only the addresses it owns, and hands narrower regions
down to the next level.
"""

from typing import Iterator, List, Optional, Tuple

from .led_record import LEDRecord


class LayoutError(ValueError):
    """Raised when a write falls outside its region or hits a filled slot"""


class LayoutBuffer:
    """Fixed-length array of LED records; unfilled slots stay None"""

    def __init__(self, size: int):
        self._slots: List[Optional[LEDRecord]] = [None] * size

    def __len__(self) -> int:
        return len(self._slots)

    def __getitem__(self, index: int) -> Optional[LEDRecord]:
        return self._slots[index]

    def __iter__(self) -> Iterator[Optional[LEDRecord]]:
        return iter(self._slots)

    def region(self, start: int = 0, length: Optional[int] = None) -> 'LayoutRegion':
        """Get a writable view over [start, start + length)"""
        if length is None:
            length = len(self._slots) - start
        if start < 0 or length < 0 or start + length > len(self._slots):
            raise LayoutError(
                f"Region [{start}, {start + length}) outside buffer of {len(self._slots)} slots"
            )
        return LayoutRegion(self, start, length)

    def populated(self) -> List[Tuple[int, LEDRecord]]:
        """(index, record) pairs for every filled slot, in address order"""
        return [(i, record) for i, record in enumerate(self._slots) if record is not None]

    def to_list(self) -> List[Optional[LEDRecord]]:
        return list(self._slots)

    def _store(self, index: int, record: LEDRecord):
        if self._slots[index] is not None:
            raise LayoutError(f"Slot {index} written twice")
        self._slots[index] = record


class LayoutRegion:
    """Write handle for a contiguous address range of a LayoutBuffer"""

    def __init__(self, buffer: LayoutBuffer, start: int, length: int):
        self.buffer = buffer
        self.start = start
        self.length = length

    def __len__(self) -> int:
        return self.length

    @property
    def stop(self) -> int:
        return self.start + self.length

    def sub_region(self, offset: int, length: int) -> 'LayoutRegion':
        """
        Narrow this region for a child builder.

        Args:
            offset: Start of the child range, relative to this region
            length: Number of slots the child may write

        Returns:
            LayoutRegion over [start + offset, start + offset + length)
        """
        if offset < 0 or length < 0 or offset + length > self.length:
            raise LayoutError(
                f"Sub-region [{offset}, {offset + length}) outside region of {self.length} slots "
                f"at {self.start}"
            )
        return LayoutRegion(self.buffer, self.start + offset, length)

    def write(self, offset: int, record: LEDRecord):
        """Store a record at `offset` within this region"""
        if offset < 0 or offset >= self.length:
            raise LayoutError(
                f"Offset {offset} outside region of {self.length} slots at {self.start}"
            )
        self.buffer._store(self.start + offset, record)
