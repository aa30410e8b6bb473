#!/usr/bin/env python3
"""
Window layout builders

Installation -> module -> chain -> block edge. Each level only works out an
address offset and a grid offset for the level below it; the block edge
computes the actual LED geometry.

3x1 chain, first Fadecandy channel (input on the right):

       +--------+  +--------+  +--------+
       |        |--|        |--|        |
       |       v|  |^      v|  |^       |
       |       v|  |^      v|  |^       |
       |        |  | <<<<<< |  | <<<<<< | <- Input
       +--------+  +--------+  +--------+

Second Fadecandy channel:

       +--------+  +--------+  +--------+
       | <<<<<< |--| <<<<<< |--| <<<<<< |
       |v       |  |        |  |       ^|
       |v       |  |        |  |       ^|
       | >>>>>> |  |        |  |        | <- Input
       +--------+  +--------+  +--------+

6x2 module, Fadecandy boards chained along the right edge:

         .......      .......
       [ Chain 1 ]  [ Chain 0 ]  [FC]
       [ Chain 3 ]  [ Chain 2 ]
         .......      .......
"""

import math
from typing import Dict, List, Tuple

from led_layout import (
    BLOCK_SIZE,
    CENTER_X,
    CENTER_Y,
    CHAIN_SLOTS,
    CHANNEL_SLOTS,
    EDGE_DISTANCE,
    LEDS_PER_EDGE,
    MODULE_COUNT,
    MODULE_SLOTS,
    total_slots,
)

from .layout_buffer import LayoutBuffer, LayoutRegion
from .led_record import LEDRecord

# Block sides, counterclockwise from the top
SIDE_TOP = 0
SIDE_LEFT = 1
SIDE_BOTTOM = 2
SIDE_RIGHT = 3

CLOCKWISE = 0
COUNTERCLOCKWISE = 1

# Hardware wiring for one 3-block chain: (slot offset, block delta, side, direction).
# Follows the physical strip order; do not reorder or "simplify".
CHAIN_WIRING: List[Tuple[int, Tuple[int, int], int, int]] = [
    # Channel A, 64 slots from the chain start
    (LEDS_PER_EDGE * 0, (2, 0), SIDE_BOTTOM, CLOCKWISE),
    (LEDS_PER_EDGE * 1, (2, 0), SIDE_LEFT, CLOCKWISE),
    (LEDS_PER_EDGE * 2, (1, 0), SIDE_RIGHT, CLOCKWISE),
    (LEDS_PER_EDGE * 3, (1, 0), SIDE_BOTTOM, CLOCKWISE),
    (LEDS_PER_EDGE * 4, (1, 0), SIDE_LEFT, CLOCKWISE),
    (LEDS_PER_EDGE * 5, (0, 0), SIDE_RIGHT, CLOCKWISE),
    # Channel B, starts on the next Fadecandy channel
    (CHANNEL_SLOTS + LEDS_PER_EDGE * 0, (2, 0), SIDE_RIGHT, COUNTERCLOCKWISE),
    (CHANNEL_SLOTS + LEDS_PER_EDGE * 1, (2, 0), SIDE_TOP, COUNTERCLOCKWISE),
    (CHANNEL_SLOTS + LEDS_PER_EDGE * 2, (1, 0), SIDE_TOP, COUNTERCLOCKWISE),
    (CHANNEL_SLOTS + LEDS_PER_EDGE * 3, (0, 0), SIDE_TOP, COUNTERCLOCKWISE),
    (CHANNEL_SLOTS + LEDS_PER_EDGE * 4, (0, 0), SIDE_LEFT, COUNTERCLOCKWISE),
    (CHANNEL_SLOTS + LEDS_PER_EDGE * 5, (0, 0), SIDE_BOTTOM, COUNTERCLOCKWISE),
]

# Chains within a module: (slot offset, grid delta)
MODULE_CHAINS: List[Tuple[int, Tuple[int, int]]] = [
    (CHAIN_SLOTS * 0, (3, 0)),
    (CHAIN_SLOTS * 1, (0, 0)),
    (CHAIN_SLOTS * 2, (3, 1)),
    (CHAIN_SLOTS * 3, (0, 1)),
]

MODULE_ROWS = 2


def block_edge(region: LayoutRegion, grid_xy: Tuple[int, int], side: int, ccw: int):
    """
    Lay out one LED strip along one block edge.

    Args:
        region: 9-slot region the strip is addressed at
        grid_xy: (column, row) of the block in the window grid
        side: SIDE_TOP, SIDE_LEFT, SIDE_BOTTOM or SIDE_RIGHT
        ccw: CLOCKWISE or COUNTERCLOCKWISE strip direction
    """
    count = LEDS_PER_EDGE
    y = EDGE_DISTANCE

    # Leave half a gap at each end so no LED sits on a corner
    spacing = 2 * y / (count + 1)
    angle = side * math.pi / 2
    s = math.sin(angle)
    c = math.cos(angle)
    gx, gy = grid_xy

    for i in range(count):
        # Distance from the vertical Y axis
        x = ((count - 1 - i if ccw else i) - (count - 1) / 2.0) * spacing

        rx = x * c - y * s
        ry = x * s + y * c

        region.write(i, LEDRecord(
            point=(
                BLOCK_SIZE * -(gx + rx * 0.5 + 0.5) + CENTER_X,
                0,
                BLOCK_SIZE * -(gy - ry * 0.5 + 0.5) + CENTER_Y,
            ),
            grid_xy=(gx, gy),
            block_xy=(rx, ry),
            block_angle=math.atan2(rx, ry),
        ))


def build_chain(region: LayoutRegion, grid_xy: Tuple[int, int]):
    """Lay out a 3-block chain whose leftmost block sits at grid_xy"""
    gx, gy = grid_xy
    for offset, (dx, dy), side, ccw in CHAIN_WIRING:
        block_edge(region.sub_region(offset, LEDS_PER_EDGE), (gx + dx, gy + dy), side, ccw)


def build_module(region: LayoutRegion, grid_xy: Tuple[int, int]):
    """Lay out a 6x2 module (one Fadecandy) from its bottom-left block"""
    gx, gy = grid_xy
    for offset, (dx, dy) in MODULE_CHAINS:
        build_chain(region.sub_region(offset, CHAIN_SLOTS), (gx + dx, gy + dy))


def build_installation(modules: int = MODULE_COUNT) -> LayoutBuffer:
    """
    Lay out the whole window: modules stacked vertically, two rows each.

    Returns:
        LayoutBuffer of total_slots() records, None in the padding slots
    """
    buffer = LayoutBuffer(total_slots(modules))
    root = buffer.region()
    for i in range(modules):
        build_module(root.sub_region(MODULE_SLOTS * i, MODULE_SLOTS), (0, MODULE_ROWS * i))
    return buffer


def wiring_slots(modules: int = MODULE_COUNT) -> Dict[Tuple[int, int, int, int, int], int]:
    """
    Map every (module, chain, direction, edge, position) to its LED address.

    Derived from the same tables the builders use, so address collisions in
    the wiring show up here without generating any geometry.
    """
    slots = {}
    for module in range(modules):
        for chain, (chain_offset, _) in enumerate(MODULE_CHAINS):
            edge_index = {CLOCKWISE: 0, COUNTERCLOCKWISE: 0}
            for offset, _, _, ccw in CHAIN_WIRING:
                edge = edge_index[ccw]
                edge_index[ccw] += 1
                base = MODULE_SLOTS * module + chain_offset + offset
                for position in range(LEDS_PER_EDGE):
                    slots[(module, chain, ccw, edge, position)] = base + position
    return slots
