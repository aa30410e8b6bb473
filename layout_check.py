#!/usr/bin/env python3
"""
Sanity checks for a generated (or loaded) window layout.

A wrong entry in the wiring tables produces a perfectly well-formed file with
LEDs in the wrong place, so these checks look at the whole layout at once:
coordinate ranges, block coverage and slot counts.
"""

import argparse
import math
import sys
from collections import Counter
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from layout_codec import layout_to_json, load_layout
from led_layout import (
    BLOCK_SIZE,
    CHAINS_PER_MODULE,
    DEFAULT_LAYOUT_PATH,
    EDGES_PER_BLOCK,
    GRID_COLUMNS,
    GRID_ROWS,
    LEDS_PER_EDGE,
    MODULE_COUNT,
    populated_slots,
    total_slots,
)

LEDS_PER_BLOCK = LEDS_PER_EDGE * EDGES_PER_BLOCK
MAX_PROBLEMS = 50

# Field name -> expected array length (None for a scalar)
RECORD_FIELDS = {'point': 3, 'gridXY': 2, 'blockXY': 2, 'blockAngle': None}


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_well_formed(record: Any) -> bool:
    """True for a dict carrying the four record fields with numeric values."""
    if not isinstance(record, dict):
        return False
    for field, length in RECORD_FIELDS.items():
        value = record.get(field)
        if length is None:
            if not _is_number(value):
                return False
        elif not (isinstance(value, list) and len(value) == length and all(_is_number(v) for v in value)):
            return False
    return all(isinstance(v, int) for v in record['gridXY'])


def summarize_layout(records: Iterable[Any]) -> Dict[str, Any]:
    """Counts and extents shared by the CLI summary and the layout server."""
    plain = layout_to_json(records)
    filled = [record for record in plain if is_well_formed(record)]
    columns = [record['gridXY'][0] for record in filled]
    rows = [record['gridXY'][1] for record in filled]
    return {
        'total_slots': len(plain),
        'populated': len(filled),
        'padding': sum(1 for record in plain if record is None),
        'malformed': sum(1 for record in plain if record is not None and not is_well_formed(record)),
        'blocks': len({tuple(record['gridXY']) for record in filled}),
        'grid': {
            'columns': GRID_COLUMNS,
            'rows': GRID_ROWS,
            'min_column': min(columns) if columns else None,
            'max_column': max(columns) if columns else None,
            'min_row': min(rows) if rows else None,
            'max_row': max(rows) if rows else None,
        },
        'block_size': BLOCK_SIZE,
        'modules': MODULE_COUNT,
        'chains_per_module': CHAINS_PER_MODULE,
        'leds_per_edge': LEDS_PER_EDGE,
    }


def _check_record(index: int, record: Dict[str, Any]) -> List[str]:
    problems = []
    point = record['point']
    column, row = record['gridXY']
    bx, by = record['blockXY']
    angle = record['blockAngle']

    if point[1] != 0:
        problems.append(f"slot {index}: point y is {point[1]}, expected 0")
    if not (-1.0 <= bx <= 1.0 and -1.0 <= by <= 1.0):
        problems.append(f"slot {index}: blockXY {record['blockXY']} outside [-1, 1]")
    if angle != math.atan2(bx, by):
        problems.append(f"slot {index}: blockAngle {angle} does not match blockXY")
    if not (0 <= column < GRID_COLUMNS and 0 <= row < GRID_ROWS):
        problems.append(f"slot {index}: gridXY {record['gridXY']} outside {GRID_COLUMNS}x{GRID_ROWS} grid")
    return problems


def validate_layout(records: Iterable[Any],
                    expected_slots: Optional[int] = None,
                    expected_populated: Optional[int] = None) -> List[str]:
    """
    Check a layout for wiring and geometry mistakes.

    Args:
        records: Layout slots (LEDRecords, record dicts or None)
        expected_slots: Required total length (defaults to the full window)
        expected_populated: Required count of filled slots

    Returns:
        List of problem descriptions; empty when the layout is valid.
    """
    plain = layout_to_json(records)
    expected_slots = total_slots() if expected_slots is None else expected_slots
    expected_populated = populated_slots() if expected_populated is None else expected_populated

    problems = []
    if len(plain) != expected_slots:
        problems.append(f"layout has {len(plain)} slots, expected {expected_slots}")

    per_block = Counter()
    populated = 0
    for index, record in enumerate(plain):
        if record is None:
            continue
        populated += 1
        if not is_well_formed(record):
            problems.append(f"slot {index}: malformed record {record!r:.80}")
            continue
        per_block[tuple(record['gridXY'])] += 1
        problems.extend(_check_record(index, record))

    if populated != expected_populated:
        problems.append(f"layout has {populated} LEDs, expected {expected_populated}")

    for block, count in sorted(per_block.items()):
        if count != LEDS_PER_BLOCK:
            problems.append(f"block {list(block)} has {count} LEDs, expected {LEDS_PER_BLOCK}")

    return problems


def main(argv=None):
    parser = argparse.ArgumentParser(description="Check a window layout JSON file")
    parser.add_argument(
        "layout",
        nargs="?",
        default=DEFAULT_LAYOUT_PATH,
        help=f"Path to the layout file (default: {DEFAULT_LAYOUT_PATH})",
    )
    args = parser.parse_args(argv)

    layout_path = Path(args.layout)
    try:
        records = load_layout(layout_path)
        problems = validate_layout(records)
        summary = summarize_layout(records)
    except (OSError, KeyError, TypeError, ValueError) as exc:
        print(f"❌ Could not check {layout_path}: {exc}", file=sys.stderr)
        sys.exit(1)

    print(f"📐 {layout_path}: {summary['populated']} LEDs in {summary['total_slots']} slots, "
          f"{summary['blocks']} blocks")

    if problems:
        for problem in problems[:MAX_PROBLEMS]:
            print(f"  ✗ {problem}")
        if len(problems) > MAX_PROBLEMS:
            print(f"  ... {len(problems) - MAX_PROBLEMS} more")
        sys.exit(1)

    print("✓ Layout OK")


if __name__ == "__main__":
    main()
