#!/usr/bin/env python3
"""
Generate the LED layout for the full 6x12 window, with 72 glass blocks.

Each glass block is backed by a folded diffuser holding a ring of 36 LEDs,
9 per side. The window is built from six modules of 6x2 blocks, each driven
by one Fadecandy controller.

Each LED in the output has:

        point: 3D vector, scaled to look good in the OPC gl_server previewer
       gridXY: Integer xy location of the block in the window grid
      blockXY: Location within the block, xy within [-1, 1]
   blockAngle: Angle within the block, in radians. Zero is +Y.

The JSON document goes to stdout (or --output); status lines go to stderr.
"""

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from layout_check import summarize_layout, validate_layout
from layout_codec import dump_layout, write_layout
from layout_system import LayoutBuffer, build_installation


@dataclass
class GeneratorOptions:
    output: Optional[str] = None
    indent: Optional[int] = None
    check: bool = False
    summary: bool = False


def _status(message: str):
    print(message, file=sys.stderr)


def run(options: GeneratorOptions, stdout=None) -> int:
    """Build the layout and emit it. Returns the process exit code."""
    if stdout is None:
        stdout = sys.stdout
    buffer: LayoutBuffer = build_installation()

    if options.check:
        problems = validate_layout(buffer)
        if problems:
            _status(f"❌ Layout check failed with {len(problems)} problems:")
            for problem in problems:
                _status(f"  ✗ {problem}")
            return 1
        _status("✓ Layout check passed")

    if options.summary:
        summary = summarize_layout(buffer)
        grid = summary['grid']
        _status("📐 Window layout")
        _status(f"  Slots   : {summary['total_slots']} ({summary['padding']} padding)")
        _status(f"  LEDs    : {summary['populated']}")
        _status(f"  Blocks  : {summary['blocks']} "
                f"(columns {grid['min_column']}-{grid['max_column']}, rows {grid['min_row']}-{grid['max_row']})")

    if options.output:
        path = write_layout(buffer, Path(options.output), indent=options.indent)
        _status(f"💾 Layout written to {path}")
    else:
        stdout.write(dump_layout(buffer, indent=options.indent))
        stdout.write("\n")
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate the 6x12 window LED layout JSON")
    parser.add_argument(
        "--output",
        "-o",
        help="Path to write the layout (e.g. layouts/window6x12.json); prints to stdout if omitted",
    )
    parser.add_argument("--indent", type=int, default=None,
                        help="Pretty-print with this indent (default: compact)")
    parser.add_argument("--check", action="store_true",
                        help="Validate the layout before writing it")
    parser.add_argument("--summary", action="store_true",
                        help="Print slot and block counts to stderr")
    args = parser.parse_args(argv)

    options = GeneratorOptions(
        output=args.output,
        indent=args.indent,
        check=args.check,
        summary=args.summary,
    )

    try:
        code = run(options)
    except Exception as e:
        print(f"❌ Error generating layout: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        sys.exit(1)
    sys.exit(code)


if __name__ == "__main__":
    main()
