#!/usr/bin/env python3
"""
Helpers for serializing the window layout.

The plain form is the JSON array the renderer loads from
layouts/window6x12.json: one object per LED address, null for addresses with
no LED. The compressed form packs that same array with zlib and base64-encodes
it so a full layout can ride inside another JSON payload.
"""

from __future__ import annotations

import base64
import json
import zlib
from pathlib import Path
from typing import Any, Iterable, List, Optional

from layout_system import LEDRecord

LAYOUT_ENCODING_NAME = "json-zlib-base64"


def layout_to_json(records: Iterable[Any]) -> List[Optional[dict]]:
    """Convert LEDRecords (or already-plain dicts) into JSON-ready objects."""
    return [record.to_json() if isinstance(record, LEDRecord) else record for record in records]


def dump_layout(records: Iterable[Any], indent: Optional[int] = None) -> str:
    """
    Serialize a layout to JSON text.

    Args:
        records: Layout slots in address order; None for empty slots.
        indent: Pretty-print indent; compact output when omitted.

    Returns:
        JSON document string.
    """
    separators = (",", ":") if indent is None else None
    return json.dumps(layout_to_json(records), indent=indent, separators=separators)


def write_layout(records: Iterable[Any], path: Path, indent: Optional[int] = None) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_layout(records, indent=indent), encoding="utf-8")
    return path


def load_layout(path: Path) -> List[Optional[dict]]:
    """Read a layout file back into a list of record dicts (None for padding)."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"No layout file found at {path}")
    with path.open("r", encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, list):
        raise ValueError(f"Layout file {path} does not contain a JSON array")
    return data


def encode_layout(records: Iterable[Any]) -> str:
    """
    Compress a layout into a base64 string.

    Returns:
        Base64 string representing the compressed payload. Empty string when
        there is nothing to encode.
    """
    plain = layout_to_json(records)
    if not plain:
        return ""

    packed = json.dumps(plain, separators=(",", ":")).encode("utf-8")
    compressed = zlib.compress(packed)
    return base64.b64encode(compressed).decode("ascii")


def decode_layout(encoded: str) -> List[Optional[dict]]:
    """
    Decode a compressed layout string back into the list representation.

    Args:
        encoded: Base64 string produced by encode_layout.

    Returns:
        List of record dicts, None for padding slots.
    """
    if not encoded:
        return []

    try:
        compressed = base64.b64decode(encoded)
        unpacked = zlib.decompress(compressed).decode("utf-8")
        return json.loads(unpacked)
    except (ValueError, zlib.error):
        # Bad payloads decode as an empty layout
        return []
