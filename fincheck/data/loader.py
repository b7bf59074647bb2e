"""
Registry JSON loading. Any failure degrades to an empty record list.
"""
from __future__ import annotations

import json
from pathlib import Path

from fincheck.config import DATA_FILE


def parse_registry(content: bytes | str) -> list:
    """Decode a registry document, which must be a JSON array.

    Raises ValueError for invalid JSON or a non-array top level.
    """
    data = json.loads(content)
    if not isinstance(data, list):
        raise ValueError(f"expected a JSON array, got {type(data).__name__}")
    return data


def load_raw_records(filepath: Path = DATA_FILE) -> list:
    """Read the registry file. Missing or malformed files yield []."""
    filepath = Path(filepath)
    if not filepath.exists():
        print(f"  Warning: registry file not found: {filepath}")
        return []
    try:
        raw = parse_registry(filepath.read_bytes())
    except (OSError, ValueError) as exc:
        print(f"  Warning: failed to load {filepath.name}: {exc}")
        return []
    print(f"  {filepath.name}: {len(raw):,} records")
    return raw
