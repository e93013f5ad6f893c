"""Canonical JSON serialization.

Discovery output is compared across runs and machines, so every JSON
report goes through this one function.
"""

import json
from typing import Any, Optional


def canonical_dumps(obj: Any, indent: Optional[int] = None) -> str:
    """
    Canonical JSON serialization for byte-stable reports.

    Rules:
    - UTF-8 encoding
    - Sorted keys
    - Stable separators (",", ":") when compact
    - Deterministic list ordering (lists must already be sorted before calling)

    Args:
        obj: Python object to serialize
        indent: Pretty-print with this indent instead of compact output

    Returns:
        Canonical JSON string
    """
    return json.dumps(
        obj,
        sort_keys=True,
        indent=indent,
        separators=(",", ":") if indent is None else (",", ": "),
        ensure_ascii=False  # UTF-8 encoding
    )
