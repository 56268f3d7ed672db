from __future__ import annotations

from typing import Any, Dict, Optional

import numpy as np

from .missing import NA_INTEGER, NA_STRING, ElementKind, allocate
from .vector import coerce_values


def match(x: Any, table: Any) -> np.ndarray:
    """One-based position of the first exact match of each ``x`` label in ``table``.

    Labels absent from ``table`` map to ``NA_INTEGER``. A missing label matches
    the first missing entry of ``table``, if there is one.
    """
    queries = coerce_values(x, ElementKind.STRING)
    targets = coerce_values(table, ElementKind.STRING)
    first: Dict[Any, int] = {}
    for position, label in enumerate(targets, start=1):
        first.setdefault(label, position)
    out = np.empty(len(queries), dtype=np.int32)
    for i, label in enumerate(queries):
        out[i] = first.get(label, NA_INTEGER)
    return out


def propagate_names(
    names: Optional[np.ndarray],
    positions: np.ndarray,
    source_length: int,
) -> Optional[np.ndarray]:
    """Names for the elements selected by zero-based ``positions``.

    Returns ``None`` when the source has no names attribute at all. Missing
    positions, and positions outside ``[0, source_length)``, get ``NA_STRING``.
    """
    if names is None:
        return None
    positions = np.asarray(positions, dtype=np.int64)
    out = allocate(ElementKind.STRING, positions.shape[0])
    valid = (positions != NA_INTEGER) & (positions >= 0) & (positions < source_length)
    out[~valid] = NA_STRING
    if valid.any():
        out[valid] = np.take(names, positions[valid])
    return out
