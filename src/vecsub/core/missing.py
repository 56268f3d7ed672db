"""Element kinds and their missing-value sentinels.

Every element kind carries its own reserved "missing" value:

* ``LOGICAL`` and ``INTEGER`` are stored as ``int32`` and use the smallest
  representable value (``-2**31``).
* ``REAL`` is stored as ``float64`` and uses a quiet NaN with payload 1954.
  Any NaN is reported as missing by :func:`is_missing`.
* ``STRING`` is stored in ``object`` arrays and uses the :data:`NA_STRING`
  singleton, which never compares equal to a ``str``.
"""

from __future__ import annotations

import enum
from typing import Any

import numpy as np

from .exceptions import IndexTypeError

NA_INTEGER = int(np.iinfo(np.int32).min)
NA_LOGICAL = NA_INTEGER
NA_REAL = float(np.array([0x7FF00000000007A2], dtype=np.uint64).view(np.float64)[0])


class _NAString:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NA"

    def __reduce__(self):
        return (_NAString, ())


NA_STRING = _NAString()


class ElementKind(enum.Enum):
    LOGICAL = "logical"
    INTEGER = "integer"
    REAL = "real"
    STRING = "string"

    @property
    def dtype(self) -> np.dtype:
        return _DTYPES[self]

    @property
    def missing(self) -> Any:
        return missing_value(self)


_DTYPES = {
    ElementKind.LOGICAL: np.dtype(np.int32),
    ElementKind.INTEGER: np.dtype(np.int32),
    ElementKind.REAL: np.dtype(np.float64),
    ElementKind.STRING: np.dtype(object),
}

_SENTINELS = {
    ElementKind.LOGICAL: NA_LOGICAL,
    ElementKind.INTEGER: NA_INTEGER,
    ElementKind.REAL: NA_REAL,
    ElementKind.STRING: NA_STRING,
}


def missing_value(kind: ElementKind) -> Any:
    return _SENTINELS[kind]


def is_missing(kind: ElementKind, values: Any) -> np.ndarray:
    """Boolean mask marking the missing entries of ``values`` for ``kind``."""
    if kind is ElementKind.STRING:
        arr = np.asarray(values, dtype=object)
        flags = [item is NA_STRING for item in arr.ravel()]
        return np.array(flags, dtype=bool).reshape(arr.shape)
    arr = np.asarray(values)
    if kind is ElementKind.REAL:
        return np.isnan(arr.astype(np.float64, copy=False))
    return arr == _SENTINELS[kind]


def allocate(kind: ElementKind, n: int) -> np.ndarray:
    """Uninitialized storage for ``n`` elements of ``kind``.

    Object arrays come back filled with ``None``; callers must write every
    slot before handing the buffer out.
    """
    return np.empty(int(n), dtype=kind.dtype)


def kind_of_dtype(dtype: Any) -> ElementKind:
    dtype = np.dtype(dtype)
    if dtype == np.bool_:
        return ElementKind.LOGICAL
    if np.issubdtype(dtype, np.integer):
        return ElementKind.INTEGER
    if np.issubdtype(dtype, np.floating):
        return ElementKind.REAL
    if dtype.kind in ("U", "S", "O"):
        return ElementKind.STRING
    raise IndexTypeError(f"Unsupported element dtype: {dtype}")
