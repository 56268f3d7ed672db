"""Index expressions and their normalization to zero-based integer positions.

An index expression is one of four tagged kinds:

* :class:`LogicalIndex` - a mask the same length as the vector being indexed.
* :class:`IntegerIndex` - zero-based positions; the canonical form.
* :class:`RealIndex` - positions given as reals, truncated toward zero.
* :class:`CharacterIndex` - labels looked up in the vector's names.

:func:`normalize_index` turns any of them into an :class:`IntegerIndex`,
keeping missing entries as ``NA_INTEGER``.
"""

from __future__ import annotations

import logging
import warnings
from typing import Any, ClassVar, Dict, List, Type, Union

import numpy as np

from .exceptions import IndexTypeError, MissingNamesError, SizeMismatchError
from .missing import NA_INTEGER, NA_LOGICAL, ElementKind, is_missing
from .names import match
from .vector import Vector, VectorLike, coerce_positions, coerce_values, kind_of

logger = logging.getLogger(__name__)

_INT32_MAX = int(np.iinfo(np.int32).max)


class _IndexExpression:
    element_kind: ClassVar[ElementKind]
    __slots__ = ("values",)

    def __init__(self, values: Any = ()):
        if isinstance(values, Vector):
            values = values.values
        self.values: np.ndarray = coerce_values(values, self.element_kind)

    @property
    def tag(self) -> str:
        return self.element_kind.value

    def missing_mask(self) -> np.ndarray:
        return is_missing(self.element_kind, self.values)

    def __len__(self) -> int:
        return int(self.values.shape[0])

    def to_list(self) -> List[Any]:
        return Vector(self.values, self.element_kind).to_list()

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.to_list() == other.to_list()  # type: ignore[attr-defined]

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"


class LogicalIndex(_IndexExpression):
    element_kind = ElementKind.LOGICAL


class IntegerIndex(_IndexExpression):
    element_kind = ElementKind.INTEGER

    def __init__(self, values: Any = ()):
        if isinstance(values, Vector):
            values = values.values
        self.values = coerce_positions(values)

    def to_list(self) -> List[Any]:
        missing = self.missing_mask()
        return [None if flag else int(value) for value, flag in zip(self.values.tolist(), missing)]


class RealIndex(_IndexExpression):
    element_kind = ElementKind.REAL


class CharacterIndex(_IndexExpression):
    element_kind = ElementKind.STRING


IndexExpression = Union[LogicalIndex, IntegerIndex, RealIndex, CharacterIndex]

_INDEX_BY_KIND: Dict[ElementKind, Type[_IndexExpression]] = {
    ElementKind.LOGICAL: LogicalIndex,
    ElementKind.INTEGER: IntegerIndex,
    ElementKind.REAL: RealIndex,
    ElementKind.STRING: CharacterIndex,
}


def as_index(obj: Any) -> IndexExpression:
    """Wrap ``obj`` in the index expression matching its element kind.

    Accepts index expressions (returned as-is), :class:`Vector` instances,
    NumPy arrays, plain sequences and scalars. Sequences with no present
    entries become an :class:`IntegerIndex`.
    """
    if isinstance(obj, _IndexExpression):
        return obj  # type: ignore[return-value]
    if isinstance(obj, Vector):
        return _INDEX_BY_KIND[obj.kind](obj.values)  # type: ignore[return-value]
    if isinstance(obj, (str, bool, int, float, np.generic)):
        obj = [obj]
    if isinstance(obj, np.ndarray):
        kind = kind_of(obj, default=ElementKind.INTEGER)
        return _INDEX_BY_KIND[kind](obj)  # type: ignore[return-value]
    if isinstance(obj, (list, tuple, range)):
        items = list(obj)
        kind = kind_of(items, default=ElementKind.INTEGER)
        return _INDEX_BY_KIND[kind](items)  # type: ignore[return-value]
    raise IndexTypeError(f"Unsupported index type: {type(obj).__name__}")


def which_na(mask: LogicalIndex) -> IntegerIndex:
    """Positions of the true entries of ``mask``, with missing entries kept as missing.

    False entries are dropped rather than replaced.
    """
    values = mask.values
    missing = values == NA_LOGICAL
    keep = missing | (values != 0)
    positions = np.flatnonzero(keep).astype(np.int32)
    positions[missing[keep]] = NA_INTEGER
    return IntegerIndex(positions)


def truncate_real(values: np.ndarray) -> np.ndarray:
    """Truncate reals toward zero into ``int32`` positions.

    NaN stays missing. Values that do not fit the 32-bit range become missing
    with a ``RuntimeWarning``.
    """
    values = np.asarray(values, dtype=np.float64)
    missing = np.isnan(values)
    truncated = np.trunc(np.where(missing, 0.0, values))
    overflow = ~missing & ((truncated <= NA_INTEGER) | (truncated > _INT32_MAX))
    if overflow.any():
        warnings.warn(
            "NAs introduced by coercion to integer range",
            RuntimeWarning,
            stacklevel=3,
        )
    return np.where(missing | overflow, float(NA_INTEGER), truncated).astype(np.int32)


def normalize_index(index: Any, source: VectorLike) -> IntegerIndex:
    index = as_index(index)
    if isinstance(index, IntegerIndex):
        return index
    if isinstance(index, RealIndex):
        return IntegerIndex(truncate_real(index.values))
    if isinstance(index, LogicalIndex):
        if len(index) != len(source):
            raise SizeMismatchError(
                "subsetting with a LogicalIndex requires both vectors to be of equal size "
                f"(index length {len(index)}, vector length {len(source)})"
            )
        return which_na(index)
    if isinstance(index, CharacterIndex):
        names = source.names
        if names is None:
            raise MissingNamesError("can't subset a nameless vector using a CharacterIndex")
        matched = match(index.values, names)
        logger.debug("matched %d of %d labels", int((matched != NA_INTEGER).sum()), len(index))
        zero_based = np.where(matched == NA_INTEGER, NA_INTEGER, matched.astype(np.int64) - 1)
        return IntegerIndex(zero_based.astype(np.int32))
    raise IndexTypeError(f"Unsupported index expression: {type(index).__name__}")
