from __future__ import annotations

from typing import Any, Dict, Iterator, List, Optional, Protocol, Sequence

import numpy as np

from .exceptions import IndexOutOfRangeError, IndexTypeError, SizeMismatchError
from .missing import (
    NA_INTEGER,
    NA_LOGICAL,
    NA_REAL,
    NA_STRING,
    ElementKind,
    allocate,
    is_missing,
    kind_of_dtype,
)

_INT32_MAX = int(np.iinfo(np.int32).max)


class VectorLike(Protocol):
    """Capabilities the subsetting engine needs from a host container."""

    kind: ElementKind

    @property
    def names(self) -> Optional[np.ndarray]: ...

    @property
    def values(self) -> np.ndarray: ...

    def __len__(self) -> int: ...

    def get(self, position: int) -> Any: ...

    def take(self, positions: np.ndarray) -> np.ndarray: ...

    def no_init(self, n: int) -> "VectorLike": ...

    def set_names(self, names: Optional[np.ndarray]) -> None: ...


def _is_absent(value: Any) -> bool:
    return value is None or value is NA_STRING


def infer_kind(values: Sequence[Any], default: ElementKind = ElementKind.LOGICAL) -> ElementKind:
    """Pick the element kind of a plain Python sequence.

    ``None`` entries are ignored; a sequence with no present entries falls
    back to ``default``. Mixing integers and floats yields ``REAL``.
    """
    present = [value for value in values if not _is_absent(value)]
    if not present:
        return default
    if all(isinstance(value, (bool, np.bool_)) for value in present):
        return ElementKind.LOGICAL
    if all(
        isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))
        for value in present
    ):
        return ElementKind.INTEGER
    if all(
        isinstance(value, (int, float, np.integer, np.floating))
        and not isinstance(value, (bool, np.bool_))
        for value in present
    ):
        return ElementKind.REAL
    if all(isinstance(value, str) for value in present):
        return ElementKind.STRING
    kinds = sorted({type(value).__name__ for value in present})
    raise IndexTypeError(f"Cannot infer a single element kind from types: {', '.join(kinds)}")


def kind_of(values: Any, default: ElementKind = ElementKind.LOGICAL) -> ElementKind:
    if isinstance(values, np.ndarray) and values.dtype != object:
        return kind_of_dtype(values.dtype)
    if isinstance(values, np.ndarray):
        return infer_kind(values.tolist(), default)
    return infer_kind(list(values), default)


def _check_int32_range(arr: np.ndarray) -> None:
    if arr.size == 0:
        return
    low = int(arr.min())
    high = int(arr.max())
    if low < NA_INTEGER or high > _INT32_MAX:
        raise IndexTypeError(f"Integer values outside the 32-bit range: [{low}, {high}]")


def _check_numeric(items: List[Any], *, integral: bool) -> None:
    for i, item in enumerate(items):
        if _is_absent(item):
            continue
        if isinstance(item, (str, bytes)):
            raise IndexTypeError(f"Expected a number at position {i}, got {type(item).__name__}")
        if integral and isinstance(item, (float, np.floating)) and not float(item).is_integer():
            raise IndexTypeError(
                f"Cannot store real value {item!r} at position {i} as integer without coercion"
            )


def coerce_values(values: Any, kind: Optional[ElementKind] = None) -> np.ndarray:
    """Convert ``values`` into the storage array for ``kind``.

    NumPy arrays keep their data; plain sequences have ``None`` entries turned
    into the kind's missing sentinel. The result never aliases ``values``.
    """
    if isinstance(values, np.ndarray) and values.dtype != object:
        if values.ndim != 1:
            raise IndexTypeError(f"Vectors must be one-dimensional, got shape {values.shape}")
        source_kind = kind_of_dtype(values.dtype)
        kind = kind or source_kind
        if kind is ElementKind.STRING:
            if source_kind is not ElementKind.STRING:
                raise IndexTypeError(f"Cannot store {values.dtype} values as strings")
            return np.array([str(item) for item in values.tolist()], dtype=object)
        if source_kind is ElementKind.STRING:
            raise IndexTypeError(f"Cannot store string values as {kind.value}")
        if kind is ElementKind.LOGICAL and values.dtype == np.bool_:
            return values.astype(np.int32)
        if kind is ElementKind.REAL:
            return values.astype(np.float64)
        if source_kind is ElementKind.REAL:
            raise IndexTypeError(f"Cannot store real values as {kind.value} without coercion")
        _check_int32_range(values)
        return values.astype(np.int32)

    if isinstance(values, np.ndarray):
        if values.ndim != 1:
            raise IndexTypeError(f"Vectors must be one-dimensional, got shape {values.shape}")
        items: List[Any] = values.tolist()
    elif isinstance(values, (str, bytes)):
        raise IndexTypeError("Vector values must be a sequence, not a bare string")
    else:
        items = list(values)
    kind = kind or infer_kind(items)

    if kind is ElementKind.STRING:
        out = allocate(kind, len(items))
        for i, item in enumerate(items):
            if _is_absent(item):
                out[i] = NA_STRING
            elif isinstance(item, str):
                out[i] = item
            else:
                raise IndexTypeError(f"Expected a string at position {i}, got {type(item).__name__}")
        return out
    if kind is ElementKind.LOGICAL:
        return np.array(
            [NA_LOGICAL if _is_absent(item) else int(bool(item)) for item in items],
            dtype=np.int32,
        )
    _check_numeric(items, integral=kind is ElementKind.INTEGER)
    if kind is ElementKind.REAL:
        return np.array(
            [NA_REAL if _is_absent(item) else float(item) for item in items],
            dtype=np.float64,
        )
    ints = np.array(
        [NA_INTEGER if _is_absent(item) else int(item) for item in items],
        dtype=np.int64,
    )
    _check_int32_range(ints)
    return ints.astype(np.int32)


def coerce_positions(values: Any) -> np.ndarray:
    """Zero-based positions as ``int64``, missing entries as ``NA_INTEGER``.

    Unlike integer element storage, positions are not limited to 32 bits so
    that oversized ones reach the bounds check.
    """
    if isinstance(values, np.ndarray) and values.dtype != object:
        if values.ndim != 1:
            raise IndexTypeError(f"Positions must be one-dimensional, got shape {values.shape}")
        if kind_of_dtype(values.dtype) not in (ElementKind.INTEGER, ElementKind.LOGICAL):
            raise IndexTypeError(f"Cannot use {values.dtype} values as integer positions")
        return values.astype(np.int64)
    if isinstance(values, (str, bytes)):
        raise IndexTypeError("Positions must be a sequence, not a bare string")
    items = values.tolist() if isinstance(values, np.ndarray) else list(values)
    _check_numeric(items, integral=True)
    return np.array(
        [NA_INTEGER if _is_absent(item) else int(item) for item in items],
        dtype=np.int64,
    )


def _coerce_names(names: Any, length: int) -> Optional[np.ndarray]:
    if names is None:
        return None
    if isinstance(names, Vector):
        names = names.values
    out = coerce_values(names, ElementKind.STRING)
    if len(out) != length:
        raise SizeMismatchError(
            f"names attribute has length {len(out)} but the vector has length {length}"
        )
    return out


def _to_python(kind: ElementKind, value: Any) -> Any:
    if kind is ElementKind.STRING:
        return None if value is NA_STRING else value
    if kind is ElementKind.REAL:
        value = float(value)
        return None if np.isnan(value) else value
    value = int(value)
    if value == NA_INTEGER:
        return None
    return bool(value) if kind is ElementKind.LOGICAL else value


class Vector:
    """Homogeneous one-dimensional vector with optional names.

    Values live in a NumPy array whose dtype is fixed by :class:`ElementKind`.
    ``names`` is either ``None`` (no names attribute) or a string array of the
    same length; an all-missing names array is a distinct state from ``None``.
    ``attrs`` holds any further metadata and is not carried through subsetting.

    Instances are treated as immutable once handed out. ``no_init`` and
    ``set_names`` exist so freshly allocated outputs can be filled in.
    """

    __slots__ = ("kind", "_values", "_names", "attrs")

    def __init__(
        self,
        values: Any = (),
        kind: Optional[ElementKind] = None,
        names: Any = None,
        attrs: Optional[Dict[str, Any]] = None,
    ):
        if isinstance(values, Vector):
            if kind is None or kind is values.kind:
                data = values.values.copy()
            else:
                data = coerce_values(values.to_list(), kind)
            kind = kind or values.kind
            if names is None:
                names = values.names
        else:
            if isinstance(values, (str, bytes)):
                raise IndexTypeError("Vector values must be a sequence, not a bare string")
            if not isinstance(values, np.ndarray):
                values = list(values)
            kind = kind or kind_of(values)
            data = coerce_values(values, kind)
        self.kind = kind
        self._values = data
        self._names = _coerce_names(names, len(data))
        self.attrs: Dict[str, Any] = dict(attrs or {})

    @classmethod
    def from_values(
        cls,
        values: Any,
        kind: Optional[ElementKind] = None,
        names: Any = None,
    ) -> "Vector":
        return cls(values, kind=kind, names=names)

    @classmethod
    def empty(cls, kind: ElementKind, n: int = 0) -> "Vector":
        vec = cls.__new__(cls)
        vec.kind = kind
        vec._values = allocate(kind, n)
        vec._names = None
        vec.attrs = {}
        return vec

    @property
    def values(self) -> np.ndarray:
        return self._values

    @property
    def names(self) -> Optional[np.ndarray]:
        return self._names

    @property
    def has_names(self) -> bool:
        return self._names is not None

    def set_names(self, names: Any) -> None:
        self._names = _coerce_names(names, len(self._values))

    def __len__(self) -> int:
        return int(self._values.shape[0])

    def get(self, position: int) -> Any:
        return self._values[position]

    def take(self, positions: np.ndarray) -> np.ndarray:
        return np.take(self._values, np.asarray(positions, dtype=np.intp))

    def no_init(self, n: int) -> "Vector":
        return Vector.empty(self.kind, n)

    def missing_mask(self) -> np.ndarray:
        return is_missing(self.kind, self._values)

    def to_list(self) -> List[Any]:
        return [_to_python(self.kind, value) for value in self._values]

    def names_list(self) -> Optional[List[Optional[str]]]:
        if self._names is None:
            return None
        return [_to_python(ElementKind.STRING, value) for value in self._names]

    def identical(self, other: "Vector") -> bool:
        """Kind, values, missing positions and names all agree."""
        if not isinstance(other, Vector) or other.kind is not self.kind:
            return False
        if len(other) != len(self):
            return False
        if self.to_list() != other.to_list():
            return False
        return self.names_list() == other.names_list()

    def subset(self, index: Any, bounds_checked: Optional[bool] = None) -> "Vector":
        from .subset import subset

        return subset(self, index, bounds_checked)

    def __getitem__(self, key: Any) -> Any:
        if isinstance(key, (int, np.integer)) and not isinstance(key, (bool, np.bool_)):
            position = int(key)
            length = len(self)
            if position < 0 or position >= length:
                raise IndexOutOfRangeError("Vector position out of range", position=position, length=length)
            return _to_python(self.kind, self.get(position))
        return self.subset(key)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.to_list())

    def __array__(self, dtype=None, copy=None):
        if dtype is not None:
            return self._values.astype(dtype)
        return self._values.copy()

    def __repr__(self) -> str:
        body = ", ".join("NA" if value is None else repr(value) for value in self.to_list())
        if self._names is None:
            return f"Vector<{self.kind.value}>([{body}])"
        names = ", ".join(repr(value) for value in self._names)
        return f"Vector<{self.kind.value}>([{body}], names=[{names}])"
