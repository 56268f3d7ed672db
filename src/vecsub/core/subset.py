from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional

import numpy as np

from .exceptions import IndexOutOfRangeError
from .index import as_index, normalize_index
from .names import propagate_names
from .vector import VectorLike

logger = logging.getLogger(__name__)

NO_BOUNDS_CHECK_ENV = "VECSUB_NO_BOUNDS_CHECK"
_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class SubsetConfig:
    """
    Switches for :func:`subset`.

    ``bounds_check`` rejects non-missing positions outside ``[0, len - 1]``
    with :class:`IndexOutOfRangeError`. With it disabled the positions go
    straight to the storage gather: NumPy-backed vectors count negative
    positions from the end and raise their own ``IndexError`` past the end.
    Supplying valid positions is then the caller's responsibility; nothing is
    clamped.
    """

    bounds_check: bool = True

    def normalized(self) -> "SubsetConfig":
        return replace(self, bounds_check=bool(self.bounds_check))

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SubsetConfig":
        env = os.environ if environ is None else environ
        raw = env.get(NO_BOUNDS_CHECK_ENV, "")
        return cls(bounds_check=raw.strip().lower() not in _TRUTHY)


def _resolve_bounds_check(bounds_checked: Optional[bool], config: Optional[SubsetConfig]) -> bool:
    if bounds_checked is not None:
        return bool(bounds_checked)
    if config is not None:
        return config.normalized().bounds_check
    return SubsetConfig.from_env().bounds_check


def _check_bounds(positions: np.ndarray, missing: np.ndarray, length: int) -> None:
    bad = ~missing & ((positions < 0) | (positions > length - 1))
    if not bad.any():
        return
    position = int(positions[np.flatnonzero(bad)[0]])
    if position < 0:
        raise IndexOutOfRangeError("Index error: tried to index < 0", position=position, length=length)
    raise IndexOutOfRangeError(
        "Index error: tried to index above vector size",
        position=position,
        length=length,
    )


def subset(
    source: VectorLike,
    index: Any,
    bounds_checked: Optional[bool] = None,
    *,
    config: Optional[SubsetConfig] = None,
) -> VectorLike:
    """Select the elements of ``source`` addressed by ``index``.

    ``index`` may be any index expression or anything :func:`as_index`
    accepts. An empty index returns an empty vector of the source's kind
    without any further checks. Missing positions produce the kind's missing
    value and, when the source is named, a missing name.

    Raises:
        SizeMismatchError: a logical index whose length differs from ``source``.
        MissingNamesError: a character index on a vector without names.
        IndexOutOfRangeError: an out-of-range position while bounds checking is on.
    """
    check = _resolve_bounds_check(bounds_checked, config)
    expr = as_index(index)
    if len(expr) == 0:
        logger.debug("empty %s index, returning empty %s vector", expr.tag, source.kind.value)
        return source.no_init(0)

    normalized = normalize_index(expr, source)
    positions = normalized.values.astype(np.int64)
    n = positions.shape[0]
    if n == 0:
        logger.debug("%s index selected nothing", expr.tag)
        return source.no_init(0)

    length = len(source)
    missing = normalized.missing_mask()
    if check:
        _check_bounds(positions, missing, length)

    output = source.no_init(n)
    buffer = output.values
    buffer[missing] = source.kind.missing
    present = ~missing
    if present.any():
        buffer[present] = source.take(positions[present])

    names = propagate_names(source.names, positions, length)
    if names is not None:
        output.set_names(names)
    logger.debug(
        "subset %s[%d] by %s index -> %d elements (%d missing, bounds_check=%s)",
        source.kind.value,
        length,
        expr.tag,
        n,
        int(missing.sum()),
        check,
    )
    return output


class Subsetter:
    """Deferred ``subset`` call; evaluated on each conversion."""

    def __init__(self, vector: VectorLike, index: Any, config: Optional[SubsetConfig] = None):
        self.vector = vector
        self.index = index
        self.config = config

    def value(self) -> VectorLike:
        return subset(self.vector, self.index, config=self.config)

    def __len__(self) -> int:
        return len(self.value())

    def __array__(self, dtype=None, copy=None):
        values = self.value().values
        if dtype is not None:
            return values.astype(dtype)
        return values

    def __repr__(self) -> str:
        return f"Subsetter({self.vector!r}, {self.index!r})"

