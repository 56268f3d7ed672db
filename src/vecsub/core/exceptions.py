from __future__ import annotations

from typing import Optional


class VecsubError(Exception):
    """Base class for vecsub-specific exceptions."""


class SizeMismatchError(VecsubError, ValueError):
    pass


class MissingNamesError(VecsubError, LookupError):
    pass


class IndexTypeError(VecsubError, TypeError):
    pass


class IndexOutOfRangeError(VecsubError, IndexError):
    def __init__(
        self,
        message: str,
        *,
        position: Optional[int] = None,
        length: Optional[int] = None,
    ):
        detail = _format_position(position, length)
        super().__init__(f"{message}{detail}")
        self.position = position
        self.length = length


def _format_position(position: Optional[int], length: Optional[int]) -> str:
    if position is None and length is None:
        return ""
    parts = []
    if position is not None:
        parts.append(f"index {position}")
    if length is not None:
        parts.append(f"length {length}")
    return f" ({', '.join(parts)})"
