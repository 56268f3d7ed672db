from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, List, Optional
from zoneinfo import ZoneInfo

import numpy as np

from .missing import ElementKind
from .vector import Vector

DATETIME_CLASS = ("POSIXct", "POSIXt")


def new_datetime_vector(values: Any, tz: str = "") -> Vector:
    """Real vector of seconds since the epoch tagged as a point-in-time series.

    ``values`` is either a length (allocates that many zeros) or anything
    :class:`Vector` accepts. A non-empty ``tz`` is stored as ``tzone``.
    """
    if isinstance(values, (int, np.integer)) and not isinstance(values, (bool, np.bool_)):
        vec = Vector(np.zeros(int(values), dtype=np.float64), kind=ElementKind.REAL)
    else:
        vec = Vector(values, kind=ElementKind.REAL)
    vec.attrs["class"] = DATETIME_CLASS
    if tz:
        vec.attrs["tzone"] = tz
    return vec


def is_datetime_vector(vector: Vector) -> bool:
    return tuple(vector.attrs.get("class", ())) == DATETIME_CLASS


def get_datetimes(vector: Vector) -> List[Optional[datetime]]:
    """Aware datetimes in the vector's ``tzone``, or UTC when none is stored."""
    tz_name = vector.attrs.get("tzone")
    tz = ZoneInfo(tz_name) if tz_name else timezone.utc
    return [
        None if seconds is None else datetime.fromtimestamp(seconds, tz=tz)
        for seconds in vector.to_list()
    ]
