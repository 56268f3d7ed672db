import numpy as np

from vecsub import (
    CharacterIndex,
    LogicalIndex,
    RealIndex,
    Vector,
    get_datetimes,
    new_datetime_vector,
    subset,
)

temps = Vector(
    np.array([21.5, 19.0, 23.25, 18.75]),
    names=["mon", "tue", "wed", "thu"],
)

# Labels absent from the names come back missing, with a missing name.
print(subset(temps, CharacterIndex(["wed", "sun", "mon"])))

# Missing mask entries keep their slot; false entries are dropped.
print(subset(temps, LogicalIndex([True, False, None, True])))

# Reals truncate toward zero.
print(subset(temps, RealIndex([3.9, 0.2])))

stamps = new_datetime_vector([1_700_000_000.0, 1_700_086_400.0], tz="UTC")
print(stamps.attrs, get_datetimes(stamps))
