from vecsub import IndexOutOfRangeError, SubsetConfig, Subsetter, Vector, subset

counts = Vector([3, 1, 4, 1, 5], names=["a", "b", "c", "d", "e"])

try:
    subset(counts, [0, 9])
except IndexOutOfRangeError as exc:
    print(f"rejected: {exc}")

# Missing positions pass through either way.
print(subset(counts, [4, None, 0], bounds_checked=False))

# Unchecked gathers are handed to NumPy; a negative position counts from the end
# and gets a missing name.
lazy = Subsetter(counts, [-1], config=SubsetConfig(bounds_check=False))
print(lazy.value())
