"""Core modules for vecsub."""

__all__ = [
    "datetime_vector",
    "exceptions",
    "index",
    "missing",
    "names",
    "subset",
    "vector",
]
