from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _load_version

from .core.datetime_vector import (
    DATETIME_CLASS,
    get_datetimes,
    is_datetime_vector,
    new_datetime_vector,
)
from .core.exceptions import (
    IndexOutOfRangeError,
    IndexTypeError,
    MissingNamesError,
    SizeMismatchError,
    VecsubError,
)
from .core.index import (
    CharacterIndex,
    IndexExpression,
    IntegerIndex,
    LogicalIndex,
    RealIndex,
    as_index,
    normalize_index,
    which_na,
)
from .core.missing import (
    NA_INTEGER,
    NA_LOGICAL,
    NA_REAL,
    NA_STRING,
    ElementKind,
    is_missing,
    missing_value,
)
from .core.names import match, propagate_names
from .core.subset import SubsetConfig, Subsetter, subset
from .core.vector import Vector, VectorLike

try:
    __version__ = _load_version("vecsub")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "Vector",
    "VectorLike",
    "ElementKind",
    "NA_LOGICAL",
    "NA_INTEGER",
    "NA_REAL",
    "NA_STRING",
    "is_missing",
    "missing_value",
    "IndexExpression",
    "LogicalIndex",
    "IntegerIndex",
    "RealIndex",
    "CharacterIndex",
    "as_index",
    "normalize_index",
    "which_na",
    "match",
    "propagate_names",
    "subset",
    "Subsetter",
    "SubsetConfig",
    "VecsubError",
    "SizeMismatchError",
    "MissingNamesError",
    "IndexOutOfRangeError",
    "IndexTypeError",
    "DATETIME_CLASS",
    "new_datetime_vector",
    "is_datetime_vector",
    "get_datetimes",
    "__version__",
]
