"""
The slice value type of a dynamic-language object model, written in
Python 3. Includes exact index normalization for introspection and an
overflow-safe, two-phase resolve/adjust conversion for indexing
sequences whose length is only known at the point of use.
"""
from ._src.bound import Absent
from ._src.errors import InvalidArgument, TypeConversion
from ._src.indices import normalize_indices
from ._src.positions import iter_positions, positions, positions_for, slice_length
from ._src.saturated import (
    ISIZE_MAX,
    ISIZE_MIN,
    USIZE_MAX,
    AdjustedSlice,
    Direction,
    SaturatedSlice,
    adjust,
    resolve,
    saturate_index,
)
from ._src.slice import Slice

__all__ = [
    "Absent",
    "AdjustedSlice",
    "Direction",
    "ISIZE_MAX",
    "ISIZE_MIN",
    "InvalidArgument",
    "SaturatedSlice",
    "Slice",
    "TypeConversion",
    "USIZE_MAX",
    "adjust",
    "iter_positions",
    "normalize_indices",
    "positions",
    "positions_for",
    "resolve",
    "saturate_index",
    "slice_length",
]

__version__ = "0.1.0"
