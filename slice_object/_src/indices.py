import slice_object._src as src

from .errors import InvalidArgument
from .index import to_index

__all__ = ["normalize_indices"]


def normalize_indices(slice_: "src.slice.Slice", length: int, /) -> tuple[int, int, int]:
    """
    Compute the exact `(start, stop, step)` visited by `slice_` over a
    sequence of `length` elements.

    Bounds are coerced in the order step, start, stop. Arithmetic is on
    Python integers, so arbitrarily large bounds are clamped rather than
    saturated. The caller is responsible for rejecting a negative length.
    """
    # Step.
    if slice_.step is None:
        step = 1
    else:
        step = to_index(slice_.step)
        if step == 0:
            raise InvalidArgument("slice step cannot be zero")
    backwards = step < 0
    # -1 is one before index 0, only reachable while walking backwards.
    lower = -1 if backwards else 0
    upper = lower + length if backwards else length
    # Start.
    if slice_.start is None:
        start = upper if backwards else lower
    else:
        start = to_index(slice_.start)
        if start < 0:
            start += length
            if start < lower:
                start = lower
        elif start > upper:
            start = upper
    # Stop.
    if slice_.stop is None:
        stop = lower if backwards else upper
    else:
        stop = to_index(slice_.stop)
        if stop < 0:
            stop += length
            if stop < lower:
                stop = lower
        elif stop > upper:
            stop = upper
    return (start, stop, step)
