from collections.abc import Iterator, Sized
from contextlib import AbstractContextManager, nullcontext
from typing import Optional

import slice_object._src as src

__all__ = ["iter_positions", "positions", "positions_for", "slice_length"]


def positions(adjusted: "src.saturated.AdjustedSlice", /) -> range:
    range_, step, direction = adjusted
    if step is None:
        step = 1
    if direction is src.saturated.Direction.BACKWARD:
        return range(range_.stop - 1, range_.start - 1, -step)
    else:
        return range(range_.start, range_.stop, step)


def iter_positions(adjusted: "src.saturated.AdjustedSlice", /) -> Iterator[int]:
    return iter(positions(adjusted))


def slice_length(adjusted: "src.saturated.AdjustedSlice", /) -> int:
    return len(positions(adjusted))


def positions_for(
    sequence: Sized,
    slice_: "src.slice.Slice",
    /,
    lock: Optional[AbstractContextManager] = None,
) -> range:
    """
    Compute the positions of `sequence` selected by `slice_`.

    Every `__index__` callback runs before `lock` is acquired. The
    length of `sequence` is then read while holding `lock`, and the
    bounds are adjusted to it without leaving the lock.
    """
    resolved = src.saturated.resolve(slice_)
    with nullcontext() if lock is None else lock:
        return positions(resolved.adjust_indices(len(sequence)))
