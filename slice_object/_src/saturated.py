import logging
import sys
from enum import Enum
from typing import Any, Final, NamedTuple, Optional, TypeVar

import slice_object._src as src

from .errors import InvalidArgument
from .index import to_index_or_none

__all__ = [
    "ISIZE_MAX",
    "ISIZE_MIN",
    "USIZE_MAX",
    "AdjustedSlice",
    "Direction",
    "SaturatedSlice",
    "adjust",
    "resolve",
    "saturate_index",
]

logger = logging.getLogger(__name__)

ISIZE_MAX = sys.maxsize
ISIZE_MIN = -sys.maxsize - 1
USIZE_MAX = 2 * sys.maxsize + 1

Self = TypeVar("Self", bound="SaturatedSlice")


class Direction(Enum):
    FORWARD = "forward"
    BACKWARD = "backward"


class AdjustedSlice(NamedTuple):
    """
    The positions selected by a slice once adjusted to a concrete length.

    `range` is a unit step range within `[0, length]`. Positions are
    visited from `range.start` upwards for `Direction.FORWARD`, or from
    `range.stop - 1` downwards for `Direction.BACKWARD`, advancing by
    `step` each time. A `step` of None means no element after the first.
    """
    range: range
    step: Optional[int]
    direction: Direction

    def positions(self, /) -> range:
        return src.positions.positions(self)


def _saturate(value: int, /) -> int:
    if value > ISIZE_MAX:
        return ISIZE_MAX
    elif value < ISIZE_MIN:
        return ISIZE_MIN
    else:
        return value


def _resolve_bound(name: str, obj: Any, /) -> Optional[int]:
    # Calls the bound's __index__ at most once.
    value = to_index_or_none(obj)
    if value is None:
        return None
    saturated = _saturate(value)
    if saturated != value:
        logger.debug("slice %s %d saturated to %d", name, value, saturated)
    return saturated


def _saturating_add(a: int, b: int, /) -> int:
    return _saturate(a + b)


def _saturating_abs(a: int, /) -> int:
    # abs(ISIZE_MIN) has no signed counterpart.
    return ISIZE_MAX if a == ISIZE_MIN else abs(a)


def saturate_index(p: int, length: int, /) -> int:
    """Clamp a machine index `p` into `[0, length]`, counting negatives from the end."""
    length = min(length, ISIZE_MAX)
    if p < 0:
        p += length
        if p < 0:
            p = 0
    if p > length:
        p = length
    return p


class SaturatedSlice:
    """
    A slice whose bounds have been resolved to machine-width integers in
    `[ISIZE_MIN, ISIZE_MAX]`.

    Resolution runs every `__index__` callback, so it must happen before
    the caller looks at the sequence it is about to index: a callback
    may mutate the sequence or take a lock the caller is about to hold.
    Adjustment to a length afterwards is plain arithmetic.
    """
    _start: Final[int]
    _stop: Final[int]
    _step: Final[int]

    __slots__ = {
        "_start":
            "The resolved starting index.",
        "_stop":
            "The resolved stopping index.",
        "_step":
            "The resolved non-zero step.",
    }

    def __new__(cls: type[Self], start: int, stop: int, step: int, /) -> Self:
        if step == 0:
            raise InvalidArgument("slice step cannot be zero")
        self = super().__new__(cls)
        self._start = _saturate(start)
        self._stop = _saturate(stop)
        self._step = _saturate(step)
        return self

    def __eq__(self: Self, other: Any, /) -> bool:
        if not isinstance(other, SaturatedSlice):
            return NotImplemented
        return (self._start, self._stop, self._step) == (other._start, other._stop, other._step)

    def __hash__(self: Self, /) -> int:
        return hash((type(self), self._start, self._stop, self._step))

    def __reduce__(self: Self, /) -> tuple[type[Self], tuple[int, int, int]]:
        return (type(self), (self._start, self._stop, self._step))

    def __repr__(self: Self, /) -> str:
        return f"{type(self).__name__}({self._start!r}, {self._stop!r}, {self._step!r})"

    @classmethod
    def with_slice(cls: type[Self], slice_: "src.slice.Slice", /) -> Self:
        # Step decides the defaults, so it is resolved first.
        step = _resolve_bound("step", slice_.step)
        if step is None:
            step = 1
        elif step == 0:
            raise InvalidArgument("slice step cannot be zero")
        start = _resolve_bound("start", slice_.start)
        if start is None:
            start = ISIZE_MAX if step < 0 else 0
        stop = _resolve_bound("stop", slice_.stop)
        if stop is None:
            stop = ISIZE_MIN if step < 0 else ISIZE_MAX
        return cls(start, stop, step)

    def adjust_indices(self: Self, length: int, /) -> AdjustedSlice:
        """
        Adjust the resolved bounds to a sequence of `length` elements.

        Never calls back into user code, so it may run while the caller
        holds a lock on the sequence.
        """
        if length < 0:
            raise InvalidArgument("length should not be negative")
        ilen = min(length, ISIZE_MAX)
        start, stop, step = self._start, self._stop, self._step
        if step < 0:
            # Walk the same positions forwards over a half-open range.
            start, stop = (
                _saturating_add(ilen, 1) if stop == -1 else _saturating_add(stop, 1),
                ilen if start == -1 else _saturating_add(start, 1),
            )
            step = _saturating_abs(step)
            direction = Direction.BACKWARD
        else:
            direction = Direction.FORWARD
        magnitude = step if step <= USIZE_MAX else None
        range_ = range(saturate_index(start, length), saturate_index(stop, length))
        if range_.start >= range_.stop:
            range_ = range(range_.start, range_.start)
        elif magnitude is None:
            # Only the first element can be reached.
            if direction is Direction.BACKWARD:
                range_ = range(range_.stop - 1, range_.stop)
            else:
                range_ = range(range_.start, range_.start + 1)
        return AdjustedSlice(range_, magnitude, direction)

    @property
    def start(self: Self, /) -> int:
        return self._start

    @property
    def step(self: Self, /) -> int:
        return self._step

    @property
    def stop(self: Self, /) -> int:
        return self._stop


def resolve(slice_: "src.slice.Slice", /) -> SaturatedSlice:
    return SaturatedSlice.with_slice(slice_)


def adjust(resolved: SaturatedSlice, length: int, /) -> AdjustedSlice:
    return resolved.adjust_indices(length)
