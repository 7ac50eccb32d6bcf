import operator
from collections.abc import Iterator
from copy import deepcopy
from typing import Any, Final, TypeVar

from .bound import Absent, Bound, bound_value, is_present
from .errors import InvalidArgument
from .index import to_index
from .indices import normalize_indices
from .ordering import lexicographic, sequence_equal
from .saturated import SaturatedSlice

__all__ = ["Slice"]

Self = TypeVar("Self", bound="Slice")


class Slice:
    """
    Slice([start,] stop[, step])

    An immutable start/stop/step triple describing a sub-range of a
    sequence whose length is only known when the slice is used.

    Bounds are stored as given, without coercion. Omitted bounds are
    kept apart from an explicit `None` internally, but both read as
    `None`. Use `indices` for exact positions or `to_saturated` to
    resolve the bounds ahead of indexing a sequence.
    """
    _start: Final[Bound]
    _stop: Final[Any]
    _step: Final[Bound]

    __slots__ = {
        "_start":
            "The starting bound, or Absent if omitted.",
        "_stop":
            "The stopping bound, always given.",
        "_step":
            "The step bound, or Absent if omitted.",
    }

    def __new__(cls: type[Self], /, *args: Any) -> Self:
        if len(args) == 0:
            raise InvalidArgument(f"{cls.__name__}() must have at least one argument")
        elif len(args) > 3:
            raise InvalidArgument(f"{cls.__name__}() takes at most 3 arguments, got {len(args)}")
        self = super().__new__(cls)
        if len(args) == 1:
            self._start = Absent
            self._stop, = args
            self._step = Absent
        else:
            self._start = args[0]
            self._stop = args[1]
            self._step = args[2] if len(args) == 3 else Absent
        return self

    def __copy__(self: Self, /) -> Self:
        return self

    def __deepcopy__(self: Self, memo: dict[int, Any], /) -> Self:
        return type(self)(*deepcopy(self.__args(), memo))

    def __args(self: Self, /) -> tuple[Any, ...]:
        if not is_present(self._start):
            return (self._stop,)
        elif not is_present(self._step):
            return (self._start, self._stop)
        else:
            return (self._start, self._stop, self._step)

    def __fields(self: Self, /) -> Iterator[Any]:
        yield bound_value(self._start)
        yield self._stop
        yield bound_value(self._step)

    def __eq__(self: Self, other: Any, /) -> bool:
        if not isinstance(other, Slice):
            return NotImplemented
        return sequence_equal(zip(self.__fields(), other.__fields()))

    def __ge__(self: Self, other: Any, /) -> bool:
        if not isinstance(other, Slice):
            return NotImplemented
        return lexicographic(operator.ge, zip(self.__fields(), other.__fields()))

    def __gt__(self: Self, other: Any, /) -> bool:
        if not isinstance(other, Slice):
            return NotImplemented
        return lexicographic(operator.gt, zip(self.__fields(), other.__fields()))

    __hash__ = None

    def __le__(self: Self, other: Any, /) -> bool:
        if not isinstance(other, Slice):
            return NotImplemented
        return lexicographic(operator.le, zip(self.__fields(), other.__fields()))

    def __lt__(self: Self, other: Any, /) -> bool:
        if not isinstance(other, Slice):
            return NotImplemented
        return lexicographic(operator.lt, zip(self.__fields(), other.__fields()))

    def __ne__(self: Self, other: Any, /) -> bool:
        if not isinstance(other, Slice):
            return NotImplemented
        return not sequence_equal(zip(self.__fields(), other.__fields()))

    def __reduce__(self: Self, /) -> tuple[type[Self], tuple[Any, ...]]:
        return (type(self), self.__args())

    def __repr__(self: Self, /) -> str:
        start, stop, step = self.__fields()
        return f"slice({start!r}, {stop!r}, {step!r})"

    def indices(self: Self, length: int, /) -> tuple[int, int, int]:
        """
        S.indices(len) -> (start, stop, stride)

        Assuming a sequence of length len, calculate the start and stop
        indices, and the stride length of the extended slice described
        by S. Out of bounds indices are clipped in a manner consistent
        with the handling of normal slices.
        """
        length = to_index(length, "{!r} object cannot be interpreted as an integer")
        if length < 0:
            raise InvalidArgument("length should not be negative")
        return normalize_indices(self, length)

    @property
    def start(self: Self, /) -> Any:
        return bound_value(self._start)

    @property
    def step(self: Self, /) -> Any:
        return bound_value(self._step)

    @property
    def stop(self: Self, /) -> Any:
        return self._stop

    def to_saturated(self: Self, /) -> SaturatedSlice:
        return SaturatedSlice.with_slice(self)
