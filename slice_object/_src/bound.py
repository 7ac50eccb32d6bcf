from typing import Any, Final, TypeVar, Union

__all__ = ["Absent", "AbsentType", "Bound", "bound_value", "is_present"]

Self = TypeVar("Self", bound="AbsentType")


class AbsentType:
    """
    Marks a slice bound that was omitted from the constructor call.

    Distinct from an explicitly passed `None`, which is stored as a
    present value. Both read as `None` through the public accessors.
    """

    __slots__ = ()

    _instance = None

    def __new__(cls: type[Self], /) -> Self:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self: Self, /) -> bool:
        return False

    def __reduce__(self: Self, /) -> str:
        return "Absent"

    def __repr__(self: Self, /) -> str:
        return "Absent"


Absent: Final[AbsentType] = AbsentType()

Bound = Union[AbsentType, Any]


def bound_value(bound: Bound, /) -> Any:
    return None if bound is Absent else bound


def is_present(bound: Bound, /) -> bool:
    return bound is not Absent
