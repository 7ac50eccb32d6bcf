import operator
from typing import Any, Optional

from .errors import TypeConversion

__all__ = ["has_index", "to_index", "to_index_or_none"]


def has_index(obj: Any, /) -> bool:
    return hasattr(type(obj), "__index__")


def to_index(obj: Any, /, message: Optional[str] = None) -> int:
    """
    Interpret `obj` as an exact integer through its `__index__` method.

    The method is looked up on the type and called exactly once. Errors
    raised from inside a user-defined `__index__` propagate unchanged;
    only a missing `__index__` is reported as `TypeConversion`, with
    `message` formatted with the name of the offending type.
    """
    if not has_index(obj):
        if message is not None:
            raise TypeConversion(message.format(type(obj).__name__))
        raise TypeConversion(
            "slice indices must be integers or None or have an __index__ method,"
            f" not {type(obj).__name__!r}"
        )
    return operator.index(obj)


def to_index_or_none(obj: Any, /) -> Optional[int]:
    return None if obj is None else to_index(obj)
