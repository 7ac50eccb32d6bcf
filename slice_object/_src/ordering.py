import operator
from collections.abc import Callable, Iterable
from typing import Any, Optional

__all__ = ["compare_field", "identical_or_equal", "lexicographic", "sequence_equal"]

ORDERING_OPERATORS = (operator.lt, operator.le, operator.gt, operator.ge)


def identical_or_equal(a: Any, b: Any, /) -> bool:
    return a is b or bool(a == b)


def compare_field(op: Callable[[Any, Any], Any], a: Any, b: Any, /) -> Optional[bool]:
    """
    Compare one field of two sequences, returning None on a tie.

    Equal fields tie without being ordered, so fields such as `None`
    that only support equality never reach `op`.
    """
    if identical_or_equal(a, b):
        return None
    return bool(op(a, b))


def sequence_equal(pairs: Iterable[tuple[Any, Any]], /) -> bool:
    return all(identical_or_equal(a, b) for a, b in pairs)


def lexicographic(op: Callable[[Any, Any], Any], pairs: Iterable[tuple[Any, Any]], /) -> bool:
    """
    Compare two sequences field by field with one of `<`, `<=`, `>`, `>=`.

    The first pair that does not tie decides the result and later pairs
    are never compared. If every pair ties, the result is True for `<=`
    and `>=` and False for `<` and `>`.
    """
    assert op in ORDERING_OPERATORS
    for a, b in pairs:
        result = compare_field(op, a, b)
        if result is not None:
            return result
    return op is operator.le or op is operator.ge
