__all__ = ["InvalidArgument", "TypeConversion"]


class InvalidArgument(ValueError):
    """Raised for a malformed slice: bad arity, a zero step, or a negative length."""


class TypeConversion(TypeError):
    """Raised when a bound cannot be interpreted as an integer index."""
