"""
Custom exceptions for the ordered map.
"""


class OrderedMapError(Exception):
    """Base class for every error raised by OrderedMap."""


class InvalidArgumentError(OrderedMapError, ValueError):
    """
    Raised when an operation receives None where a key or bound is required.

    This is a caller bug and is never recovered internally.
    """

    def __init__(self, operation: str, argument: str = "key"):
        """
        Initialize invalid argument error.

        Args:
            operation: Name of the public operation that was called.
            argument: Name of the argument that was None.
        """
        self.operation = operation
        self.argument = argument
        super().__init__(f"argument '{argument}' to {operation}() is None")


class UnderflowError(OrderedMapError, LookupError):
    """
    Raised when an extremal or positional query cannot be answered.

    Covers min/max/floor/ceiling/delete_min/delete_max on an empty map and
    select() with an index outside [0, size()).
    """

    def __init__(self, operation: str, detail: str | None = None):
        """
        Initialize underflow error.

        Args:
            operation: Name of the public operation that was called.
            detail: Optional explanation. Defaults to the empty-map message.
        """
        self.operation = operation
        self.detail = detail
        if detail is None:
            message = f"called {operation}() with empty symbol table"
        else:
            message = f"called {operation}() with {detail}"
        super().__init__(message)
