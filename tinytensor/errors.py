"""Error types raised by tinytensor.

Only mismatches between a flat buffer and its shape are reported through this
hierarchy. Programmer errors (ragged literals, negative dimensions, element
count overflow) use the built-in exceptions instead.
"""


class TensorError(Exception):
    """Base class for all recoverable tinytensor errors.

    Attributes:
        message: Human-readable description without the error kind prefix
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{type(self).__name__}: {self.message}"

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.message == other.message

    def __hash__(self):
        return hash((type(self).__name__, self.message))


class ShapeError(TensorError):
    """Raised when the data length does not match the product of the shape.

    Examples:
        >>> try:
        ...     Tensor([1, 2, 3], [2, 3])
        ... except ShapeError as e:
        ...     print(e)
        ShapeError: data length 3 does not match shape (2, 3) (expected 6 elements)
    """
