"""The Tensor value type.

A Tensor is a flat, contiguous buffer of elements plus the metadata needed to
read it as an N-dimensional array:

- shape: size of each dimension, outermost first
- strides: number of elements to skip in the buffer to move one step along
  each dimension, derived from the shape in row-major order

Tensors are immutable. The constructor is the only place where the buffer
length is checked against the shape, and every other way of building a
Tensor goes through it.
"""

import copy
import logging
import math
from typing import Any, Iterable

from . import options
from .errors import ShapeError

logger = logging.getLogger(__name__)


def _normalize_shape(shape: Iterable[int]) -> tuple[int, ...]:
    """Materialize a shape descriptor and check every dimension.

    Raises:
        TypeError: If a dimension is not an int
        ValueError: If a dimension is negative
    """
    dims = tuple(shape)
    for axis, dim in enumerate(dims):
        if isinstance(dim, bool) or not isinstance(dim, int):
            logger.debug("rejected shape %r: non-integer dimension at axis %d", dims, axis)
            raise TypeError(
                f"Shape dimensions must be int, got {type(dim).__name__} at axis {axis}"
            )
        if dim < 0:
            logger.debug("rejected shape %r: negative dimension at axis %d", dims, axis)
            raise ValueError(f"Shape dimensions must be non-negative, got {dim} at axis {axis}")
    return dims


def compute_strides(shape: Iterable[int]) -> tuple[int, ...]:
    """Compute row-major strides for a shape.

    The last dimension has stride 1 and every other dimension's stride is the
    next stride times the next dimension's size. Zero-size dimensions follow
    the same recurrence.

    Args:
        shape: Size of each dimension, outermost first

    Returns:
        tuple: One stride per dimension (empty for a scalar shape)

    Examples:
        >>> compute_strides((2, 3, 4))
        (12, 4, 1)
        >>> compute_strides(())
        ()
    """
    dims = tuple(shape)
    strides = [0] * len(dims)
    stride = 1
    for axis in range(len(dims) - 1, -1, -1):
        strides[axis] = stride
        stride *= dims[axis]
    return tuple(strides)


def _format_dims(data, offset, shape, strides, depth, opts) -> str:
    """Render the block of ``data`` starting at ``offset`` for the remaining dims."""
    if len(shape) == 1:
        items = data[offset:offset + shape[0]]
        return "[" + ", ".join(opts.formatter(item) for item in items) + "]"

    pad = " " * (opts.indent * (depth + 1))
    children = [
        pad + _format_dims(data, offset + i * strides[0], shape[1:], strides[1:], depth + 1, opts)
        for i in range(shape[0])
    ]
    return "[\n" + ",\n".join(children) + "\n" + " " * (opts.indent * depth) + "]"


def _nest(data, offset, shape, strides) -> list:
    if len(shape) == 1:
        return list(data[offset:offset + shape[0]])
    return [_nest(data, offset + i * strides[0], shape[1:], strides[1:]) for i in range(shape[0])]


class Tensor:
    """An immutable N-dimensional array with a contiguous row-major layout.

    Attributes:
        data: Flat tuple holding every element, in row-major order
        shape: Size of each dimension (e.g. ``(2, 3)`` for a 2x3 matrix)
        strides: Elements to skip in ``data`` to move one step along each dimension

    Examples:
        >>> t = Tensor([1, 2, 3, 4, 5, 6], [2, 3])
        >>> t.shape, t.strides
        ((2, 3), (3, 1))
        >>> print(t)
        [
          [1, 2, 3],
          [4, 5, 6]
        ]
    """

    __slots__ = ("_data", "_shape", "_strides")

    def __init__(self, data: Iterable[Any], shape: Iterable[int]):
        """Create a Tensor, checking that ``data`` fills ``shape`` exactly.

        Args:
            data: Elements in row-major order
            shape: Size of each dimension; an empty shape is a scalar

        Raises:
            ShapeError: If ``len(data)`` differs from the product of ``shape``
            TypeError: If a dimension is not an int
            ValueError: If a dimension is negative
        """
        dims = _normalize_shape(shape)
        values = tuple(data)
        expected = math.prod(dims)
        if len(values) != expected:
            logger.debug("rejected %d elements for shape %r", len(values), dims)
            raise ShapeError(
                f"data length {len(values)} does not match shape {dims} "
                f"(expected {expected} elements)"
            )

        object.__setattr__(self, "_data", values)
        object.__setattr__(self, "_shape", dims)
        object.__setattr__(self, "_strides", compute_strides(dims))

    @classmethod
    def new(cls, data: Iterable[Any], shape: Iterable[int]) -> "Tensor":
        """Alias for the constructor; see ``Tensor.__init__``."""
        return cls(data, shape)

    @property
    def data(self) -> tuple:
        return self._data

    @property
    def shape(self) -> tuple[int, ...]:
        return self._shape

    @property
    def strides(self) -> tuple[int, ...]:
        return self._strides

    @property
    def ndim(self) -> int:
        return len(self._shape)

    @property
    def size(self) -> int:
        return len(self._data)

    def tolist(self):
        """Return the elements as nested lists mirroring the shape.

        A scalar (empty shape) returns its single element.
        """
        if not self._shape:
            return self._data[0]
        return _nest(self._data, 0, self._shape, self._strides)

    def copy(self) -> "Tensor":
        return Tensor(self._data, self._shape)

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return Tensor(copy.deepcopy(self._data, memo), self._shape)

    def __reduce__(self):
        # Rebuild through the validated constructor; slot restore would hit __setattr__
        return (Tensor, (self._data, self._shape))

    def __setattr__(self, name, value):
        raise AttributeError(f"'{type(self).__name__}' object is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"'{type(self).__name__}' object is immutable")

    def __eq__(self, other):
        if not isinstance(other, Tensor):
            return NotImplemented
        return self._shape == other._shape and self._data == other._data

    def __hash__(self):
        return hash((self._data, self._shape))

    def __repr__(self):
        return (
            f"Tensor(data={list(self._data)!r}, shape={list(self._shape)!r}, "
            f"strides={list(self._strides)!r})"
        )

    def __str__(self):
        # Scalars and tensors with a zero-size dimension have nothing to nest
        if not self._shape or not self._data:
            return "[]"
        return _format_dims(self._data, 0, self._shape, self._strides, 0, options._options)
