"""Convenience constructors for Tensor.

- zeros(): a Tensor of a given shape filled with the element type's default value
- tensor1d(), tensor2d(), tensor3d(): build a Tensor from nested list literals
- tensor(): pick the right builder from the nesting depth of the literal

All of them produce a flat buffer and a shape and hand both to the Tensor
constructor. Inconsistent literals (ragged rows, blocks of different sizes,
empty levels) are programming errors and raise ValueError instead of being
padded or truncated.
"""

import logging
import math
import sys
from typing import Any, Callable, Iterable, Sequence

from .tensor import Tensor, _normalize_shape

logger = logging.getLogger(__name__)

_NESTED = (list, tuple)


def zeros(shape: Iterable[int], dtype: Callable[[], Any] = float) -> Tensor:
    """Create a Tensor of the given shape filled with ``dtype()``.

    Args:
        shape: Size of each dimension; an empty shape gives a scalar
        dtype: Zero-argument callable returning the default element
            (``float`` -> 0.0, ``int`` -> 0, ``bool`` -> False, ...)

    Returns:
        Tensor: Every element equals ``dtype()``

    Raises:
        OverflowError: If the element count exceeds ``sys.maxsize``

    Examples:
        >>> zeros([2, 3], dtype=int).data
        (0, 0, 0, 0, 0, 0)
    """
    dims = _normalize_shape(shape)
    count = math.prod(dims)
    if count > sys.maxsize:
        logger.debug("zeros: element count %d for shape %r overflows", count, dims)
        raise OverflowError(
            f"zeros: shape {dims} holds {count} elements, more than the platform "
            f"limit of {sys.maxsize}"
        )
    return Tensor([dtype()] * count, dims)


def _reject(message: str) -> ValueError:
    logger.debug(message)
    return ValueError(message)


def _scalars(items: Any, builder: str) -> list:
    """Check one innermost level of a literal and return it as a list."""
    if not isinstance(items, _NESTED):
        raise _reject(f"{builder}: expected a list of values, got {type(items).__name__}")
    if not items:
        raise _reject(f"{builder}: a literal level must contain at least one element")
    for item in items:
        if isinstance(item, _NESTED):
            raise _reject(f"{builder}: expected scalar values, found a nested {type(item).__name__}")
    return list(items)


def _nested(items: Any, builder: str) -> Sequence:
    """Check one outer level of a literal; its elements must all be lists."""
    if not isinstance(items, _NESTED):
        raise _reject(f"{builder}: expected a list of lists, got {type(items).__name__}")
    if not items:
        raise _reject(f"{builder}: a literal level must contain at least one element")
    for item in items:
        if not isinstance(item, _NESTED):
            raise _reject(f"{builder}: expected nested lists, found a {type(item).__name__}")
    return items


def tensor1d(values: Sequence[Any]) -> Tensor:
    """Build a 1D Tensor from a flat list.

    Examples:
        >>> tensor1d([1, 2, 3]).shape
        (3,)
    """
    data = _scalars(values, "tensor1d")
    return Tensor(data, [len(data)])


def tensor2d(rows: Sequence[Sequence[Any]]) -> Tensor:
    """Build a 2D Tensor from a list of equal-length rows.

    Rows are concatenated top to bottom.

    Raises:
        ValueError: If the rows differ in length or any level is empty

    Examples:
        >>> tensor2d([[1, 2], [3, 4]]).data
        (1, 2, 3, 4)
    """
    rows = [_scalars(row, "tensor2d") for row in _nested(rows, "tensor2d")]
    d1 = len(rows)
    d2 = len(rows[0])
    if not all(len(row) == d2 for row in rows):
        raise _reject("tensor2d: all rows must have the same length")

    data = [value for row in rows for value in row]
    return Tensor(data, [d1, d2])


def tensor3d(blocks: Sequence[Sequence[Sequence[Any]]]) -> Tensor:
    """Build a 3D Tensor from a list of equally sized 2D blocks.

    Every block must have the same number of rows as the first block and every
    row the same length as the first block's first row.

    Raises:
        ValueError: If the blocks or rows differ in size or any level is empty

    Examples:
        >>> tensor3d([[[1, 2], [3, 4]], [[5, 6], [7, 8]]]).shape
        (2, 2, 2)
    """
    layers = [
        [_scalars(row, "tensor3d") for row in _nested(block, "tensor3d")]
        for block in _nested(blocks, "tensor3d")
    ]
    d1 = len(layers)
    d2 = len(layers[0])
    d3 = len(layers[0][0])
    if not all(len(m) == d2 and all(len(r) == d3 for r in m) for m in layers):
        raise _reject("tensor3d: all inner 2D matrices must have equal sizes")

    data = [value for block in layers for row in block for value in row]
    return Tensor(data, [d1, d2, d3])


_BUILDERS = {1: tensor1d, 2: tensor2d, 3: tensor3d}


def tensor(literal: Sequence[Any]) -> Tensor:
    """Build a Tensor from a nested list literal of rank 1, 2 or 3.

    The rank is the nesting depth along the first elements; the matching
    builder then checks that the rest of the literal agrees with it.

    Raises:
        ValueError: If the literal is not a list, is empty at some level,
            is nested deeper than 3 levels, or is inconsistent

    Examples:
        >>> tensor([1, 2, 3]).shape
        (3,)
        >>> tensor([[1, 2], [3, 4]]).shape
        (2, 2)
        >>> tensor([[[1, 2], [3, 4]], [[5, 6], [7, 8]]]).shape
        (2, 2, 2)
    """
    depth = 0
    level = literal
    while isinstance(level, _NESTED):
        if not level:
            raise _reject("tensor: a literal level must contain at least one element")
        depth += 1
        level = level[0]

    if depth == 0:
        raise _reject(f"tensor: expected a list literal, got {type(literal).__name__}")
    if depth not in _BUILDERS:
        raise _reject(f"tensor: literals are supported up to rank 3, got rank {depth}")
    return _BUILDERS[depth](literal)
