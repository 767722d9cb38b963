"""tinytensor - A minimal N-dimensional array value type.

tinytensor provides an immutable Tensor: a flat, contiguous buffer plus shape
and row-major stride metadata. It checks that the buffer fills the shape,
compares tensors structurally and renders them as nested brackets. It does
not do arithmetic.

Main Features:
- Validated construction from flat data and a shape
- zeros() factory and nested-list literal builders up to rank 3
- Recursive nested-bracket display with configurable indentation
- Structural comparison against NumPy arrays and PyTorch tensors
- No required dependencies (NumPy and PyTorch are optional)

Quick Start:
    >>> import tinytensor
    >>> t = tinytensor.tensor([[1, 2], [3, 4]])
    >>> t.shape, t.strides
    ((2, 2), (2, 1))
    >>> print(t)
    [
      [1, 2],
      [3, 4]
    ]
    >>> tinytensor.zeros([2, 3], dtype=int).data
    (0, 0, 0, 0, 0, 0)

Public API:
    Tensor(data, shape): Validated constructor (raises ShapeError)
    zeros(shape, dtype): Tensor filled with dtype()
    tensor(literal), tensor1d(), tensor2d(), tensor3d(): Literal builders
    compare(a, b): Structural comparison across array types
    set_printoptions(), get_printoptions(), printoptions(): Display options
"""

from .errors import TensorError, ShapeError
from .tensor import Tensor, compute_strides
from .creation import zeros, tensor, tensor1d, tensor2d, tensor3d
from .options import PrintOptions, set_printoptions, get_printoptions, printoptions
from .registry import Comparator, ComparatorRegistry

# Global instance
_registry = ComparatorRegistry()

# Public API - expose methods from the global instance
compare = _registry.compare
register_comparator = _registry.register_comparator

__version__ = "0.1.0"
__all__ = [
    "Tensor",
    "TensorError",
    "ShapeError",
    "compute_strides",
    "zeros",
    "tensor",
    "tensor1d",
    "tensor2d",
    "tensor3d",
    "PrintOptions",
    "set_printoptions",
    "get_printoptions",
    "printoptions",
    "Comparator",
    "ComparatorRegistry",
    "compare",
    "register_comparator",
]
