"""Comparators for different array types.

This module provides concrete implementations of the Comparator interface:
- TensorComparator: tinytensor Tensors (against Tensors, NumPy arrays, PyTorch tensors)
- TorchComparator: PyTorch tensors (with cross-type and cross-device support)
- NumpyComparator: NumPy arrays (with cross-type support)
- DefaultComparator: Any Python object (using equality)

Comparison is structural and exact: two objects are equal when they have the
same shape and the same elements in row-major order. No tolerance is applied.
"""

from typing import Any

from .registry import Comparator
from .tensor import Tensor


def _flatten(obj: Any):
    """Return ``(shape, flat elements)`` for an array-like object, or None.

    Understands Tensor and anything exposing ``shape`` and ``tolist()``
    (NumPy arrays, PyTorch tensors).
    """
    if isinstance(obj, Tensor):
        return obj.shape, list(obj.data)

    if hasattr(obj, 'detach'):  # PyTorch tensor
        obj = obj.detach().cpu()

    if not (hasattr(obj, 'shape') and hasattr(obj, 'tolist')):
        return None

    shape = tuple(int(dim) for dim in obj.shape)
    if hasattr(obj, 'reshape'):
        flat = obj.reshape(-1).tolist()
    else:
        flat = obj.tolist()
    if not isinstance(flat, list):  # zero-dimensional input
        flat = [flat]
    return shape, flat


class TensorComparator(Comparator):
    """Comparator for tinytensor Tensors.

    The second operand may be another Tensor or any array exposing ``shape``
    and ``tolist()``, so a Tensor can be checked against the NumPy or PyTorch
    array it was built from without importing either library here.

    Examples:
        >>> comparator = TensorComparator()
        >>> comparator.compare(tensor([[1, 2], [3, 4]]), numpy.array([[1, 2], [3, 4]]))
        True
    """

    def compare(self, a, b) -> bool:
        # Reached by simple-name lookup for other libraries' classes named Tensor
        if not isinstance(a, Tensor):
            return a == b

        if isinstance(b, Tensor):
            return a == b

        other = _flatten(b)
        if other is None:
            return False
        shape, flat = other
        return a.shape == shape and list(a.data) == flat


class TorchComparator(Comparator):
    """Comparator for PyTorch tensors using torch.equal().

    Supports:
    - Standard tensor comparison (both sides promoted to a common dtype)
    - Cross-type comparison (PyTorch tensor vs NumPy array or Tensor)
    - Cross-device comparison (CUDA vs CPU, or different CUDA devices)

    Requires: PyTorch (torch)
    """

    def compare(self, a, b) -> bool:
        """Compare a PyTorch tensor with another tensor-like object.

        Raises:
            ImportError: If PyTorch is not installed
        """
        try:
            import torch
        except ImportError:
            raise ImportError("PyTorch is not installed. Cannot compare torch.Tensor")

        if not isinstance(b, torch.Tensor):
            other = _flatten(b)
            return other is not None and _flatten(a) == other

        # Move both tensors to CPU for comparison
        if a.device != b.device:
            a = a.cpu()
            b = b.cpu()

        if a.shape != b.shape:
            return False
        common = torch.promote_types(a.dtype, b.dtype)
        return torch.equal(a.to(common), b.to(common))


class NumpyComparator(Comparator):
    """Comparator for NumPy arrays using numpy.array_equal().

    Supports:
    - Standard array comparison
    - Cross-type comparison (NumPy array vs PyTorch tensor or Tensor)

    Requires: NumPy (numpy)
    """

    def compare(self, a, b) -> bool:
        """Compare a NumPy array with another array-like object.

        Raises:
            ImportError: If NumPy is not installed
        """
        try:
            import numpy as np
        except ImportError:
            raise ImportError("NumPy is not installed. Cannot compare numpy.ndarray")

        if isinstance(b, Tensor):
            return _flatten(a) == _flatten(b)
        if hasattr(b, 'numpy'):  # PyTorch tensor
            b = b.detach().cpu().numpy() if hasattr(b, 'detach') else b.numpy()
        elif hasattr(b, '__array__') or isinstance(b, (list, tuple)):
            b = np.asarray(b)
        else:
            return False
        return a.shape == b.shape and bool(np.array_equal(a, b))


class DefaultComparator(Comparator):
    """Default comparator using Python's equality operator.

    This is the fallback comparator for objects that don't have specialized handlers.

    Examples:
        >>> comparator = DefaultComparator()
        >>> comparator.compare([1, 2, 3], [1, 2, 3])
        True
    """

    def compare(self, a, b) -> bool:
        return a == b
