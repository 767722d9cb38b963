"""Registry system for comparators.

This module provides an extensible registry pattern for comparing values of
different array types:
- Comparator: Abstract base for structural comparison of two objects
- ComparatorRegistry: Central registry mapping object types to comparators

The registry lets ``tinytensor.compare`` support new array types by allowing
users to register custom comparators.
"""

import warnings
from abc import ABC, abstractmethod
from typing import Any


class Comparator(ABC):
    """Abstract base class for object comparators.

    Comparators decide whether two objects hold the same shape and the same
    elements. Each comparator is responsible for one object type.

    Subclasses must implement:
    - compare(): Compare two objects and return True if equal

    Examples:
        >>> class MyComparator(Comparator):
        ...     def compare(self, a, b):
        ...         return a.custom_compare(b)
    """

    @abstractmethod
    def compare(self, a: Any, b: Any) -> bool:
        """Compare two objects.

        Args:
            a: First object
            b: Second object

        Returns:
            bool: True if objects are equal, False otherwise
        """
        pass


class ComparatorRegistry:
    """Central registry for managing comparators.

    Maps object types to the comparator that knows how to read them.

    Built-in comparators:
    - tinytensor.tensor.Tensor -> TensorComparator
    - torch.Tensor -> TorchComparator (requires torch at compare time)
    - numpy.ndarray -> NumpyComparator (requires numpy at compare time)
    - default -> DefaultComparator (equality check)

    Attributes:
        _comparators: Dict mapping type names to Comparator instances
    """

    def __init__(self):
        """Initialize registry and register default handlers."""
        self._comparators: dict[str, Comparator] = {}
        self._register_defaults()

    def _register_defaults(self):
        """Register default comparators for built-in types."""
        from .comparators import (
            TensorComparator,
            TorchComparator,
            NumpyComparator,
            DefaultComparator
        )

        self._comparators['tinytensor.tensor.Tensor'] = TensorComparator()
        self._comparators['torch.Tensor'] = TorchComparator()
        self._comparators['numpy.ndarray'] = NumpyComparator()
        self._comparators['default'] = DefaultComparator()

    def register_comparator(self, type_name: str, comparator: Comparator):
        """Register a comparator for a specific object type.

        Args:
            type_name: Fully qualified type name (e.g., "numpy.ndarray")
                or "default" for fallback
            comparator: Comparator instance to handle this type

        Examples:
            >>> registry = ComparatorRegistry()
            >>> registry.register_comparator("my_module.MyType", MyComparator())
        """
        if not isinstance(comparator, Comparator):
            raise TypeError(f"Expected a Comparator, got {type(comparator).__name__}")
        if type_name in self._comparators:
            warnings.warn(f"Replacing the comparator registered for '{type_name}'")
        self._comparators[type_name] = comparator

    def get_comparator(self, a: Any) -> Comparator:
        """Get comparator for an object based on its type.

        Tries to match the object type with registered comparators:
        1. Exact match with fully qualified type name
        2. Match with simple type name
        3. Fallback to default comparator

        Args:
            a: Object whose type determines which comparator to use

        Returns:
            Comparator: Appropriate comparator for this object type
        """
        type_name = f"{type(a).__module__}.{type(a).__name__}"

        # Try exact match
        if type_name in self._comparators:
            return self._comparators[type_name]

        # Try without module name
        simple_name = type(a).__name__
        for key in self._comparators:
            if key.endswith('.' + simple_name):
                return self._comparators[key]

        # Return default
        return self._comparators['default']

    def compare(self, a: Any, b: Any) -> bool:
        """Compare two objects with the comparator registered for ``a``.

        Examples:
            >>> tinytensor.compare(tensor([1, 2]), numpy.array([1, 2]))
            True
        """
        return self.get_comparator(a).compare(a, b)
