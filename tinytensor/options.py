"""Display options shared by every Tensor in the process.

The options live in a single global ``PrintOptions`` instance. The public
functions below are bound to that instance, the same way the package exposes
its other process-wide state.
"""

import contextlib
import dataclasses
import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterator

logger = logging.getLogger(__name__)


@dataclass
class PrintOptions:
    """Options controlling ``str(tensor)``.

    Attributes:
        indent: Number of spaces added per nesting level
        formatter: Callable turning a single element into text (default: repr)
    """

    indent: int = 2
    formatter: Callable[[Any], str] = repr

    def __post_init__(self):
        self._validate()

    def _validate(self):
        if isinstance(self.indent, bool) or not isinstance(self.indent, int):
            raise TypeError(f"indent must be an int, got {type(self.indent).__name__}")
        if self.indent < 0:
            raise ValueError(f"indent must be non-negative, got {self.indent}")
        if not callable(self.formatter):
            raise TypeError("formatter must be callable")

    def set(self, **kwargs):
        """Update one or more options in place.

        Args:
            **kwargs: Option names and their new values

        Raises:
            TypeError: If an option name is unknown or a value has the wrong type
            ValueError: If ``indent`` is negative

        Examples:
            >>> tinytensor.set_printoptions(indent=4)
        """
        known = {field.name for field in dataclasses.fields(self)}
        unknown = sorted(set(kwargs) - known)
        if unknown:
            raise TypeError(f"Unknown print option(s): {', '.join(unknown)}")

        # Validate on a scratch copy so a bad value leaves the options untouched
        dataclasses.replace(self, **kwargs)
        for name, value in kwargs.items():
            setattr(self, name, value)
        logger.debug("print options updated: %s", kwargs)

    def get(self) -> "PrintOptions":
        """Return a detached copy of the current options."""
        return dataclasses.replace(self)

    @contextlib.contextmanager
    def scoped(self, **kwargs) -> Iterator["PrintOptions"]:
        """Temporarily override options, restoring the previous values on exit.

        Examples:
            >>> with tinytensor.printoptions(indent=0):
            ...     print(t)
        """
        saved = self.get()
        self.set(**kwargs)
        try:
            yield self.get()
        finally:
            self.indent = saved.indent
            self.formatter = saved.formatter


# Global instance
_options = PrintOptions()

# Public API - expose methods from the global instance
set_printoptions = _options.set
get_printoptions = _options.get
printoptions = _options.scoped
