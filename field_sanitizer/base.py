"""Base class for custom sanitizers.

A custom sanitizer turns one value into another. It is registered once with
@sanitizer_constraint and referenced from rules by its class; the sanitizer
builds a single instance of it on first use.
"""

from abc import ABC, abstractmethod
from typing import Any


class CustomSanitizer(ABC):
    """Abstract base class for custom sanitizers.

    Any class with a transform(value) method can be registered, subclassing
    this one is optional.

    Example:
        @sanitizer_constraint
        class Slugify(CustomSanitizer):
            def transform(self, value):
                return value.lower().replace(" ", "-")
    """

    @abstractmethod
    def transform(self, value: Any) -> Any:
        """Return the sanitized value.

        Args:
            value: Current property value (or sequence item with each=True)

        Returns:
            Value written back onto the object
        """
