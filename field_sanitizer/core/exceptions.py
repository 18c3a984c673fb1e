"""Custom Exceptions for Sanitation Errors.

This module defines the exception classes raised by the sanitation engine and
the metadata registry. They split into two families:

Configuration errors are defects in the declarations themselves:
- An unknown sanitation type
- A custom sanitizer class that was never registered
- A custom sanitizer that does not expose transform()

Data shape errors come from the instance being sanitized:
- A non-sequence value on a field declared with each=True
- A circular or too deep graph of nested objects

Malformed input values are never errors. Conversions such as to_int or
normalize_email return a sentinel (nan, None, False) instead of raising.
"""


class SanitizerError(Exception):
    """Base exception for all sanitation errors."""
    pass


class ConfigurationError(SanitizerError):
    """A declaration is malformed.

    Raised for unknown sanitation types and for custom sanitizers that are
    not registered or cannot be used. Not retried: the declaration must be
    fixed.
    """

    def __init__(self, message: str, sanitize_type=None, value=None):
        super().__init__(message)
        self.sanitize_type = sanitize_type
        self.value = value


class TypeMismatchError(SanitizerError):
    """A field declared with each=True does not hold a sequence."""

    def __init__(self, message: str, property_name: str | None = None, value=None):
        super().__init__(message)
        self.property_name = property_name
        self.value = value


class NestingError(SanitizerError):
    """Base exception for unsupported graphs of nested objects."""
    pass


class CircularReferenceError(NestingError):
    """A nested object refers back to an object already being sanitized."""
    pass


class NestingDepthError(NestingError):
    """Nested objects go deeper than the configured maximum depth."""
    pass
