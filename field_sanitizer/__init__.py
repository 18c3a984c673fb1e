"""Declarative, class-level sanitation of object properties.

Declare rules once per property, then sanitize instances in one call:

    from field_sanitizer import rules_for, sanitize

    rules_for(Post).trim("title").escape("title").nested("tags", each=True)
    sanitize(post)
"""

from .base import CustomSanitizer
from .core.constants import SanitizeType
from .core.exceptions import (
    CircularReferenceError,
    ConfigurationError,
    NestingDepthError,
    NestingError,
    SanitizerError,
    TypeMismatchError,
)
from .declarations import (
    RuleBuilder,
    declare,
    register_transformer_class,
    rules_for,
    sanitizer_constraint,
)
from .metadata import MetadataStorage, SanitationMetadata, default_metadata_storage, get_metadata_storage
from .sanitizer import Sanitizer, default_sanitizer, sanitize, sanitize_async

__version__ = "1.0.0"

__all__ = [
    # Engine
    "Sanitizer",
    "default_sanitizer",
    "sanitize",
    "sanitize_async",
    # Declarations
    "RuleBuilder",
    "declare",
    "register_transformer_class",
    "rules_for",
    "sanitizer_constraint",
    "CustomSanitizer",
    "SanitizeType",
    # Metadata
    "MetadataStorage",
    "SanitationMetadata",
    "default_metadata_storage",
    "get_metadata_storage",
    # Errors
    "SanitizerError",
    "ConfigurationError",
    "TypeMismatchError",
    "NestingError",
    "CircularReferenceError",
    "NestingDepthError",
]
