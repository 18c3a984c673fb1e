"""Declaration API.

Rules are declared once per property, normally right after the class body:

    class Post:
        title: str
        tags: list[Tag]

    (rules_for(Post)
        .trim("title")
        .escape("title")
        .nested("tags", each=True))

declare() is the single entry point into the metadata storage; the builder
methods are thin wrappers around it.
"""

from typing import Any, Optional, TypeVar

from pydantic import ValidationError

from .core.constants import ErrorMessages, SanitizeType
from .core.exceptions import ConfigurationError
from .metadata import MetadataStorage, SanitationMetadata, default_metadata_storage

C = TypeVar("C", bound=type)


def declare(
    target: type,
    property_name: str,
    sanitize_type: SanitizeType | int | str,
    value: Any = None,
    *,
    each: bool = False,
    storage: Optional[MetadataStorage] = None,
) -> SanitationMetadata:
    """Declare a sanitation rule on a class property.

    Args:
        target: Class owning the property
        property_name: Property to sanitize (does not need to exist yet)
        sanitize_type: Sanitation to apply
        value: Type-specific argument (chars, flag, radix, custom sanitizer class)
        each: The property holds a sequence and every item is sanitized
        storage: Metadata storage (default: process-wide storage)

    Returns:
        The registered metadata

    Raises:
        ConfigurationError: If target is not a class or property_name is empty
    """
    if not isinstance(target, type):
        raise ConfigurationError(f"Sanitation target must be a class, got {target!r}")

    try:
        metadata = SanitationMetadata(
            target=target,
            property_name=property_name,
            sanitize_type=sanitize_type,
            value=value,
            each=each,
        )
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid sanitation rule for {target.__qualname__}.{property_name}: {e}",
            sanitize_type=sanitize_type,
            value=value,
        ) from e

    (storage or default_metadata_storage).add_sanitation_metadata(metadata)
    return metadata


def register_transformer_class(target: C, storage: Optional[MetadataStorage] = None) -> C:
    """Register a custom sanitizer class so rules can reference it.

    Raises:
        ConfigurationError: If the class has no transform(value) method
    """
    if not isinstance(target, type) or not callable(getattr(target, 'transform', None)):
        raise ConfigurationError(
            ErrorMessages.CONSTRAINT_NOT_CALLABLE.format(
                name=getattr(target, '__qualname__', repr(target))
            ),
            sanitize_type=SanitizeType.CUSTOM,
            value=target,
        )

    (storage or default_metadata_storage).add_constraint_metadata(target)
    return target


def sanitizer_constraint(target: C) -> C:
    """Class decorator registering a custom sanitizer in the default storage."""
    return register_transformer_class(target)


class RuleBuilder:
    """Fluent builder declaring rules on one class.

    Usage:
        rules_for(User).trim("name").normalize_email("email")
    """

    def __init__(self, target: type, storage: Optional[MetadataStorage] = None):
        self.target = target
        self.storage = storage or default_metadata_storage

    def add(
        self,
        property_name: str,
        sanitize_type: SanitizeType | int | str,
        value: Any = None,
        *,
        each: bool = False,
    ) -> "RuleBuilder":
        declare(
            self.target,
            property_name,
            sanitize_type,
            value,
            each=each,
            storage=self.storage,
        )
        return self

    def blacklist(self, property_name: str, chars: str, *, each: bool = False) -> "RuleBuilder":
        """Remove characters matching the regex character class chars."""
        return self.add(property_name, SanitizeType.BLACKLIST, chars, each=each)

    def whitelist(self, property_name: str, chars: str, *, each: bool = False) -> "RuleBuilder":
        """Keep only characters matching the regex character class chars."""
        return self.add(property_name, SanitizeType.WHITELIST, chars, each=each)

    def escape(self, property_name: str, *, each: bool = False) -> "RuleBuilder":
        return self.add(property_name, SanitizeType.ESCAPE, each=each)

    def ltrim(self, property_name: str, chars=None, *, each: bool = False) -> "RuleBuilder":
        return self.add(property_name, SanitizeType.LTRIM, chars, each=each)

    def rtrim(self, property_name: str, chars=None, *, each: bool = False) -> "RuleBuilder":
        return self.add(property_name, SanitizeType.RTRIM, chars, each=each)

    def trim(self, property_name: str, chars=None, *, each: bool = False) -> "RuleBuilder":
        return self.add(property_name, SanitizeType.TRIM, chars, each=each)

    def strip_low(
        self, property_name: str, keep_new_lines: bool = False, *, each: bool = False
    ) -> "RuleBuilder":
        return self.add(property_name, SanitizeType.STRIP_LOW, keep_new_lines, each=each)

    def normalize_email(
        self, property_name: str, lowercase: Optional[bool] = None, *, each: bool = False
    ) -> "RuleBuilder":
        return self.add(property_name, SanitizeType.NORMALIZE_EMAIL, lowercase, each=each)

    def to_boolean(self, property_name: str, strict: bool = False, *, each: bool = False) -> "RuleBuilder":
        return self.add(property_name, SanitizeType.TO_BOOLEAN, strict, each=each)

    def to_date(self, property_name: str, *, each: bool = False) -> "RuleBuilder":
        return self.add(property_name, SanitizeType.TO_DATE, each=each)

    def to_float(self, property_name: str, *, each: bool = False) -> "RuleBuilder":
        return self.add(property_name, SanitizeType.TO_FLOAT, each=each)

    def to_int(self, property_name: str, radix: Optional[int] = None, *, each: bool = False) -> "RuleBuilder":
        return self.add(property_name, SanitizeType.TO_INT, radix, each=each)

    def to_string(self, property_name: str, *, each: bool = False) -> "RuleBuilder":
        return self.add(property_name, SanitizeType.TO_STRING, each=each)

    def nested(self, property_name: str, *, each: bool = False) -> "RuleBuilder":
        """Sanitize the property's object value with its own class rules."""
        return self.add(property_name, SanitizeType.NESTED, each=each)

    def custom(self, property_name: str, sanitizer_class: type, *, each: bool = False) -> "RuleBuilder":
        """Pass the property value to a registered custom sanitizer."""
        return self.add(property_name, SanitizeType.CUSTOM, sanitizer_class, each=each)


def rules_for(target: type, storage: Optional[MetadataStorage] = None) -> RuleBuilder:
    """Start declaring rules on a class."""
    return RuleBuilder(target, storage)
