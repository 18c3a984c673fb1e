"""Sanitizer: applies declared sanitation rules to an object.

For every rule declared on the object's class whose property currently holds
a value (not None), the property is replaced by its sanitized value:

- nested: the value is itself sanitized with its own class rules
- custom: the value is passed to a registered custom sanitizer
- anything else: the value goes through the matching utils function

Rules with each=True apply to every item of a list or tuple property.
The object is mutated in place and returned.
"""

from typing import Any, Optional, TypeVar

from . import utils
from .core.config import settings
from .core.constants import ErrorMessages, SanitizeType
from .core.exceptions import (
    CircularReferenceError,
    ConfigurationError,
    NestingDepthError,
    TypeMismatchError,
)
from .core.logging import get_logger
from .metadata import MetadataStorage, SanitationMetadata, as_resolver, default_metadata_storage
from .metadata.storage import Resolver

logger = get_logger(__name__)

T = TypeVar("T")


class Sanitizer:
    """Performs sanitation of objects based on their declared metadata.

    Usage:
        sanitizer = Sanitizer()
        post = sanitizer.sanitize(post)
    """

    def __init__(
        self,
        storage: Optional[MetadataStorage] = None,
        container: Any = None,
        max_depth: Optional[int] = None,
    ):
        """Initialize the sanitizer.

        Args:
            storage: Metadata storage to read rules from (default: process-wide storage)
            container: Optional dependency injection container used to build
                custom sanitizers for this sanitizer only (default: the
                storage container)
            max_depth: Maximum nesting depth (default: settings.MAX_NESTING_DEPTH)

        Raises:
            ConfigurationError: If max_depth is below 1 or the container is
                not usable
        """
        if max_depth is None:
            max_depth = settings.MAX_NESTING_DEPTH
        if isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth < 1:
            raise ConfigurationError(ErrorMessages.INVALID_MAX_DEPTH.format(max_depth=max_depth))

        self.metadata_storage = storage or default_metadata_storage
        self.max_depth = max_depth
        self._container: Optional[Resolver] = as_resolver(container)

    @property
    def container(self) -> Optional[Resolver]:
        return self._container

    @container.setter
    def container(self, container: Any) -> None:
        resolver = as_resolver(container)
        self.metadata_storage.release_resolver(self._container)
        self._container = resolver

    # ------------------------------------------------------------------
    # Sanitation methods
    # ------------------------------------------------------------------

    @staticmethod
    def blacklist(value: str, chars: str) -> str:
        """Remove characters that appear in the blacklist."""
        return utils.blacklist(value, chars)

    @staticmethod
    def escape(value: str) -> str:
        """Replace <, >, &, ', " and / with HTML entities."""
        return utils.escape(value)

    @staticmethod
    def ltrim(value: str, chars=None) -> str:
        """Trim characters from the left side of the input."""
        return utils.ltrim(value, chars)

    @staticmethod
    def normalize_email(value: str, lowercase: Optional[bool] = None) -> str | bool:
        """Canonicalize an email address, False if it is not one."""
        return utils.normalize_email(value, lowercase)

    @staticmethod
    def rtrim(value: str, chars=None) -> str:
        """Trim characters from the right side of the input."""
        return utils.rtrim(value, chars)

    @staticmethod
    def strip_low(value: str, keep_new_lines: bool = False) -> str:
        """Remove control characters, optionally keeping new lines."""
        return utils.strip_low(value, bool(keep_new_lines))

    @staticmethod
    def to_boolean(value: Any, strict: bool = False) -> bool:
        """Convert the input to a boolean."""
        return utils.to_boolean(value, bool(strict))

    @staticmethod
    def to_date(value: Any):
        """Convert the input to a date, or None if the input is not a date."""
        return utils.to_date(value)

    @staticmethod
    def to_float(value: Any) -> float:
        """Convert the input to a float, or nan."""
        return utils.to_float(value)

    @staticmethod
    def to_int(value: Any, radix: Optional[int] = None) -> int | float:
        """Convert the input to an integer, or nan."""
        return utils.to_int(value, radix)

    @staticmethod
    def to_string(value: Any) -> str:
        """Convert the input to a string."""
        return utils.to_string(value)

    @staticmethod
    def trim(value: str, chars=None) -> str:
        """Trim characters (whitespace by default) from both sides of the input."""
        return utils.trim(value, chars)

    @staticmethod
    def whitelist(value: str, chars: str) -> str:
        """Remove characters that do not appear in the whitelist."""
        return utils.whitelist(value, chars)

    # ------------------------------------------------------------------
    # Object sanitation
    # ------------------------------------------------------------------

    def sanitize(self, instance: T) -> T:
        """Sanitize the given object based on the rules declared on its class.

        Args:
            instance: Object to sanitize in place

        Returns:
            The same object

        Raises:
            ConfigurationError: If a rule has an unknown type or names an
                unregistered custom sanitizer
            TypeMismatchError: If an each=True property is not a sequence
            NestingError: If nested objects form a cycle or go too deep
        """
        return self._sanitize_object(instance, path=[])

    async def sanitize_async(self, instance: T) -> T:
        """Sanitize the given object, usable in chained coroutines.

        Same semantics as sanitize(); errors are raised when awaited.
        """
        return self.sanitize(instance)

    def _sanitize_object(self, instance: Any, path: list[int]) -> Any:
        metadatas = self.metadata_storage.get_sanitize_metadatas_for_instance(instance)
        if not metadatas:
            return instance

        logger.debug(
            "Sanitizing object",
            extra={
                'target': type(instance).__qualname__,
                'rule_count': len(metadatas),
                'depth': len(path),
            }
        )

        path.append(id(instance))
        try:
            for metadata in metadatas:
                current = metadata.getter(instance)
                if current is None:
                    continue
                metadata.setter(instance, self._sanitize_property(current, metadata, path))
        finally:
            path.pop()

        return instance

    def _sanitize_property(self, value: Any, metadata: SanitationMetadata, path: list[int]) -> Any:
        if not metadata.each:
            return self._sanitize_item(value, metadata, path)

        if not isinstance(value, (list, tuple)):
            logger.error(
                "Non-sequence value on each=True property",
                extra={
                    'target': metadata.target.__qualname__,
                    'property_name': metadata.property_name,
                    'value_type': type(value).__name__,
                }
            )
            raise TypeMismatchError(
                ErrorMessages.EXPECTED_ARRAY.format(property_name=metadata.property_name),
                property_name=metadata.property_name,
                value=value,
            )

        if isinstance(value, tuple):
            return tuple(
                item if item is None else self._sanitize_item(item, metadata, path)
                for item in value
            )

        for index, item in enumerate(value):
            if item is not None:
                value[index] = self._sanitize_item(item, metadata, path)
        return value

    def _sanitize_item(self, value: Any, metadata: SanitationMetadata, path: list[int]) -> Any:
        if metadata.sanitize_type == SanitizeType.NESTED:
            return self._sanitize_nested(value, metadata, path)
        return self._sanitize_value(value, metadata)

    def _sanitize_nested(self, value: Any, metadata: SanitationMetadata, path: list[int]) -> Any:
        if id(value) in path:
            raise CircularReferenceError(
                ErrorMessages.CIRCULAR_REFERENCE.format(
                    class_name=type(value).__qualname__,
                    property_name=metadata.property_name,
                )
            )
        if len(path) > self.max_depth:
            raise NestingDepthError(
                ErrorMessages.NESTING_TOO_DEEP.format(max_depth=self.max_depth)
            )
        return self._sanitize_object(value, path)

    def _sanitize_value(self, value: Any, metadata: SanitationMetadata) -> Any:
        """Sanitize a single value based on the received metadata."""
        sanitize_type = metadata.sanitize_type
        argument = metadata.value

        match sanitize_type:
            case SanitizeType.BLACKLIST:
                return self.blacklist(value, argument)
            case SanitizeType.ESCAPE:
                return self.escape(value)
            case SanitizeType.LTRIM:
                return self.ltrim(value, argument)
            case SanitizeType.NORMALIZE_EMAIL:
                return self.normalize_email(value, argument)
            case SanitizeType.RTRIM:
                return self.rtrim(value, argument)
            case SanitizeType.STRIP_LOW:
                return self.strip_low(value, argument)
            case SanitizeType.TO_BOOLEAN:
                return self.to_boolean(value, argument)
            case SanitizeType.TO_DATE:
                return self.to_date(value)
            case SanitizeType.TO_FLOAT:
                return self.to_float(value)
            case SanitizeType.TO_INT:
                return self.to_int(value, argument)
            case SanitizeType.TO_STRING:
                return self.to_string(value)
            case SanitizeType.TRIM:
                return self.trim(value, argument)
            case SanitizeType.WHITELIST:
                return self.whitelist(value, argument)
            case SanitizeType.CUSTOM:
                return self._run_custom_sanitizer(value, metadata)

        logger.error(
            "Unknown sanitation type",
            extra={
                'target': metadata.target.__qualname__,
                'property_name': metadata.property_name,
                'sanitize_type': repr(sanitize_type),
            }
        )
        raise ConfigurationError(
            ErrorMessages.WRONG_SANITIZE_TYPE.format(sanitize_type=sanitize_type, value=value),
            sanitize_type=sanitize_type,
            value=value,
        )

    def _run_custom_sanitizer(self, value: Any, metadata: SanitationMetadata) -> Any:
        if metadata.value is None:
            raise ConfigurationError(
                ErrorMessages.CONSTRAINT_MISSING.format(property_name=metadata.property_name),
                sanitize_type=metadata.sanitize_type,
                value=value,
            )

        instance = self.metadata_storage.get_constraint_instance(metadata.value, self._container)
        transform = getattr(instance, 'transform', None)
        if not callable(transform):
            raise ConfigurationError(
                ErrorMessages.CONSTRAINT_NOT_CALLABLE.format(
                    name=getattr(metadata.value, '__qualname__', repr(metadata.value))
                ),
                sanitize_type=metadata.sanitize_type,
                value=value,
            )
        return transform(value)


# Default sanitizer bound to the process-wide storage
default_sanitizer = Sanitizer()


def sanitize(instance: T) -> T:
    """Sanitize an object with the default sanitizer."""
    return default_sanitizer.sanitize(instance)


async def sanitize_async(instance: T) -> T:
    """Sanitize an object with the default sanitizer, as a coroutine."""
    return await default_sanitizer.sanitize_async(instance)
