"""Sanitation metadata storage.

Process-wide registry of:
- Sanitation rules, keyed by the class they were declared on, in
  registration order
- Custom sanitizer classes, each with a lazily created singleton

Rules are normally declared while modules are imported and read many times
afterwards. Writes take a lock and reads return copies, so a late
declaration never changes a list the engine is iterating over.
"""

import threading
from collections.abc import Callable, Mapping
from typing import Any, Optional

from ..core.constants import ErrorMessages
from ..core.exceptions import ConfigurationError
from ..core.logging import get_logger
from .schemas import ConstraintMetadata, SanitationMetadata

logger = get_logger(__name__)

Resolver = Callable[[type], Any]


def _default_resolver(target: type) -> Any:
    return target()


def as_resolver(container: Any) -> Optional[Resolver]:
    """Turn a dependency injection container into a resolver function.

    Accepts a plain callable, or an object exposing resolve(cls) or get(cls).
    Mappings are rejected.
    """
    if container is None:
        return None
    if isinstance(container, Mapping):
        raise ConfigurationError(ErrorMessages.INVALID_CONTAINER.format(container=container))
    for method_name in ('resolve', 'get'):
        method = getattr(container, method_name, None)
        if callable(method):
            return method
    if callable(container):
        return container
    raise ConfigurationError(ErrorMessages.INVALID_CONTAINER.format(container=container))


class MetadataStorage:
    """Storage of sanitation rules and custom sanitizer singletons.

    Usage:
        storage = get_metadata_storage()
        storage.add_sanitation_metadata(metadata)
        rules = storage.get_sanitize_metadatas(Post)
    """

    def __init__(self, container: Any = None):
        self._sanitation_metadatas: dict[type, list[SanitationMetadata]] = {}
        self._constraint_metadatas: dict[type, ConstraintMetadata] = {}
        self._container: Optional[Resolver] = as_resolver(container)
        self._resolver_instances: dict[int, tuple[Resolver, dict[type, Any]]] = {}
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Sanitation rules
    # ------------------------------------------------------------------

    def add_sanitation_metadata(self, metadata: SanitationMetadata) -> None:
        """Append a rule to the rules of its target class.

        The property does not need to exist on the class yet.
        """
        with self._lock:
            self._sanitation_metadatas.setdefault(metadata.target, []).append(metadata)

        logger.debug(
            "Sanitation rule registered",
            extra={
                'target': metadata.target.__qualname__,
                'property_name': metadata.property_name,
                'sanitize_type': str(metadata.sanitize_type),
                'each': metadata.each,
            }
        )

    def get_sanitize_metadatas(self, target: type) -> list[SanitationMetadata]:
        """Get the rules declared on exactly this class, in registration order.

        Rules of parent classes are not merged in.

        Args:
            target: Class to look up

        Returns:
            Copy of the rule list (empty if none were declared)
        """
        with self._lock:
            return list(self._sanitation_metadatas.get(target, ()))

    def get_sanitize_metadatas_for_instance(self, instance: Any) -> list[SanitationMetadata]:
        """Get the rules declared on the class of the given instance."""
        return self.get_sanitize_metadatas(type(instance))

    def has_sanitize_metadatas(self, target: type) -> bool:
        """Check if any rule was declared on this class."""
        with self._lock:
            return bool(self._sanitation_metadatas.get(target))

    # ------------------------------------------------------------------
    # Custom sanitizers
    # ------------------------------------------------------------------

    def add_constraint_metadata(self, target: type) -> None:
        """Register a custom sanitizer class without instantiating it.

        Registering the same class again keeps its existing singleton.
        """
        with self._lock:
            if target in self._constraint_metadatas:
                return
            self._constraint_metadatas[target] = ConstraintMetadata(target=target)

        logger.debug(
            "Custom sanitizer registered",
            extra={'target': target.__qualname__}
        )

    def is_constraint_registered(self, target: type) -> bool:
        """Check if a custom sanitizer class was registered."""
        with self._lock:
            return target in self._constraint_metadatas

    def get_constraint_instance(self, target: type, resolver: Optional[Resolver] = None) -> Any:
        """Get the singleton of a registered custom sanitizer class.

        The instance is created on first use. Without a resolver it is built
        through the storage container if there is one, otherwise by calling
        the class without arguments. A resolver gets its own singletons,
        cached until release_resolver() or reset().

        Raises:
            ConfigurationError: If the class was never registered, or the
                resolver returned None for it
        """
        with self._lock:
            constraint = self._constraint_metadatas.get(target)
            if constraint is None:
                name = getattr(target, '__qualname__', repr(target))
                raise ConfigurationError(
                    ErrorMessages.CONSTRAINT_NOT_REGISTERED.format(name=name),
                    value=target,
                )

            if resolver is None:
                if constraint.instance is None:
                    constraint.instance = self._build_instance(
                        target, self._container or _default_resolver
                    )
                return constraint.instance

            _, instances = self._resolver_instances.setdefault(id(resolver), (resolver, {}))
            if target not in instances:
                instances[target] = self._build_instance(target, resolver)
            return instances[target]

    def _build_instance(self, target: type, resolver: Resolver) -> Any:
        instance = resolver(target)
        if instance is None:
            raise ConfigurationError(
                ErrorMessages.CONTAINER_RETURNED_NONE.format(name=target.__qualname__),
                value=target,
            )
        logger.debug(
            "Custom sanitizer instantiated",
            extra={
                'target': target.__qualname__,
                'from_container': resolver is not _default_resolver,
            }
        )
        return instance

    def release_resolver(self, resolver: Optional[Resolver]) -> None:
        """Drop the singletons built through the given resolver."""
        if resolver is None:
            return
        with self._lock:
            self._resolver_instances.pop(id(resolver), None)

    # ------------------------------------------------------------------
    # Container
    # ------------------------------------------------------------------

    @property
    def container(self) -> Optional[Resolver]:
        return self._container

    @container.setter
    def container(self, container: Any) -> None:
        self.set_container(container)

    def set_container(self, container: Any) -> None:
        """Use a dependency injection container to build custom sanitizers.

        Singletons are per container, so cached instances are dropped.
        Passing None restores plain construction.
        """
        resolver = as_resolver(container)
        with self._lock:
            self._container = resolver
            for constraint in self._constraint_metadatas.values():
                constraint.instance = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Clear all rules and custom sanitizers. Meant for test isolation."""
        with self._lock:
            self._sanitation_metadatas.clear()
            self._constraint_metadatas.clear()
            self._resolver_instances.clear()


# Global storage instance
default_metadata_storage = MetadataStorage()


def get_metadata_storage() -> MetadataStorage:
    """Get the global metadata storage instance."""
    return default_metadata_storage
