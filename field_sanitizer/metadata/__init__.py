"""Sanitation metadata: rule schemas and the process-wide storage."""

from .schemas import ConstraintMetadata, SanitationMetadata, attribute_getter, attribute_setter
from .storage import MetadataStorage, as_resolver, default_metadata_storage, get_metadata_storage

__all__ = [
    "ConstraintMetadata",
    "SanitationMetadata",
    "attribute_getter",
    "attribute_setter",
    "MetadataStorage",
    "as_resolver",
    "default_metadata_storage",
    "get_metadata_storage",
]
