"""Sanitation metadata schemas.

SanitationMetadata is one declared rule for one field of one class.
ConstraintMetadata is one registered custom sanitizer class together with
its lazily created singleton.
"""

from collections.abc import Callable
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..core.constants import SanitizeType


def attribute_getter(property_name: str) -> Callable[[Any], Any]:
    """Build a getter that reads a missing attribute as None."""

    def get_value(instance: Any) -> Any:
        return getattr(instance, property_name, None)

    return get_value


def attribute_setter(property_name: str) -> Callable[[Any, Any], None]:
    """Build a setter that writes the attribute back onto the instance."""

    def set_value(instance: Any, value: Any) -> None:
        setattr(instance, property_name, value)

    return set_value


class SanitationMetadata(BaseModel):
    """A sanitation rule declared on a class property.

    The getter/setter pair is bound once, when the rule is registered, so the
    engine never looks properties up by name while walking an object.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    target: type = Field(..., description="Class the property belongs to")
    property_name: str = Field(..., min_length=1, description="Name of the sanitized property")
    sanitize_type: SanitizeType | int | str = Field(
        ..., description="Sanitation to apply"
    )
    value: Any = Field(
        default=None,
        description="Type-specific argument: chars, flag, radix or custom sanitizer class",
    )
    each: bool = Field(
        default=False,
        description="The property holds a sequence and every item is sanitized",
    )
    getter: Callable[[Any], Any]
    setter: Callable[[Any, Any], None]

    @model_validator(mode='before')
    @classmethod
    def bind_accessors(cls, data: Any) -> Any:
        """Resolve the accessor pair from property_name when not supplied."""
        if isinstance(data, dict) and data.get('property_name'):
            data = dict(data)
            if data.get('getter') is None:
                data['getter'] = attribute_getter(data['property_name'])
            if data.get('setter') is None:
                data['setter'] = attribute_setter(data['property_name'])
        return data

    @field_validator('sanitize_type', mode='before')
    @classmethod
    def coerce_sanitize_type(cls, v):
        """Map known values onto SanitizeType, keep anything else as given."""
        if isinstance(v, SanitizeType):
            return v
        try:
            return SanitizeType(v)
        except ValueError:
            return v

    @field_validator('each', mode='before')
    @classmethod
    def coerce_each(cls, v):
        return bool(v)


class ConstraintMetadata(BaseModel):
    """A registered custom sanitizer class and its singleton instance."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    target: type = Field(..., description="Custom sanitizer class")
    instance: Optional[Any] = Field(
        default=None, description="Lazily created singleton"
    )
