"""Sanitizer Constants.

Centralized constants used throughout the library.
This file contains all hardcoded values that should be maintained in one place.
"""

import enum

# ============================================================================
# SANITATION TYPES
# ============================================================================

class SanitizeType(str, enum.Enum):
    """Sanitation types that can be declared on a field."""
    BLACKLIST = "blacklist"
    ESCAPE = "escape"
    LTRIM = "ltrim"
    RTRIM = "rtrim"
    TRIM = "trim"
    STRIP_LOW = "strip_low"
    NORMALIZE_EMAIL = "normalize_email"
    TO_BOOLEAN = "to_boolean"
    TO_DATE = "to_date"
    TO_FLOAT = "to_float"
    TO_INT = "to_int"
    TO_STRING = "to_string"
    WHITELIST = "whitelist"
    NESTED = "nested"
    CUSTOM = "custom"


# ============================================================================
# STRING SANITATION CONSTANTS
# ============================================================================

class HtmlEntities:
    """HTML entity replacements used by escape()."""
    REPLACEMENTS: dict[str, str] = {
        "&": "&amp;",
        '"': "&quot;",
        "'": "&#x27;",
        "<": "&lt;",
        ">": "&gt;",
        "/": "&#x2F;",
    }


class ControlCharacters:
    """Character classes for strip_low()."""
    # Code points below 32 plus DEL (127)
    ALL = "\\x00-\\x1F\\x7F"
    # Same set without \n (0x0A) and \r (0x0D)
    KEEP_NEW_LINES = "\\x00-\\x09\\x0B\\x0C\\x0E-\\x1F\\x7F"


# ============================================================================
# CONVERSION CONSTANTS
# ============================================================================

class BooleanStrings:
    """String values recognised by to_boolean()."""
    # Lenient mode: everything else is True
    FALSY = ("0", "false", "")
    # Strict mode: only these are True
    STRICT_TRUTHY = ("1", "true")


class IntegerParsing:
    """Settings for to_int()."""
    DEFAULT_RADIX = 10
    MIN_RADIX = 2
    MAX_RADIX = 36
    DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


# ============================================================================
# EMAIL NORMALIZATION CONSTANTS
# ============================================================================

class EmailProviders:
    """Provider-specific canonicalization rules for normalize_email()."""
    GMAIL_DOMAINS = ("gmail.com", "googlemail.com")
    GMAIL_CANONICAL_DOMAIN = "gmail.com"
    OUTLOOK_DOMAINS = (
        "hotmail.com",
        "hotmail.co.uk",
        "live.com",
        "outlook.com",
    )
    YAHOO_DOMAINS = (
        "yahoo.com",
        "yahoo.co.uk",
        "yahoo.fr",
        "ymail.com",
        "rocketmail.com",
    )
    ICLOUD_DOMAINS = ("icloud.com", "me.com")
    SUBADDRESS_SEPARATOR = "+"
    YAHOO_SUBADDRESS_SEPARATOR = "-"


# ============================================================================
# ERROR MESSAGES
# ============================================================================

class ErrorMessages:
    """Standard error messages."""
    WRONG_SANITIZE_TYPE = "Wrong sanitation type is supplied {sanitize_type} for value {value!r}"
    EXPECTED_ARRAY = (
        "Received a non-array value when expected array ('each' was set to true) "
        "for property '{property_name}'"
    )
    CONSTRAINT_NOT_REGISTERED = (
        "Custom sanitizer {name} is not registered. "
        "Decorate it with @sanitizer_constraint or call register_transformer_class()."
    )
    CONSTRAINT_NOT_CALLABLE = "Custom sanitizer {name} does not implement transform(value)"
    CONSTRAINT_MISSING = "Custom sanitation on '{property_name}' requires a sanitizer class"
    CIRCULAR_REFERENCE = (
        "Circular reference detected while sanitizing nested {class_name} "
        "on property '{property_name}'"
    )
    NESTING_TOO_DEEP = "Nested sanitation exceeded maximum depth of {max_depth}"
    INVALID_MAX_DEPTH = "Maximum nesting depth must be at least 1, got {max_depth!r}"
    INVALID_CONTAINER = "Container {container!r} must be callable or expose resolve(cls) / get(cls)"
    CONTAINER_RETURNED_NONE = (
        "Container returned no instance for custom sanitizer {name}; "
        "it is not registered in the container"
    )
