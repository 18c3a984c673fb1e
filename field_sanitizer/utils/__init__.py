"""Value sanitation utilities organized by domain.

All functions are re-exported here. Prefer importing from specific modules
for better clarity:
    from field_sanitizer.utils.strings import escape
    from field_sanitizer.utils.converters import to_int
"""

# Converters
from .converters import to_boolean, to_date, to_float, to_int, to_string

# Email
from .email import normalize_email

# Strings
from .strings import blacklist, escape, ltrim, rtrim, strip_low, trim, whitelist

__all__ = [
    # Converters
    "to_boolean",
    "to_date",
    "to_float",
    "to_int",
    "to_string",
    # Email
    "normalize_email",
    # Strings
    "blacklist",
    "escape",
    "ltrim",
    "rtrim",
    "strip_low",
    "trim",
    "whitelist",
]
