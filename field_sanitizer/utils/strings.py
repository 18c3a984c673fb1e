"""String sanitation utilities."""

import re
from collections.abc import Iterable

from ..core.constants import ControlCharacters, HtmlEntities

_ESCAPE_TABLE = str.maketrans(HtmlEntities.REPLACEMENTS)


def _join_chars(chars: str | Iterable[str] | None) -> str | None:
    """Accept trim characters as a string or a list of strings."""
    if chars is None:
        return None
    if isinstance(chars, str):
        return chars
    return "".join(chars)


def blacklist(value: str, chars: str) -> str:
    """Remove characters that appear in the blacklist.

    The characters are used inside a regex character class, so some of them
    need escaping, e.g. blacklist(value, "\\\\[\\\\]"). An empty blacklist
    removes nothing.

    Examples:
        >>> blacklist("abc123", "0-9")
        "abc"
    """
    if not chars:
        return value
    return re.sub(f"[{chars}]+", "", value)


def whitelist(value: str, chars: str) -> str:
    """Remove characters that do not appear in the whitelist.

    Same character class rules as blacklist(). An empty whitelist
    keeps nothing.

    Examples:
        >>> whitelist("abc123", "a-z")
        "abc"
    """
    if not chars:
        return ""
    return re.sub(f"[^{chars}]+", "", value)


def escape(value: str) -> str:
    """Replace <, >, &, ', " and / with HTML entities.

    Already escaped entities are escaped again (the & is replaced).

    Examples:
        >>> escape("<span>Text</span>")
        "&lt;span&gt;Text&lt;&#x2F;span&gt;"
    """
    return value.translate(_ESCAPE_TABLE)


def ltrim(value: str, chars: str | Iterable[str] | None = None) -> str:
    """Trim characters (whitespace by default) from the left side."""
    return value.lstrip(_join_chars(chars))


def rtrim(value: str, chars: str | Iterable[str] | None = None) -> str:
    """Trim characters (whitespace by default) from the right side."""
    return value.rstrip(_join_chars(chars))


def trim(value: str, chars: str | Iterable[str] | None = None) -> str:
    """Trim characters (whitespace by default) from both sides.

    Examples:
        >>> trim("  hello  ")
        "hello"
        >>> trim("--hello--", "-")
        "hello"
    """
    return value.strip(_join_chars(chars))


def strip_low(value: str, keep_new_lines: bool = False) -> str:
    """Remove characters with a code point below 32 and 127 (control characters).

    If keep_new_lines is True, \\n and \\r are preserved.
    """
    chars = ControlCharacters.KEEP_NEW_LINES if keep_new_lines else ControlCharacters.ALL
    return blacklist(value, chars)
