"""Email canonicalization utilities."""

from typing import Any

from email_validator import EmailNotValidError, validate_email

from ..core.constants import EmailProviders


def _strip_subaddress(local_part: str, separator: str) -> str:
    return local_part.split(separator, 1)[0]


def normalize_email(value: Any, lowercase: bool | None = None) -> str | bool:
    """Canonicalize an email address.

    The address is validated syntactically (no DNS lookups) and the domain
    is normalized. Provider rules are then applied:

    - Gmail: dots and +subaddress removed, googlemail.com becomes gmail.com
    - Outlook/Hotmail/Live and iCloud: +subaddress removed
    - Yahoo: -subaddress removed

    Known providers always get a lowercase local part. For other domains the
    local part is lowercased unless lowercase is False.

    Args:
        value: Address to normalize
        lowercase: Lowercase the local part for unknown providers (default True)

    Returns:
        Normalized address, or False if the input is not a plausible email

    Examples:
        >>> normalize_email("John.Doe+news@GoogleMail.com")
        "johndoe@gmail.com"
        >>> normalize_email("not-an-email")
        False
    """
    if not isinstance(value, str):
        return False

    try:
        validated = validate_email(value.strip(), check_deliverability=False)
    except EmailNotValidError:
        return False

    local_part = validated.local_part
    domain = validated.domain.lower()

    if domain in EmailProviders.GMAIL_DOMAINS:
        local_part = _strip_subaddress(local_part, EmailProviders.SUBADDRESS_SEPARATOR)
        local_part = local_part.replace(".", "").lower()
        domain = EmailProviders.GMAIL_CANONICAL_DOMAIN
    elif domain in EmailProviders.OUTLOOK_DOMAINS or domain in EmailProviders.ICLOUD_DOMAINS:
        local_part = _strip_subaddress(local_part, EmailProviders.SUBADDRESS_SEPARATOR).lower()
    elif domain in EmailProviders.YAHOO_DOMAINS:
        local_part = _strip_subaddress(local_part, EmailProviders.YAHOO_SUBADDRESS_SEPARATOR).lower()
    elif lowercase is None or lowercase:
        local_part = local_part.lower()

    if not local_part:
        return False

    return f"{local_part}@{domain}"
