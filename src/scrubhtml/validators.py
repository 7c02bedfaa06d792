"""Value validators used by the attribute policy.

Both validators answer with a plain bool: a value that fails validation is
simply not allowed, it is never an error.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING
from urllib.parse import urlsplit

from email_validator import EmailNotValidError, validate_email

from .constants import MAILTO_PREFIX, URL_SCHEMES

if TYPE_CHECKING:
    from collections.abc import Collection

# Anything outside the RFC 3986 character set (including whitespace, quotes,
# angle brackets and non-ASCII) disqualifies the value outright.
_ILLEGAL_URI_CHARS = re.compile(r"[^A-Za-z0-9:/?#\[\]@!$&'()*+,;=.\-_~%]")
_BROKEN_PERCENT_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+\-.]*$")


def is_web_uri(value: str, schemes: Collection[str] = URL_SCHEMES) -> bool:
    """Return True if `value` is an absolute URI using one of `schemes`.

    The URI must carry an authority with a non-empty host, e.g.
    `https://example.com/path?q=1`. Relative references, scheme-relative
    references (`//host`) and any other scheme are rejected.
    """

    if not value or not isinstance(value, str):
        return False
    if _ILLEGAL_URI_CHARS.search(value) or _BROKEN_PERCENT_ESCAPE.search(value):
        return False

    scheme, sep, _ = value.partition(":")
    if not sep or not _SCHEME.match(scheme):
        return False
    if scheme.lower() not in schemes:
        return False

    try:
        parts = urlsplit(value)
        # Accessing .port validates it and raises ValueError when malformed.
        _ = parts.port
    except ValueError:
        return False

    if not parts.netloc or not parts.hostname:
        return False
    return not parts.path or parts.path.startswith("/")


def is_email(value: str) -> bool:
    """Return True if `value` is a syntactically valid email address.

    Deliverability (DNS) is never checked.
    """

    if not value or not isinstance(value, str):
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def is_mailto_href(value: str) -> bool:
    if not isinstance(value, str) or not value.startswith(MAILTO_PREFIX):
        return False
    return is_email(value[len(MAILTO_PREFIX) :])
