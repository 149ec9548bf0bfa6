"""Validation utilities for URL shortener."""

from urllib.parse import urlparse
from typing import Tuple

from ..errors import EmptyInput, MalformedURL, UnsupportedScheme, ValidationError


ALLOWED_SCHEMES = ("http", "https")

INVALID_HOST_CHARS = set('<>"{}|\\^`')


def _is_control(char: str) -> bool:
    return ord(char) < 0x20 or ord(char) == 0x7f


def validate_url(url: str) -> str:
    """Validate a URL.

    Args:
        url: The URL to validate

    Returns:
        The URL with surrounding whitespace removed

    Raises:
        EmptyInput: If the URL is missing or blank
        MalformedURL: If the URL is not absolute (scheme and host)
        UnsupportedScheme: If the scheme is not http or https
    """
    if not isinstance(url, str) or not url.strip():
        raise EmptyInput("URL cannot be empty")

    url = url.strip()

    if any(c.isspace() or _is_control(c) for c in url):
        raise MalformedURL("URL must not contain whitespace or control characters")

    try:
        result = urlparse(url)
        # Accessing port validates it
        result.port
    except ValueError as e:
        raise MalformedURL(f"Invalid URL format: {e}") from e

    if not result.scheme or not result.netloc or not result.hostname:
        raise MalformedURL("Invalid URL format or URL must be absolute")

    if any(c in INVALID_HOST_CHARS for c in result.hostname):
        raise MalformedURL("Invalid character in host name")

    if result.scheme.lower() not in ALLOWED_SCHEMES:
        raise UnsupportedScheme("URL must use HTTP or HTTPS protocol")

    return url


def is_valid_url(url: str) -> Tuple[bool, str]:
    """Validate a URL without raising.

    Args:
        url: The URL to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    try:
        validate_url(url)
    except ValidationError as e:
        return False, e.message
    return True, ""
