"""Core business logic for URL shortener."""

from .shortcode import ShortCodeGenerator
from .service import URLShortenerService
from .errors import (
    URLShortenerError,
    ValidationError,
    EmptyInput,
    MalformedURL,
    UnsupportedScheme,
    NotFound,
    DuplicateKey,
    CodeSpaceExhausted,
    StoreUnavailable,
)

__all__ = [
    "ShortCodeGenerator",
    "URLShortenerService",
    "URLShortenerError",
    "ValidationError",
    "EmptyInput",
    "MalformedURL",
    "UnsupportedScheme",
    "NotFound",
    "DuplicateKey",
    "CodeSpaceExhausted",
    "StoreUnavailable",
]
