"""Error types for URL shortener."""


class URLShortenerError(Exception):
    """Base class for URL shortener errors."""


class ValidationError(URLShortenerError, ValueError):
    """Input rejected by URL validation."""

    def __init__(self, message: str, field: str = "url"):
        super().__init__(message)
        self.field = field
        self.message = message


class EmptyInput(ValidationError):
    """URL is empty or blank."""


class MalformedURL(ValidationError):
    """URL cannot be parsed as an absolute URL."""


class UnsupportedScheme(ValidationError):
    """URL scheme is not http or https."""


class NotFound(URLShortenerError, LookupError):
    """No record exists for a short code."""

    def __init__(self, short_code: str):
        super().__init__(f"Short code '{short_code}' not found")
        self.short_code = short_code


class DuplicateKey(URLShortenerError):
    """Store rejected an insert because the short code is taken."""

    def __init__(self, short_code: str):
        super().__init__(f"Short code '{short_code}' already exists")
        self.short_code = short_code


class CodeSpaceExhausted(URLShortenerError):
    """No free short code found within the retry budget."""

    def __init__(self, attempts: int):
        super().__init__(
            f"Unable to generate unique short code after {attempts} attempts"
        )
        self.attempts = attempts


class StoreUnavailable(URLShortenerError):
    """Persistence layer could not be reached or timed out."""
