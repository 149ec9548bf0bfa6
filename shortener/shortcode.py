"""Short code generation utilities."""

import random
import string
from typing import Optional


class ShortCodeGenerator:
    """Generate fixed-length random short codes.

    Uniqueness is not guaranteed here; callers detect collisions through the
    store and ask for another code.
    """

    # Base62 characters (alphanumeric, case-sensitive)
    ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
    CODE_LENGTH = 6

    def __init__(self, rng: Optional[random.Random] = None):
        """Initialize short code generator.

        Args:
            rng: Optional random source. Pass a seeded ``random.Random`` to get
                a reproducible sequence of codes.
        """
        self._rng = rng or random.Random()

    def generate(self) -> str:
        """Generate a random short code."""
        return self._draw(self._rng)

    def generate_with_seed(self, seed: int) -> str:
        """Generate a short code from a fresh random source seeded with ``seed``.

        The same seed always yields the same code.
        """
        return self._draw(random.Random(seed))

    def _draw(self, rng: random.Random) -> str:
        return ''.join(rng.choice(self.ALPHABET) for _ in range(self.CODE_LENGTH))

    @classmethod
    def is_valid_format(cls, code: str) -> bool:
        """Check if code has the fixed length and only alphabet characters."""
        return (
            isinstance(code, str)
            and len(code) == cls.CODE_LENGTH
            and all(c in cls.ALPHABET for c in code)
        )
