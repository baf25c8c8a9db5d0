"""Unique-token generation for temporary pathnames.

The generator is process-wide state with explicit initialization:
call ``init_token_generator()`` once at startup and pass the returned
handle (or ``get_token_generator()``) to the code that needs tokens.
"""

import os
import random
import threading
import uuid

from loguru import logger

from nativepath.errors import TokenGeneratorNotInitializedError


class UUIDTokenGenerator:
    """Thread-safe source of random version-4 UUID text.

    Tokens are for local naming only; the PRNG is not a cryptographic one.
    """

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = int.from_bytes(os.urandom(16), "big")
        self._rng = random.Random(seed)
        self._lock = threading.Lock()

    def generate(self) -> str:
        with self._lock:
            bits = self._rng.getrandbits(128)
        return str(uuid.UUID(int=bits, version=4))


_generator: UUIDTokenGenerator | None = None
_generator_lock = threading.Lock()


def init_token_generator(seed: int | None = None) -> UUIDTokenGenerator:
    """
    Initialize the process-wide token generator.

    Re-initializing replaces the previous generator.

    Args:
        seed: Optional PRNG seed, for reproducible names in tests.

    Returns:
        The new generator.
    """
    global _generator
    with _generator_lock:
        _generator = UUIDTokenGenerator(seed)
    logger.debug("Token generator initialized (seeded={})", seed is not None)
    return _generator


def get_token_generator() -> UUIDTokenGenerator:
    """
    Return the process-wide token generator.

    Raises:
        TokenGeneratorNotInitializedError: If init_token_generator() was not called.
    """
    if _generator is None:
        raise TokenGeneratorNotInitializedError(
            "Token generator not initialized; call init_token_generator() first"
        )
    return _generator


def reset_token_generator() -> None:
    """Drop the process-wide generator (used by tests and shutdown)."""
    global _generator
    with _generator_lock:
        _generator = None
