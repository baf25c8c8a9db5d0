"""nativepath error types.

All custom exceptions inherit from NativePathError to allow
catching any nativepath-specific error. Path content is never
a reason to raise: these only cover configuration and API misuse.
"""


class NativePathError(Exception):
    """Base exception for all nativepath errors."""

    pass


class ConfigurationError(NativePathError):
    """Invalid configuration."""

    pass


class FlavourMismatchError(NativePathError, TypeError):
    """Two path values of different flavours were combined."""

    def __init__(self, left: str, right: str) -> None:
        super().__init__(f"Cannot combine {left} path with {right} path")
        self.left = left
        self.right = right


class TokenGeneratorNotInitializedError(NativePathError):
    """The process-wide token generator was used before initialization."""

    pass
