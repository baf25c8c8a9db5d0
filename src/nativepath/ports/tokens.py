"""Port interface for unique-token sources."""

from typing import Protocol


class TokenSourcePort(Protocol):
    """Protocol for generators of collision-resistant name tokens.

    Tokens end up inside filenames, so implementations must only
    produce characters that are valid in a path component.
    """

    def generate(self) -> str:
        """Return a fresh token.

        Returns:
            Token text, unique with overwhelming probability.
        """
        ...
