"""Port interfaces for nativepath collaborators."""

from nativepath.ports.tokens import TokenSourcePort

__all__ = ["TokenSourcePort"]
