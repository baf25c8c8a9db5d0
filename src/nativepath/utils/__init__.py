"""nativepath utility modules."""

from nativepath.utils.logging import configure_logging

__all__ = ["configure_logging"]
