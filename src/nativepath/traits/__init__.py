"""Path conventions and flavour selection."""

import os
from functools import lru_cache
from typing import Any

from nativepath.config.models import PathsConfig
from nativepath.traits.base import PathTraits
from nativepath.traits.posix import PosixTraits
from nativepath.traits.windows import WindowsTraits

FLAVOURS = ("auto", "windows", "posix")


def host_flavour() -> str:
    """Return the flavour of the running operating system."""
    return "windows" if os.name == "nt" else "posix"


@lru_cache(maxsize=1)
def host_traits() -> PathTraits[Any]:
    """Return the shared traits instance for the running operating system."""
    return WindowsTraits() if host_flavour() == "windows" else PosixTraits()


def get_traits(
    flavour: str = "auto",
    *,
    posix_encoding: str | None = None,
    locale_encoding: str | None = None,
) -> PathTraits[Any]:
    """
    Build traits for a flavour.

    Args:
        flavour: "auto" (host), "windows" or "posix".
        posix_encoding: Filesystem encoding of posix native bytes.
        locale_encoding: Override for the locale encoding used by
            to_locale/from_locale.

    Returns:
        Traits instance. The shared host instance is returned for
        "auto" when no encoding override is requested.

    Raises:
        ValueError: If flavour is unknown.
    """
    if flavour not in FLAVOURS:
        raise ValueError(f"Unknown path flavour: {flavour!r}")
    if flavour == "auto":
        if posix_encoding is None and locale_encoding is None:
            return host_traits()
        flavour = host_flavour()
    if flavour == "windows":
        return WindowsTraits(locale_encoding=locale_encoding)
    return PosixTraits(posix_encoding or "utf-8", locale_encoding=locale_encoding)


def traits_from_config(config: PathsConfig) -> PathTraits[Any]:
    """Build traits from a PathsConfig."""
    return get_traits(
        config.flavour,
        posix_encoding=config.posix_encoding,
        locale_encoding=config.locale_encoding,
    )


__all__ = [
    "FLAVOURS",
    "PathTraits",
    "PosixTraits",
    "WindowsTraits",
    "get_traits",
    "host_flavour",
    "host_traits",
    "traits_from_config",
]
