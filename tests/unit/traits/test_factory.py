"""Tests for flavour selection."""

import os

import pytest

from nativepath.config.models import PathsConfig
from nativepath.traits import (
    PosixTraits,
    WindowsTraits,
    get_traits,
    host_flavour,
    host_traits,
    traits_from_config,
)


def test_auto_returns_shared_host_traits() -> None:
    """'auto' without overrides reuses the host instance."""
    assert get_traits("auto") is host_traits()
    assert get_traits() is host_traits()


def test_host_flavour_matches_os() -> None:
    """The host flavour follows os.name."""
    expected = "windows" if os.name == "nt" else "posix"
    assert host_flavour() == expected
    assert host_traits().name == expected


def test_explicit_flavours() -> None:
    """Both flavours can be requested on any host."""
    assert isinstance(get_traits("windows"), WindowsTraits)
    assert isinstance(get_traits("posix"), PosixTraits)


def test_unknown_flavour_rejected() -> None:
    """Unknown flavour names raise ValueError."""
    with pytest.raises(ValueError, match="Unknown path flavour"):
        get_traits("vms")


def test_posix_encoding_override() -> None:
    """The posix filesystem encoding is configurable."""
    traits = get_traits("posix", posix_encoding="latin-1")
    assert traits.transcoder.encoding == "latin-1"


def test_traits_from_config() -> None:
    """PathsConfig settings reach the traits."""
    traits = traits_from_config(PathsConfig(flavour="posix", posix_encoding="latin-1"))
    assert isinstance(traits, PosixTraits)
    assert traits.transcoder.encoding == "iso8859-1"

    traits = traits_from_config(PathsConfig(flavour="windows", locale_encoding="cp1252"))
    assert isinstance(traits, WindowsTraits)
    assert traits.transcoder.locale_encoding == "cp1252"
