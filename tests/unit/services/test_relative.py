"""Tests for absolute/relative rewriting."""

import pytest

from nativepath.errors import FlavourMismatchError
from nativepath.models.path_string import PathString
from nativepath.services.relative import absolute_path_to_relative, relative_path_to_absolute
from nativepath.traits import PosixTraits, WindowsTraits

WIN_BASE = "C:\\Root\\"


def W(raw: str) -> PathString:
    return PathString(raw, WindowsTraits())


def P(raw: bytes) -> PathString:
    return PathString(raw, PosixTraits())


class TestAbsoluteToRelative:
    """Tests for absolute_path_to_relative."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("C:\\Root\\Sub\\x.txt", ".\\Sub\\x.txt"),
            ("c:\\root\\sub\\x.txt", ".\\sub\\x.txt"),
            ("C:\\Root\\", ".\\"),
            ("C:\\Other\\x.txt", "\\Other\\x.txt"),
            ("D:\\Root\\x.txt", "D:\\Root\\x.txt"),
            ("\\\\server\\share\\x", "\\\\server\\share\\x"),
            ("", ""),
        ],
    )
    def test_windows(self, path: str, expected: str) -> None:
        """Base prefix becomes '.\\', a matching drive is stripped."""
        assert absolute_path_to_relative(W(path), W(WIN_BASE)) == W(expected)

    def test_posix_prefix_match(self) -> None:
        """POSIX paths below the base get the './' marker."""
        assert absolute_path_to_relative(P(b"/srv/data/a/b"), P(b"/srv/data/")) == P(b"./a/b")

    def test_posix_prefix_is_case_sensitive(self) -> None:
        """Case differences mean no match on posix."""
        assert absolute_path_to_relative(P(b"/SRV/data/a"), P(b"/srv/data/")) == P(b"/SRV/data/a")

    def test_posix_outside_base_unchanged(self) -> None:
        """There is no drive fallback on posix."""
        assert absolute_path_to_relative(P(b"/etc/x"), P(b"/srv/")) == P(b"/etc/x")


class TestRelativeToAbsolute:
    """Tests for relative_path_to_absolute."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            (".\\Sub\\x.txt", "C:\\Root\\Sub\\x.txt"),
            ("\\Other\\x.txt", "C:\\Other\\x.txt"),
            ("\\\\server\\share\\x", "\\\\server\\share\\x"),
            ("Sub\\x.txt", "C:\\Root\\Sub\\x.txt"),
            ("D:\\x.txt", "D:\\x.txt"),
            ("", ""),
        ],
    )
    def test_windows(self, path: str, expected: str) -> None:
        """Each relative shape expands against the base."""
        assert relative_path_to_absolute(W(path), W(WIN_BASE)) == W(expected)

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            (b"./a/b", b"/srv/data/a/b"),
            (b"a/b", b"/srv/data/a/b"),
            (b"/etc/x", b"/etc/x"),
        ],
    )
    def test_posix(self, path: bytes, expected: bytes) -> None:
        """POSIX relative paths are joined onto the base."""
        assert relative_path_to_absolute(P(path), P(b"/srv/data/")) == P(expected)

    @pytest.mark.parametrize(
        "path",
        ["C:\\Root\\Sub\\x.txt", "C:\\Other\\x.txt", "\\\\server\\share\\x", "D:\\x"],
    )
    def test_inverse_for_known_shapes(self, path: str) -> None:
        """Relativizing then expanding restores the original path."""
        base = W(WIN_BASE)
        assert relative_path_to_absolute(absolute_path_to_relative(W(path), base), base) == W(path)


class TestFlavourMismatch:
    """Tests for mixing flavours between path and base."""

    def test_to_relative_rejects_mixed_flavours(self) -> None:
        """A windows path cannot be relativized against a posix base."""
        with pytest.raises(FlavourMismatchError):
            absolute_path_to_relative(W("C:\\Root\\x"), P(b"/srv/"))

    def test_to_absolute_rejects_mixed_flavours(self) -> None:
        """A posix path cannot be expanded against a windows base."""
        with pytest.raises(FlavourMismatchError):
            relative_path_to_absolute(P(b"./x"), W(WIN_BASE))

    def test_empty_path_still_checked(self) -> None:
        """The flavour check happens before the empty shortcut."""
        with pytest.raises(FlavourMismatchError):
            absolute_path_to_relative(W(""), P(b"/srv/"))
