"""Drive-letter / UNC path convention.

Native sequences are ``str`` values holding UTF-16 code units. Both ``\\``
and ``/`` separate components; ``\\`` is the default. Paths may carry a
drive (``C:``), a UNC server and share (``\\\\server\\share``) and a
long-path escape prefix (``\\\\?\\`` or ``\\\\?\\UNC\\``).
"""

from typing import ClassVar

from nativepath.encoding import WideTranscoder
from nativepath.traits.base import PathTraits

LONG_PATH_PREFIX = "\\\\?\\"
LONG_UNC_PREFIX = "\\\\?\\UNC"
UNC_START = "\\\\"


class WindowsTraits(PathTraits[str]):
    """Traits for Windows-style paths."""

    name: ClassVar[str] = "windows"
    native_type: ClassVar[type] = str
    has_drives: ClassVar[bool] = True
    supports_long_paths: ClassVar[bool] = True
    case_sensitive: ClassVar[bool] = False

    def __init__(self, locale_encoding: str | None = None) -> None:
        super().__init__()
        self._transcoder = WideTranscoder(locale_encoding)

    @staticmethod
    def _separator_chars() -> str:
        return "\\/"

    def lit(self, text: str) -> str:
        return text

    @property
    def transcoder(self) -> WideTranscoder:
        return self._transcoder

    def fold_case(self, raw: str) -> str:
        return raw.casefold()

    def has_unc_start(self, raw: str) -> bool:
        return self.is_separator(raw[0:1]) and self.is_separator(raw[1:2])

    def has_drive_letter(self, raw: str) -> bool:
        return raw[1:2] == ":"

    def is_absolute(self, raw: str) -> bool:
        if raw.startswith(LONG_PATH_PREFIX):
            return True
        if self.has_unc_start(raw):
            return True
        return self.has_drive_letter(raw) and self.is_separator(raw[2:3])

    def split_root(self, raw: str) -> tuple[str, int]:
        # drive letter first: "C:" must not be mistaken for anything else
        if self.has_drive_letter(raw):
            return raw[:2] + "\\", 2
        if self.has_unc_start(raw):
            return UNC_START, 2
        return super().split_root(raw)

    def join_components(self, root: str, components: list[str]) -> str:
        # a relative result must not start with something read back as a drive
        if not root and components and self.has_drive_letter(components[0]):
            root = ".\\"
        return super().join_components(root, components)

    def split_anchor(self, raw: str) -> tuple[str, str, str]:
        prefix = ""
        if raw.startswith(LONG_UNC_PREFIX + "\\"):
            prefix = LONG_UNC_PREFIX
            raw = UNC_START + raw[len(LONG_UNC_PREFIX) + 1 :]
        elif raw.startswith(LONG_PATH_PREFIX):
            prefix = LONG_PATH_PREFIX
            raw = raw[len(LONG_PATH_PREFIX) :]

        if self.has_unc_start(raw):
            # \\server\share: the drive ends before the separator after the share
            rest = raw[2:]
            first = self.find_separator(rest)
            if first == -1:
                return prefix, raw, ""
            second = self.find_separator(rest, first + 1)
            if second == -1:
                return prefix, raw, ""
            end = 2 + second
            return prefix, raw[:end], raw[end:]

        if self.has_drive_letter(raw):
            return prefix, raw[:2], raw[2:]

        return prefix, "", raw
