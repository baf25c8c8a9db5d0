"""Slash-separated path convention.

Native sequences are ``bytes``; only ``/`` separates components. There
are no drives, no UNC shares and no long-path escaping.
"""

from typing import ClassVar

from nativepath.encoding import ByteTranscoder
from nativepath.traits.base import PathTraits


class PosixTraits(PathTraits[bytes]):
    """Traits for POSIX-style paths."""

    name: ClassVar[str] = "posix"
    native_type: ClassVar[type] = bytes

    def __init__(self, encoding: str = "utf-8", locale_encoding: str | None = None) -> None:
        super().__init__()
        self._transcoder = ByteTranscoder(encoding, locale_encoding)

    @staticmethod
    def _separator_chars() -> str:
        return "/"

    def lit(self, text: str) -> bytes:
        return text.encode("ascii")

    @property
    def transcoder(self) -> ByteTranscoder:
        return self._transcoder
