"""Conversions between native path sequences and portable text encodings.

Two transcoders exist, one per native representation:

- ``WideTranscoder``: the native type is ``str`` holding UTF-16 code units.
  Lone surrogates are legal in the native sequence but have no Unicode
  meaning, so they are replaced by U+FFFD whenever text leaves the native
  type.
- ``ByteTranscoder``: the native type is ``bytes`` in a configured
  filesystem encoding (UTF-8 unless told otherwise). Undecodable bytes are
  replaced by U+FFFD, unencodable code points by ``?``.

Conversions are round-trip identical only for sequences whose code points
are representable on both sides. Native paths may legitimately contain
sequences that are not valid text, so lossy replacement is the contract
here and must not be turned into a lossless escape scheme.
"""

import locale
import re

_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def preferred_locale_encoding() -> str:
    """Return the encoding of the current locale."""
    return locale.getpreferredencoding(False)


def scrub_surrogates(text: str) -> str:
    """Replace lone surrogate code points with U+FFFD."""
    return _LONE_SURROGATE.sub("\ufffd", text)


class WideTranscoder:
    """Transcoder for ``str`` native sequences (UTF-16 code units)."""

    def __init__(self, locale_encoding: str | None = None) -> None:
        self._locale_encoding = locale_encoding

    @property
    def locale_encoding(self) -> str:
        return self._locale_encoding or preferred_locale_encoding()

    def to_unicode(self, raw: str) -> str:
        return scrub_surrogates(raw)

    def from_unicode(self, text: str) -> str:
        return text

    def to_utf8(self, raw: str) -> bytes:
        return scrub_surrogates(raw).encode("utf-8")

    def from_utf8(self, data: bytes) -> str:
        return bytes(data).decode("utf-8", "replace")

    def to_wide(self, raw: str) -> str:
        # wide text is the native representation itself
        return raw

    def from_wide(self, text: str) -> str:
        return text

    def to_locale(self, raw: str) -> bytes:
        return scrub_surrogates(raw).encode(self.locale_encoding, "replace")

    def from_locale(self, data: bytes) -> str:
        return bytes(data).decode(self.locale_encoding, "replace")


class ByteTranscoder:
    """Transcoder for ``bytes`` native sequences in a filesystem encoding."""

    def __init__(self, encoding: str = "utf-8", locale_encoding: str | None = None) -> None:
        self.encoding = encoding
        self._locale_encoding = locale_encoding

    @property
    def locale_encoding(self) -> str:
        return self._locale_encoding or preferred_locale_encoding()

    def to_unicode(self, raw: bytes) -> str:
        return raw.decode(self.encoding, "replace")

    def from_unicode(self, text: str) -> bytes:
        return text.encode(self.encoding, "replace")

    def to_utf8(self, raw: bytes) -> bytes:
        return self.to_unicode(raw).encode("utf-8", "replace")

    def from_utf8(self, data: bytes) -> bytes:
        return self.from_unicode(bytes(data).decode("utf-8", "replace"))

    def to_wide(self, raw: bytes) -> str:
        return self.to_unicode(raw)

    def from_wide(self, text: str) -> bytes:
        return self.from_unicode(text)

    def to_locale(self, raw: bytes) -> bytes:
        return self.to_unicode(raw).encode(self.locale_encoding, "replace")

    def from_locale(self, data: bytes) -> bytes:
        return self.from_unicode(bytes(data).decode(self.locale_encoding, "replace"))


__all__ = [
    "ByteTranscoder",
    "WideTranscoder",
    "preferred_locale_encoding",
    "scrub_surrogates",
]
