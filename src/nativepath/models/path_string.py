"""Native path value type.

``PathString`` stores a path exactly as the operating system's filesystem
APIs expect it (``str`` for the windows flavour, ``bytes`` for posix) and
never interprets it until it is explicitly decomposed or transcoded.
Values are immutable; every operation returns a new value.
"""

import os
from dataclasses import dataclass
from functools import total_ordering
from typing import Any

from nativepath.errors import FlavourMismatchError
from nativepath.traits import PathTraits, host_traits

NativeString = str | bytes


@dataclass(frozen=True)
class SplitPath:
    """A path decomposed into its five parts.

    ``join()`` concatenates the parts again. For ``\\\\?\\UNC\\`` paths the
    result differs from the input by one separator, which ``simplify()``
    removes.
    """

    prefix: "PathString"
    drive: "PathString"
    directory: "PathString"
    base: "PathString"
    extension: "PathString"

    def join(self) -> "PathString":
        return self.prefix + self.drive + self.directory + self.base + self.extension


@total_ordering
class PathString:
    """Immutable wrapper around a native path sequence."""

    __slots__ = ("_raw", "_traits")

    def __init__(self, raw: NativeString | bytearray | None = None, traits: PathTraits[Any] | None = None) -> None:
        traits = traits or host_traits()
        if raw is None:
            raw = traits.empty
        elif isinstance(raw, bytearray) and traits.native_type is bytes:
            raw = bytes(raw)
        elif not isinstance(raw, traits.native_type):
            raise TypeError(
                f"{traits.name} paths are stored as {traits.native_type.__name__}, "
                f"not {type(raw).__name__}"
            )
        self._raw = raw
        self._traits = traits

    # Construction

    @classmethod
    def from_native(cls, raw: NativeString, traits: PathTraits[Any] | None = None) -> "PathString":
        return cls(raw, traits)

    @classmethod
    def from_unicode(cls, text: str, traits: PathTraits[Any] | None = None) -> "PathString":
        traits = traits or host_traits()
        return cls(traits.transcoder.from_unicode(text), traits)

    @classmethod
    def from_utf8(cls, data: bytes, traits: PathTraits[Any] | None = None) -> "PathString":
        traits = traits or host_traits()
        return cls(traits.transcoder.from_utf8(data), traits)

    @classmethod
    def from_wide(cls, text: str, traits: PathTraits[Any] | None = None) -> "PathString":
        traits = traits or host_traits()
        return cls(traits.transcoder.from_wide(text), traits)

    @classmethod
    def from_locale(cls, data: bytes, traits: PathTraits[Any] | None = None) -> "PathString":
        traits = traits or host_traits()
        return cls(traits.transcoder.from_locale(data), traits)

    @classmethod
    def from_fspath(cls, path: "os.PathLike[Any] | NativeString") -> "PathString":
        """Wrap a path obtained from the running OS, losslessly."""
        value = os.fspath(path)
        traits = host_traits()
        if traits.native_type is bytes:
            return cls(os.fsencode(value), traits)
        return cls(os.fsdecode(value), traits)

    # Raw access and encodings

    @property
    def traits(self) -> PathTraits[Any]:
        return self._traits

    @property
    def flavour(self) -> str:
        return self._traits.name

    def as_native(self) -> NativeString:
        return self._raw

    def to_unicode(self) -> str:
        return self._traits.transcoder.to_unicode(self._raw)

    def to_utf8(self) -> bytes:
        return self._traits.transcoder.to_utf8(self._raw)

    def to_wide(self) -> str:
        return self._traits.transcoder.to_wide(self._raw)

    def to_locale(self) -> bytes:
        return self._traits.transcoder.to_locale(self._raw)

    def __fspath__(self) -> NativeString:
        return self._raw

    def __str__(self) -> str:
        return self.to_unicode()

    def __repr__(self) -> str:
        return f"PathString({self._raw!r}, flavour={self.flavour!r})"

    # Sequence behaviour

    def empty(self) -> bool:
        return not self._raw

    def __len__(self) -> int:
        return len(self._raw)

    def __bool__(self) -> bool:
        return bool(self._raw)

    def _wrap(self, raw: NativeString) -> "PathString":
        return PathString(raw, self._traits)

    def _coerce(self, other: object) -> NativeString | None:
        if isinstance(other, PathString):
            if other.flavour != self.flavour:
                raise FlavourMismatchError(self.flavour, other.flavour)
            return other._raw
        if isinstance(other, self._traits.native_type):
            return other  # type: ignore[return-value]
        return None

    def __add__(self, other: object) -> "PathString":
        raw = self._coerce(other)
        if raw is None:
            return NotImplemented
        return self._wrap(self._raw + raw)

    def __radd__(self, other: object) -> "PathString":
        raw = self._coerce(other)
        if raw is None:
            return NotImplemented
        return self._wrap(raw + self._raw)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathString):
            return NotImplemented
        return self.flavour == other.flavour and self._raw == other._raw

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PathString):
            return NotImplemented
        if other.flavour != self.flavour:
            raise FlavourMismatchError(self.flavour, other.flavour)
        return self._raw < other._raw

    def __hash__(self) -> int:
        return hash((self.flavour, self._raw))

    @staticmethod
    def compare_no_case(a: "PathString", b: "PathString") -> int:
        """Compare two paths ignoring case; returns -1, 0 or 1."""
        if a.flavour != b.flavour:
            raise FlavourMismatchError(a.flavour, b.flavour)
        return a._traits.compare_no_case(a._raw, b._raw)

    # Separators

    def is_path_separator(self, ch: NativeString) -> bool:
        return self._traits.is_separator(ch)

    def get_default_path_separator(self) -> NativeString:
        return self._traits.default_separator

    def ensure_trailing_slash(self) -> "PathString":
        """Return this path with the default separator appended if it
        is non-empty and does not already end in a separator."""
        return self._wrap(self._traits.ensure_trailing_separator(self._raw))

    with_trailing_slash = ensure_trailing_slash

    # Lexical operations

    def is_absolute(self) -> bool:
        return self._traits.is_absolute(self._raw)

    def simplify(self) -> "PathString":
        return self._wrap(self._traits.simplify(self._raw))

    def split(self) -> SplitPath:
        return SplitPath(*(self._wrap(part) for part in self._traits.split(self._raw)))

    def get_prefix(self) -> "PathString":
        return self.split().prefix

    def get_drive(self) -> "PathString":
        return self.split().drive

    def get_directory(self) -> "PathString":
        return self.split().directory

    def get_directory_with_drive(self) -> "PathString":
        parts = self.split()
        return parts.drive + parts.directory

    def get_filename_base(self) -> "PathString":
        return self.split().base

    def get_filename_extension(self) -> "PathString":
        return self.split().extension

    def get_filename(self) -> "PathString":
        parts = self.split()
        return parts.base + parts.extension

    def replace_extension(self, new_extension: "PathString | NativeString") -> "PathString":
        """Swap the extension; ``new_extension`` includes its leading dot."""
        parts = self.split()
        return parts.drive + parts.directory + parts.base + new_extension
