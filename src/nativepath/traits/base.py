"""Flavour-independent path algorithms.

A ``PathTraits`` object bundles the constants that distinguish one path
convention from another (native character type, separator set, root
detection, drive and long-path support). The algorithms here are written
once against those constants; subclasses override root and anchor
detection.

Every algorithm is total: any native sequence yields a defined result.
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, TypeVar

N = TypeVar("N", str, bytes)

# (prefix, drive, directory, base, extension)
SplitResult = tuple[Any, Any, Any, Any, Any]


class PathTraits(ABC, Generic[N]):
    """Strategy object describing one path convention."""

    name: ClassVar[str]
    native_type: ClassVar[type]
    has_drives: ClassVar[bool] = False
    supports_long_paths: ClassVar[bool] = False
    case_sensitive: ClassVar[bool] = True

    def __init__(self) -> None:
        self.separators: tuple[N, ...] = tuple(self.lit(c) for c in self._separator_chars())
        self.default_separator: N = self.lit(self._separator_chars()[0])
        self.empty: N = self.lit("")
        self._dot: N = self.lit(".")
        self._dotdot: N = self.lit("..")

    @staticmethod
    @abstractmethod
    def _separator_chars() -> str:
        """Recognized separators, the default one first."""

    @abstractmethod
    def lit(self, text: str) -> N:
        """Convert an ASCII literal into the native type."""

    @property
    @abstractmethod
    def transcoder(self) -> Any:
        """Encoding bridge for this native type."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def is_separator(self, ch: N) -> bool:
        return len(ch) == 1 and ch in self.separators

    def find_separator(self, raw: N, start: int = 0) -> int:
        hits = [i for i in (raw.find(sep, start) for sep in self.separators) if i != -1]
        return min(hits, default=-1)

    def rfind_separator(self, raw: N) -> int:
        return max(raw.rfind(sep) for sep in self.separators)

    def ensure_trailing_separator(self, raw: N) -> N:
        if raw and not self.is_separator(raw[-1:]):
            return raw + self.default_separator
        return raw

    def fold_case(self, raw: N) -> N:
        return raw.lower()

    def compare_no_case(self, a: N, b: N) -> int:
        x, y = self.fold_case(a), self.fold_case(b)
        return (x > y) - (x < y)

    def starts_with(self, raw: N, prefix: N) -> bool:
        """Prefix test honouring the flavour's case sensitivity."""
        if len(raw) < len(prefix):
            return False
        head = raw[: len(prefix)]
        if self.case_sensitive:
            return head == prefix
        return self.fold_case(head) == self.fold_case(prefix)

    def is_absolute(self, raw: N) -> bool:
        return self.is_separator(raw[:1])

    def split_root(self, raw: N) -> tuple[N, int]:
        """Recognize the root of ``raw`` for simplification.

        Returns the root to emit and the index where components start.
        """
        if raw[:1] == self._dot and self.is_separator(raw[1:2]):
            return self._dot + self.default_separator, 2
        if self.is_separator(raw[:1]):
            return self.default_separator, 1
        return self.empty, 0

    def simplify(self, raw: N) -> N:
        """Remove ``.`` and ``..`` components and redundant separators.

        Separators are normalized to the default one and no trailing
        separator is kept beyond what the root itself carries. A ``..``
        with nothing left to pop is dropped.
        """
        if not raw:
            return self.empty

        root, pos = self.split_root(raw)
        components: list[N] = []
        while pos < len(raw):
            end = self.find_separator(raw, pos)
            if end == -1:
                end = len(raw)
            component = raw[pos:end]
            if component == self._dotdot:
                if components:
                    components.pop()
            elif component == self._dot:
                pass
            elif component:
                components.append(component)
            pos = end + 1

        return self.join_components(root, components)

    def join_components(self, root: N, components: list[N]) -> N:
        return root + self.default_separator.join(components)

    def split_anchor(self, raw: N) -> tuple[N, N, N]:
        """Strip (prefix, drive) from ``raw``; returns them and the rest."""
        return self.empty, self.empty, raw

    def split(self, raw: N) -> SplitResult:
        prefix, drive, rest = self.split_anchor(raw)

        directory = self.empty
        last_sep = self.rfind_separator(rest)
        if last_sep != -1:
            directory = rest[: last_sep + 1]
            rest = rest[last_sep + 1 :]

        base, extension = self.split_extension(rest)
        return prefix, drive, directory, base, extension

    def split_extension(self, name: N) -> tuple[N, N]:
        """Split a filename into base and extension.

        Dotfiles such as ``.gitignore`` and the names ``.``/``..`` have
        no extension.
        """
        last_dot = name.rfind(self._dot)
        if last_dot <= 0 or name in (self._dot, self._dotdot):
            return name, self.empty
        return name[:last_dot], name[last_dot:]
