"""Filter strings for file-type pickers.

A full filter entry looks like ``Description (*.a,*.b)|*.a;*.b|`` and
entries are concatenated for several types. The filter-only form is just
the pattern list ``*.a;*.b``, used to build an "all supported files" entry.
"""

from collections.abc import Iterable
from typing import Any

from nativepath.models.file_type import FileType, FileTypeFormat
from nativepath.models.path_string import PathString
from nativepath.traits import PathTraits


def _patterns(file_type: FileType, separator: str) -> str:
    return separator.join(f"*.{ext}" for ext in file_type.extensions)


def as_filter_string(
    file_type: FileType,
    fmt: FileTypeFormat = FileTypeFormat.NONE,
    traits: PathTraits[Any] | None = None,
) -> PathString:
    """
    Render one file type as a picker filter entry.

    Args:
        file_type: Type to render.
        fmt: FileTypeFormat.SHOW_EXTENSIONS adds the pattern list to the label.
        traits: Flavour of the result (host by default).

    Returns:
        The entry, or an empty path if the type has no short name or
        no extensions.
    """
    if not file_type.short_name or not file_type.extensions:
        return PathString(traits=traits)
    text = file_type.label()
    if fmt & FileTypeFormat.SHOW_EXTENSIONS:
        text += f" ({_patterns(file_type, ',')})"
    text += f"|{_patterns(file_type, ';')}|"
    return PathString.from_unicode(text, traits)


def as_filter_only_string(file_type: FileType, traits: PathTraits[Any] | None = None) -> PathString:
    """Render just the ``*.a;*.b`` pattern list of one file type."""
    return PathString.from_unicode(_patterns(file_type, ";"), traits)


def to_filter_string(
    file_types: FileType | Iterable[FileType],
    fmt: FileTypeFormat = FileTypeFormat.NONE,
    traits: PathTraits[Any] | None = None,
) -> PathString:
    """Concatenate the filter entries of one or more file types."""
    if isinstance(file_types, FileType):
        file_types = [file_types]
    result = PathString(traits=traits)
    for file_type in file_types:
        result = result + as_filter_string(file_type, fmt, result.traits)
    return result


def to_filter_only_string(
    file_types: FileType | Iterable[FileType],
    prepend_semicolon: bool = False,
    traits: PathTraits[Any] | None = None,
) -> PathString:
    """
    Combine the pattern lists of one or more file types.

    Args:
        file_types: Types to combine.
        prepend_semicolon: Start a non-empty result with ``;`` so it can be
            appended to an existing pattern list.
        traits: Flavour of the result (host by default).

    Returns:
        ``*.a;*.b;*.c``, or an empty path if there are no extensions.
    """
    if isinstance(file_types, FileType):
        file_types = [file_types]
    text = ";".join(p for p in (_patterns(t, ";") for t in file_types) if p)
    if text and prepend_semicolon:
        text = ";" + text
    return PathString.from_unicode(text, traits)
