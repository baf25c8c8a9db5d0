"""Rewriting between absolute and base-relative paths, and long-path escaping.

The two conversions special-case a handful of path shapes and are inverse
to each other only for those shapes. They are not a general
resolve/relativize pair. Paths on another drive than ``base``, or shapes
outside the special cases, are left unchanged or get ``base`` prepended.

Windows flavour, with base ``C:\\Root\\``::

    C:\\Root\\Sub\\x.txt  <->  .\\Sub\\x.txt
    C:\\Other\\x.txt      <->  \\Other\\x.txt
    \\\\server\\share\\x   <->  \\\\server\\share\\x
"""

from nativepath.errors import FlavourMismatchError
from nativepath.models.path_string import PathString
from nativepath.services.fs import get_absolute_path
from nativepath.traits.windows import LONG_PATH_PREFIX, LONG_UNC_PREFIX

MAX_PATH = 260


def absolute_path_to_relative(path: PathString, base: PathString) -> PathString:
    """
    Express ``path`` relative to ``base`` where one of the known shapes applies.

    Args:
        path: Path to rewrite.
        base: Reference directory, normally with a trailing separator.

    Returns:
        ``.\\rest`` if ``path`` starts with ``base`` (case-insensitively on
        windows), ``\\rest`` if only the drive matches, otherwise ``path``.

    Raises:
        FlavourMismatchError: If ``path`` and ``base`` differ in flavour.
    """
    if base.flavour != path.flavour:
        raise FlavourMismatchError(path.flavour, base.flavour)
    if path.empty():
        return path
    traits = path.traits
    raw = path.as_native()
    base_raw = base.as_native()

    if traits.starts_with(raw, base_raw):
        marker = traits.lit(".") + traits.default_separator
        return PathString(marker + raw[len(base_raw) :], traits)
    if traits.has_drives and traits.starts_with(raw[:2], base_raw[:2]):
        # same drive: keep the drive-relative remainder
        return PathString(raw[2:], traits)
    return path


def relative_path_to_absolute(path: PathString, base: PathString) -> PathString:
    """
    Expand a path produced by absolute_path_to_relative against ``base``.

    Args:
        path: Relative (or already absolute) path.
        base: Reference directory, normally with a trailing separator.

    Returns:
        The expanded path; UNC and drive-qualified paths come back unchanged.

    Raises:
        FlavourMismatchError: If ``path`` and ``base`` differ in flavour.
    """
    if base.flavour != path.flavour:
        raise FlavourMismatchError(path.flavour, base.flavour)
    if path.empty():
        return path
    traits = path.traits
    raw = path.as_native()
    base_raw = base.as_native()
    sep = traits.default_separator
    dot_marker = traits.lit(".") + sep

    if not traits.has_drives:
        if raw[:1] == sep:
            return path
        if raw[:2] == dot_marker:
            return PathString(base_raw + raw[2:], traits)
        return PathString(base_raw + raw, traits)

    if raw[:2] == sep + sep:
        return path
    if raw[:1] == sep:
        return PathString(base_raw[:2] + raw, traits)
    if raw[:2] == dot_marker:
        return PathString(base_raw + raw[2:], traits)
    if len(raw) < 3 or raw[1:2] != ":" or raw[2:3] != sep:
        return PathString(base_raw + raw, traits)
    return path


def support_long_path(path: PathString, max_path: int = MAX_PATH) -> PathString:
    """
    Escape a path so that OS calls accept it beyond ``max_path`` characters.

    No-op for short paths, already escaped paths, and flavours without a
    path length limit.

    Args:
        path: Path to escape.
        max_path: Length from which escaping is needed.

    Returns:
        ``\\\\?\\C:\\...`` or ``\\\\?\\UNC\\server\\...`` form of the absolute path.
    """
    traits = path.traits
    if not traits.supports_long_paths:
        return path
    raw = path.as_native()
    if len(raw) < max_path or raw.startswith(LONG_PATH_PREFIX):
        return path

    absolute = get_absolute_path(path).as_native()
    if absolute[:2] == "\\\\":
        return PathString(LONG_UNC_PREFIX + absolute[1:], traits)
    return PathString(LONG_PATH_PREFIX + absolute, traits)
