"""Filesystem helpers for host-flavour paths.

These are the only functions besides the temporary guards that touch the
filesystem. They never raise for OS failures. Probes fail closed (an error
means "no") and mutating operations report success as a boolean.
"""

import os
import sys
import tempfile
from pathlib import Path

from loguru import logger

from nativepath.models.path_string import NativeString, PathString
from nativepath.traits import host_traits


def path_exists(path: PathString) -> bool:
    """Return True if anything exists at ``path``."""
    if path.empty():
        return False
    return os.path.exists(path.as_native())


def _without_trailing_separators(path: PathString) -> NativeString:
    # "link/" makes lstat resolve the link; keep a bare root intact
    raw = path.as_native()
    traits = path.traits
    end = len(raw)
    while end > 1 and traits.is_separator(raw[end - 1 : end]):
        end -= 1
    return raw[:end]


def is_directory(path: PathString, follow_symlinks: bool = True) -> bool:
    """Return True if ``path`` names a directory.

    With ``follow_symlinks=False`` a symbolic link is never a directory,
    even when written with a trailing separator.
    """
    if path.empty():
        return False
    if not follow_symlinks and os.path.islink(_without_trailing_separators(path)):
        return False
    return os.path.isdir(path.as_native())


def is_file(path: PathString) -> bool:
    """Return True if ``path`` exists and is not a directory."""
    return path_exists(path) and not is_directory(path)


def get_absolute_path(path: PathString) -> PathString:
    """
    Resolve ``path`` to an absolute path without touching the filesystem.

    Host-flavour paths go through the OS (``GetFullPathName`` on Windows).
    Paths of another flavour cannot be resolved against a working directory;
    absolute ones are simplified, relative ones come back unchanged. On any
    failure the input is returned.
    """
    if path.empty():
        return path
    if path.flavour != host_traits().name:
        return path.simplify() if path.is_absolute() else path
    try:
        return PathString(os.path.abspath(path.as_native()), path.traits)
    except (OSError, ValueError):
        logger.debug("Could not resolve absolute path for {!r}", path)
        return path


def get_executable_directory() -> PathString:
    """Directory of the running interpreter, with a trailing separator."""
    if not sys.executable:
        return PathString()
    exe = PathString.from_fspath(sys.executable)
    return get_absolute_path(exe.get_directory_with_drive()).ensure_trailing_slash()


def get_temp_directory(override: Path | None = None) -> PathString:
    """
    Return the directory for temporary files, with a trailing separator.

    Args:
        override: Configured directory to use instead of the system default.

    Returns:
        The temp directory, or the executable directory when the system
        has no usable temp directory.
    """
    if override is not None:
        return PathString.from_fspath(override).ensure_trailing_slash()
    try:
        return PathString.from_fspath(tempfile.gettempdir()).ensure_trailing_slash()
    except FileNotFoundError:
        logger.warning("No usable temp directory, falling back to executable directory")
        return get_executable_directory()


def delete_directory_tree(path: PathString) -> bool:
    """
    Recursively delete a directory.

    Depth-first; the first failure aborts the whole operation and leaves
    whatever has not been deleted yet in place. Symbolic links inside the
    tree are removed as links and never followed.

    Args:
        path: Absolute path of the directory.

    Returns:
        True if the directory is gone (or never existed). False if
        ``path`` is empty, relative, not a directory, or a deletion failed.
    """
    if path.empty():
        return False
    if not path.is_absolute():
        return False
    if not path_exists(path):
        return True
    if not is_directory(path, follow_symlinks=False):
        return False

    path = path.ensure_trailing_slash()
    try:
        with os.scandir(path.as_native()) as it:
            names = [entry.name for entry in it]
    except OSError as e:
        logger.warning("Cannot list {}: {}", path, e)
        return False

    for name in names:
        child = path + name
        if is_directory(child, follow_symlinks=False):
            if not delete_directory_tree(child):
                return False
        else:
            try:
                os.unlink(child.as_native())
            except OSError as e:
                logger.warning("Cannot delete {}: {}", child, e)
                return False

    try:
        os.rmdir(path.as_native())
    except OSError as e:
        logger.warning("Cannot remove directory {}: {}", path, e)
        return False

    logger.debug("Deleted directory tree {}", path)
    return True
