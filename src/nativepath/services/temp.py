"""Temporary pathnames and scope-bound cleanup guards.

Guards own one filesystem entry and remove it when released: on leaving a
``with`` block, on an explicit ``cleanup()``, or when the guard is garbage
collected, whichever comes first. Release is fire-and-forget. It never
raises and never retries, so cleanup on an error path cannot introduce a
second failure.
"""

import os
import weakref
from pathlib import Path
from types import TracebackType

from loguru import logger

from nativepath.models.path_string import NativeString, PathString
from nativepath.ports.tokens import TokenSourcePort
from nativepath.services.fs import delete_directory_tree, get_temp_directory


def _as_path(value: PathString | str | None) -> PathString:
    if value is None:
        return PathString()
    if isinstance(value, PathString):
        return value
    return PathString.from_unicode(value)


class TemporaryPathname:
    """A fresh, unused name in the temp directory.

    The name is ``<temp dir>[<prefix>_]<token>[.<extension>]``. Building it
    performs no I/O.
    """

    def __init__(
        self,
        generator: TokenSourcePort,
        prefix: PathString | str | None = None,
        extension: PathString | str | None = None,
        *,
        directory: Path | None = None,
    ) -> None:
        prefix_path = _as_path(prefix)
        extension_path = _as_path(extension)

        pathname = get_temp_directory(directory)
        if not prefix_path.empty():
            pathname = pathname + prefix_path + PathString.from_unicode("_")
        pathname = pathname + PathString.from_unicode(generator.generate())
        if not extension_path.empty():
            pathname = pathname + PathString.from_unicode(".") + extension_path
        self._pathname = pathname

    @property
    def pathname(self) -> PathString:
        return self._pathname

    def __repr__(self) -> str:
        return f"TemporaryPathname({self._pathname!r})"


def _delete_file(raw: NativeString) -> None:
    try:
        os.remove(raw)
        logger.debug("Removed temporary file {!r}", raw)
    except OSError as e:
        logger.debug("Temporary file {!r} not removed: {}", raw, e)


def _delete_tree(path: PathString) -> None:
    if not delete_directory_tree(path):
        logger.warning("Temporary directory {} not fully removed", path)


def _owned(name: TemporaryPathname | PathString) -> PathString:
    return name.pathname if isinstance(name, TemporaryPathname) else name


class TempFileGuard:
    """Deletes a file when released.

    The guard does not create the file; it only guarantees that whatever
    ends up at the name is removed. An empty name makes release a no-op.
    """

    def __init__(self, pathname: TemporaryPathname | PathString) -> None:
        self._filename = _owned(pathname)
        if self._filename.empty():
            self._finalizer = None
        else:
            self._finalizer = weakref.finalize(self, _delete_file, self._filename.as_native())

    @property
    def filename(self) -> PathString:
        return self._filename

    def cleanup(self) -> None:
        """Delete the file now. Never raises."""
        if self._finalizer is not None:
            self._finalizer()

    def __enter__(self) -> "TempFileGuard":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.cleanup()


class TempDirGuard:
    """Creates a directory and deletes its whole tree when released.

    If the directory cannot be created the guard owns nothing: ``dirname``
    is empty and release does nothing.
    """

    def __init__(self, pathname: TemporaryPathname | PathString) -> None:
        self._dirname = _owned(pathname).with_trailing_slash()
        self._finalizer = None
        if self._dirname.empty():
            return
        try:
            os.mkdir(self._dirname.as_native())
        except OSError as e:
            logger.warning("Cannot create temporary directory {}: {}", self._dirname, e)
            self._dirname = PathString(traits=self._dirname.traits)
            return
        logger.debug("Created temporary directory {}", self._dirname)
        self._finalizer = weakref.finalize(self, _delete_tree, self._dirname)

    @property
    def dirname(self) -> PathString:
        return self._dirname

    @property
    def acquired(self) -> bool:
        return not self._dirname.empty()

    def cleanup(self) -> None:
        """Delete the directory tree now. Never raises."""
        if self._finalizer is not None:
            self._finalizer()

    def __enter__(self) -> "TempDirGuard":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.cleanup()
