"""Value types for nativepath."""

from nativepath.models.file_type import FileType, FileTypeFormat
from nativepath.models.path_string import NativeString, PathString, SplitPath

__all__ = [
    "FileType",
    "FileTypeFormat",
    "NativeString",
    "PathString",
    "SplitPath",
]
