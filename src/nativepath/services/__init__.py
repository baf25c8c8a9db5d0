"""nativepath services layer.

Services combine path values with the operating system: conversions that
need a reference path, filesystem probes and temporary resources.
"""

from nativepath.services.filters import (
    as_filter_only_string,
    as_filter_string,
    to_filter_only_string,
    to_filter_string,
)
from nativepath.services.fs import (
    delete_directory_tree,
    get_absolute_path,
    get_executable_directory,
    get_temp_directory,
    is_directory,
    is_file,
    path_exists,
)
from nativepath.services.relative import (
    absolute_path_to_relative,
    relative_path_to_absolute,
    support_long_path,
)
from nativepath.services.sanitize import sanitize_path_component
from nativepath.services.temp import TempDirGuard, TempFileGuard, TemporaryPathname
from nativepath.services.tokens import (
    UUIDTokenGenerator,
    get_token_generator,
    init_token_generator,
    reset_token_generator,
)

__all__ = [
    "TempDirGuard",
    "TempFileGuard",
    "TemporaryPathname",
    "UUIDTokenGenerator",
    "absolute_path_to_relative",
    "as_filter_only_string",
    "as_filter_string",
    "delete_directory_tree",
    "get_absolute_path",
    "get_executable_directory",
    "get_temp_directory",
    "get_token_generator",
    "init_token_generator",
    "is_directory",
    "is_file",
    "path_exists",
    "relative_path_to_absolute",
    "reset_token_generator",
    "sanitize_path_component",
    "support_long_path",
    "to_filter_only_string",
    "to_filter_string",
]
