"""Platform-native path values and lexical path manipulation."""

from loguru import logger

from nativepath.models.file_type import FileType, FileTypeFormat
from nativepath.models.path_string import PathString, SplitPath
from nativepath.traits import PathTraits, PosixTraits, WindowsTraits, get_traits, host_traits

__version__ = "0.1.0"

# silent until an application calls utils.logging.configure_logging
logger.disable("nativepath")

__all__ = [
    "FileType",
    "FileTypeFormat",
    "PathString",
    "PathTraits",
    "PosixTraits",
    "SplitPath",
    "WindowsTraits",
    "__version__",
    "get_traits",
    "host_traits",
]
