"""Filename component sanitization.

Replaces every character that is reserved in a path component on any
supported platform (``\\ " / : ? < > | *``) with ``_``. The characters are
all ASCII, so the byte-level replacement is also safe for UTF-8, where
none of these bytes can occur inside a multi-byte sequence. Encodings
such as Shift_JIS, GBK or Big5 reuse ``\\`` and ``|`` as trail bytes and
must be converted to text before sanitizing.
"""

from typing import TypeVar, overload

from nativepath.models.path_string import PathString

RESERVED_CHARACTERS = '\\"/:?<>|*'
REPLACEMENT = "_"

_TEXT_TABLE = str.maketrans({c: REPLACEMENT for c in RESERVED_CHARACTERS})
_BYTES_TABLE = bytes.maketrans(
    RESERVED_CHARACTERS.encode("ascii"),
    REPLACEMENT.encode("ascii") * len(RESERVED_CHARACTERS),
)

B = TypeVar("B", bytes, bytearray)


@overload
def sanitize_path_component(value: PathString) -> PathString: ...
@overload
def sanitize_path_component(value: str) -> str: ...
@overload
def sanitize_path_component(value: B) -> B: ...


def sanitize_path_component(value: PathString | str | bytes | bytearray) -> PathString | str | bytes | bytearray:
    """
    Make ``value`` safe to use as a single filename.

    Args:
        value: A path value, text (narrow or wide), or UTF-8/locale bytes.

    Returns:
        A value of the same type with reserved characters replaced.

    Raises:
        TypeError: For unsupported input types.
    """
    if isinstance(value, PathString):
        return PathString(sanitize_path_component(value.as_native()), value.traits)
    if isinstance(value, str):
        return value.translate(_TEXT_TABLE)
    if isinstance(value, (bytes, bytearray)):
        return value.translate(_BYTES_TABLE)
    raise TypeError(f"cannot sanitize {type(value).__name__}")
