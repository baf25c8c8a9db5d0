"""File type descriptions used to build file-picker filters."""

from enum import Flag, auto

from pydantic import BaseModel, ConfigDict, field_validator


class FileTypeFormat(Flag):
    """Rendering options for filter strings."""

    NONE = 0
    SHOW_EXTENSIONS = auto()


def _strip_dots(extensions: object) -> object:
    if isinstance(extensions, str):
        extensions = (extensions,)
    if isinstance(extensions, (list, tuple)):
        return tuple(e[1:] if isinstance(e, str) and e.startswith(".") else e for e in extensions)
    return extensions


class FileType(BaseModel):
    """A named file type with its extensions.

    Extensions are stored without the leading dot (``"txt"``, not ``".txt"``).
    """

    model_config = ConfigDict(frozen=True)

    short_name: str = ""
    description: str = ""
    mime_types: tuple[str, ...] = ()
    extensions: tuple[str, ...] = ()

    @field_validator("extensions", mode="before")
    @classmethod
    def strip_leading_dots(cls, v: object) -> object:
        """Accept ".txt" as well as "txt"."""
        return _strip_dots(v)

    def label(self) -> str:
        """Visible label: the description, or the short name without one."""
        return self.description or self.short_name

    def with_extensions(self, *extensions: str) -> "FileType":
        return self.model_copy(update={"extensions": _strip_dots(extensions)})
