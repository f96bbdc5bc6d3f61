"""Random file names for user uploads.

A name consists of 32 lowercase hexadecimal characters and an extension of
lowercase latin letters and digits.
"""

import re
import secrets
from dataclasses import dataclass

from wphelpers.errors import InvalidArgument

NAME_LENGTH = 32
NAME_PATTERN = re.compile(r"[a-f0-9]{32}")
EXTENSION_PATTERN = re.compile(r"[a-z0-9]+")
FILENAME_PATTERN = re.compile(r"[a-f0-9]{32}\.[a-z0-9]+")


@dataclass(frozen=True)
class RandomFilename:
    """Immutable random file name.

    Attributes:
        name: 32 lowercase hexadecimal characters
        extension: Lowercase basic latin letters and digits
    """

    name: str
    extension: str

    def __init__(self, extension: str, name: str | None = None):
        """Create a file name with the given extension.

        Args:
            extension: Required. Allowed characters are a-z and 0-9.
            name: Use this name instead of a random one.
        """
        if not isinstance(extension, str) or extension == "":
            raise InvalidArgument(
                "Parameter extension must contain at least one character."
            )
        if not EXTENSION_PATTERN.fullmatch(extension):
            raise InvalidArgument(
                "Parameter extension must contain only lowercase basic latin "
                "letters and integers 0-9."
            )
        if name is None:
            name = secrets.token_hex(NAME_LENGTH // 2)
        elif not isinstance(name, str) or not NAME_PATTERN.fullmatch(name):
            raise InvalidArgument(
                "Parameter name must be a 32 character hexadecimal string."
            )
        # Use object.__setattr__ to bypass frozen dataclass
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "extension", extension)

    @classmethod
    def from_string(cls, filename: str) -> "RandomFilename":
        """Create an instance from an existing file name."""
        name, dot, extension = filename.rpartition(".")
        if not dot:
            name, extension = filename, ""
        if not NAME_PATTERN.fullmatch(name):
            raise InvalidArgument(
                "Parameter filename must have a name consisting of 32 "
                f"hexadecimal characters. A value of [{name}] was provided"
            )
        if not EXTENSION_PATTERN.fullmatch(extension):
            raise InvalidArgument(
                "Parameter filename must have an extension that consists only of "
                f"lowercase basic latin letters a-z and integers 0-9. A value of [{extension}] was provided"
            )
        return cls(extension, name)

    def with_name(self, name: str) -> "RandomFilename":
        """Return a copy with the same extension and the given name."""
        return RandomFilename(self.extension, name)

    def __str__(self) -> str:
        return f"{self.name}.{self.extension}"

    def __repr__(self) -> str:
        return f"RandomFilename({str(self)!r})"


def is_random_filename(value: object) -> bool:
    """Does ``value`` look like a string produced by RandomFilename?"""
    return isinstance(value, str) and FILENAME_PATTERN.fullmatch(value) is not None
