from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class TreeFormat(str, Enum):
    """Enumeration of the textual formats a file tree can be rendered in.

    Attributes:
        TEXT: Box-drawing tree similar to the Unix ``tree`` command
        MARKDOWN: Bulleted Markdown outline under a level-1 heading
        JSON: Structural JSON document of names and types
    """

    TEXT = "text"
    MARKDOWN = "markdown"
    JSON = "json"
