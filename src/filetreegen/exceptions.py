class DirectoryReadError(OSError):
    """
    Exception raised when a directory cannot be listed while the tree is being built.

    A failed directory read aborts the whole build: no partial tree is returned, so the
    rendered output never silently under-reports inaccessible content. The original
    ``OSError`` is available as ``__cause__``.

    Attributes:
        path (str): Path of the directory that could not be listed.

    Example:
        >>> error = DirectoryReadError("/path/to/dir")
        >>> str(error)
        'Cannot read directory: /path/to/dir'
    """

    def __init__(self, path: str, reason: str = "") -> None:
        """
        Initialize the exception with the path of the unreadable directory.

        Args:
            path (str): Path of the directory that could not be listed.
            reason (str, optional): Short description of the underlying failure.
        """
        self.path = path
        message = f"Cannot read directory: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)

    def __str__(self) -> str:
        return str(self.args[0])


class UnsupportedFormatError(ValueError):
    """
    Exception raised when a tree is requested in a format that has no renderer.

    Example:
        >>> error = UnsupportedFormatError("yaml")
        >>> str(error)
        "Unsupported output format: 'yaml'. Expected one of: text, markdown, json"
    """

    def __init__(self, format_name: str) -> None:
        self.format_name = format_name
        super().__init__(
            f"Unsupported output format: {format_name!r}. Expected one of: text, markdown, json"
        )
