"""Signal-aware output writing for the filetreegen CLI."""

import errno
import os
import types
from pathlib import Path
from typing import Optional, Type, Union

from filetreegen.cli.signal_handler import signal_handler


class SafeWriter:
    """Writes rendered output to a file descriptor or a file path.

    Writes go straight to the file descriptor as UTF-8. Once SIGPIPE or SIGINT has been
    received, further writes raise BrokenPipeError so the caller can stop producing
    output.

    Attributes:
        file: The file descriptor or path given at construction.
        fd: The file descriptor being written to.
        path: The output path when writing to a file, otherwise None.
        bytes_written: Number of bytes written so far.

    Example:
        >>> with SafeWriter(Path("tree.txt")) as writer:  # doctest: +SKIP
        ...     writer.write("proj\\n")
    """

    def __init__(self, file: Union[int, str, Path], encoding: str = "utf-8"):
        self.file = file
        self.encoding = encoding
        self.bytes_written = 0
        self._closed = False

        if isinstance(file, int):
            self.fd = file
            self.path: Optional[Path] = None
            self._file_obj = None
        elif isinstance(file, (str, os.PathLike)):
            self.path = Path(file)
            self._file_obj = self.path.open("w", encoding=encoding)
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: str) -> None:
        """Write a chunk of text.

        Raises:
            BrokenPipeError: If SIGPIPE/SIGINT was received or the pipe is broken.
            OSError: If another I/O error occurs.
            ValueError: If the writer has been closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted():
            raise BrokenPipeError()

        payload = data.encode(self.encoding)
        try:
            while payload:
                written = os.write(self.fd, payload)
                self.bytes_written += written
                payload = payload[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise

    def close(self) -> None:
        """Close the file if this writer opened it.

        The writer is marked closed even when closing fails with a broken pipe.
        """
        if self._closed:
            return

        if self._file_obj is not None:
            try:
                self._file_obj.close()
            except OSError as e:
                if e.errno != errno.EPIPE:
                    raise

        self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        try:
            self.close()
        except OSError:
            # An exception from the with block takes precedence over a close failure
            if exc_type is None:
                raise
