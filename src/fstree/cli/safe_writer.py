"""Output writing that stops cleanly on broken pipes and interrupts."""

import errno
import os
import types
from pathlib import Path
from typing import Optional, Type, Union

from fstree.cli.signal_handler import signal_handler


class SafeWriter:
    """Writes rendered output to a file descriptor or a file path.

    Writes go straight to the descriptor with os.write, so a closed pipe shows up
    as BrokenPipeError at the write that hit it. A pending SIGPIPE or SIGINT also
    turns the next write into BrokenPipeError. Files opened by the writer are
    closed when the context exits; descriptors passed in are left open.

    Attributes:
        target: The descriptor or path given to the constructor.
        fd: The descriptor being written to.
    """

    def __init__(self, target: Union[int, str, os.PathLike], encoding: str = "utf-8"):
        self.target = target
        self.encoding = encoding
        self._closed = False

        if isinstance(target, int):
            self.fd = target
            self._owned_fd = False
        elif isinstance(target, (str, os.PathLike)):
            self.fd = os.open(Path(target), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
            self._owned_fd = True
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(target).__name__}")

    def write(self, data: str) -> None:
        """Write all of ``data``.

        Raises:
            BrokenPipeError: If SIGPIPE or SIGINT was received, or the pipe is closed.
            OSError: If another I/O error occurs.
            ValueError: If the writer is closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted:
            raise BrokenPipeError()

        view = memoryview(data.encode(self.encoding))
        try:
            while view:
                written = os.write(self.fd, view)
                view = view[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError() from e
            raise

    def close(self) -> None:
        """Close the descriptor if this writer opened it. Safe to call twice."""
        if self._closed:
            return
        self._closed = True
        if self._owned_fd:
            try:
                os.close(self.fd)
            except OSError as e:
                if e.errno != errno.EPIPE:
                    raise

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
            # An exception from the with block takes priority over a close error
            if exc_type is None:
                raise
