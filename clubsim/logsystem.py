"""Log streams and the logger that forwards messages to them."""

import sys
from abc import ABC, abstractmethod
from typing import Optional, TextIO


class LogStream(ABC):
    """Destination for log messages."""

    @abstractmethod
    def send(self, message: object) -> None:
        """Deliver one message."""


class ConsoleLogStream(LogStream):
    """Writes each message on its own line, to standard output by default."""

    def __init__(self, output: Optional[TextIO] = None) -> None:
        self._output = output

    def send(self, message: object) -> None:
        print(str(message), file=self._output or sys.stdout)


class Logger:
    """Forwards messages to a stream that can be swapped at any time."""

    def __init__(self, stream: LogStream) -> None:
        self._stream = stream

    def rebind(self, stream: LogStream) -> None:
        self._stream = stream

    def log(self, message: object) -> None:
        self._stream.send(message)