"""Diagnostic sinks for colonmark.

A sink is where transforms send operator-facing warnings. The default sink
writes to the ``colonmark.diagnostics`` logger; build tools may pass any
object with a ``warn(message)`` method instead.

"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from colonmark.utils.logger import get_logger


@runtime_checkable
class DiagnosticSink(Protocol):
    """Receives warning-level messages.

    Fire-and-forget: implementations return nothing and may perform I/O.

    """

    def warn(self, message: str) -> None: ...


class LoggerSink:
    """Sink that forwards warnings to a standard library logger."""

    __slots__ = ("_logger",)

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or get_logger("diagnostics")

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def warn(self, message: str) -> None:
        self._logger.warning(message)


class CollectingSink:
    """Sink that keeps every message in memory.

    Useful for tests and for tools that batch warnings per build.

    """

    __slots__ = ("messages",)

    def __init__(self) -> None:
        self.messages: list[str] = []

    def warn(self, message: str) -> None:
        self.messages.append(message)


__all__ = ["CollectingSink", "DiagnosticSink", "LoggerSink"]
