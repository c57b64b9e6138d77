"""Sinks for faults that must not crash the caller."""

import logging
from dataclasses import dataclass
from typing import List

logger = logging.getLogger(__name__)


@dataclass
class ErrorReport:
    """A reported fault."""

    context: str
    error: Exception


class ErrorReporter:
    """Base reporter. Subclasses must never raise from report()."""

    def report(self, context: str, error: Exception) -> None:
        raise NotImplementedError


class LoggingErrorReporter(ErrorReporter):
    """Report faults through the logging module."""

    def __init__(self, log: logging.Logger = logger):
        self._log = log

    def report(self, context: str, error: Exception) -> None:
        self._log.error(f"{context}: {error}")


class CollectingErrorReporter(LoggingErrorReporter):
    """Keep every report so a caller can surface it later."""

    def __init__(self, log: logging.Logger = logger):
        super().__init__(log)
        self.reports: List[ErrorReport] = []

    def report(self, context: str, error: Exception) -> None:
        self.reports.append(ErrorReport(context=context, error=error))
        super().report(context, error)

    def clear(self) -> None:
        """Forget all collected reports."""
        self.reports.clear()


class NullErrorReporter(ErrorReporter):
    """Drop every report."""

    def report(self, context: str, error: Exception) -> None:
        pass
