"""Diagnostic reporting for generation passes."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol

ERROR = "error"
WARNING = "warning"
INFO = "info"

SEVERITIES = (ERROR, WARNING, INFO)

_LOG_LEVELS = {
    ERROR: logging.ERROR,
    WARNING: logging.WARNING,
    INFO: logging.INFO,
}


class Reporter(Protocol):
    def report(self, severity: str, message: str) -> None:
        """Report a diagnostic message at the given severity."""


@dataclass(slots=True)
class Diagnostic:
    severity: str
    message: str


@dataclass(slots=True)
class LoggingReporter:
    """Reporter that records diagnostics and forwards them to logging."""

    logger: logging.Logger = field(default_factory=lambda: logging.getLogger("codegen.diagnostics"))
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def report(self, severity: str, message: str) -> None:
        if severity not in _LOG_LEVELS:
            raise ValueError(f"Unknown severity '{severity}'. Supported: {', '.join(SEVERITIES)}")
        self.diagnostics.append(Diagnostic(severity=severity, message=message))
        self.logger.log(_LOG_LEVELS[severity], message)

    def count(self, severity: str) -> int:
        return sum(1 for d in self.diagnostics if d.severity == severity)

    @property
    def has_errors(self) -> bool:
        return self.count(ERROR) > 0
