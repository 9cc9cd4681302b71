"""Exception hierarchy for txresults."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from txresults.verifier import DriftReport


class TxResultsError(Exception):
    """Base class for all txresults errors."""


class UnknownResultCodeError(TxResultsError, KeyError):
    """Raised when a result code has no entry in the table."""

    def __init__(self, code: int) -> None:
        super().__init__(code)
        self.code = code

    def __str__(self) -> str:
        return f"Unknown result code: {self.code}"


class DuplicateResultCodeError(TxResultsError, ValueError):
    """Raised when a table source list repeats a result code."""

    def __init__(self, code: int, first: str, second: str) -> None:
        super().__init__(f"Duplicate result code {code}: {first!r} and {second!r}")
        self.code = code
        self.first = first
        self.second = second


class DriftDetectedError(TxResultsError, AssertionError):
    """Raised when the local table disagrees with an external enumeration."""

    def __init__(self, report: DriftReport) -> None:
        super().__init__(report.describe())
        self.report = report


class EnumerationLoadError(TxResultsError, ValueError):
    """Raised when an enumeration snapshot cannot be read."""


class ConfigLoadError(TxResultsError, ValueError):
    """Raised when configuration YAML cannot be parsed or validated."""
