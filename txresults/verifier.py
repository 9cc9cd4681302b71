"""Check that the local result table has not drifted from the protocol enumeration."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from txresults.errors import DriftDetectedError
from txresults.sources import EnumerationSource, as_source
from txresults.table import TRANSACTION_RESULTS, ResultCodeTable

logger = logging.getLogger(__name__)

MISSING = "<missing>"


@dataclass(frozen=True)
class Drift:
    """One upstream code whose local name differs or is absent."""

    code: int
    expected: str
    actual: str | None = None

    @property
    def missing(self) -> bool:
        return self.actual is None

    def describe(self) -> str:
        actual = MISSING if self.actual is None else repr(self.actual)
        return f"code {self.code}: expected {self.expected!r}, local {actual}"


@dataclass(frozen=True)
class DriftReport:
    """Outcome of one verification pass."""

    source: str
    checked: int
    drifts: list[Drift] = field(default_factory=list)

    @property
    def in_sync(self) -> bool:
        return not self.drifts

    def describe(self) -> str:
        if self.in_sync:
            return f"{self.checked} result code(s) in sync with {self.source}"
        lines = [f"{len(self.drifts)} result code(s) drifted from {self.source}:"]
        lines.extend(f"  {drift.describe()}" for drift in self.drifts)
        return "\n".join(lines)


def verify(
    source: EnumerationSource | Mapping[int, str],
    table: ResultCodeTable = TRANSACTION_RESULTS,
    *,
    report_all: bool = True,
) -> DriftReport:
    """Compare every upstream pair against ``table``.

    Only upstream codes are checked; codes that exist only locally are
    allowed. With ``report_all=False`` the scan stops at the first drift.
    """
    enumeration = as_source(source)
    drifts: list[Drift] = []
    checked = 0
    for code, expected in enumeration.items():
        checked += 1
        actual = table.get(code, None)
        if actual == expected:
            continue
        drift = Drift(code=code, expected=expected, actual=actual)
        logger.error("Result code drift against %s: %s", enumeration.label, drift.describe())
        drifts.append(drift)
        if not report_all:
            break
    report = DriftReport(source=enumeration.label, checked=checked, drifts=drifts)
    if report.in_sync:
        logger.info("Verified %d result code(s) against %s", checked, enumeration.label)
    return report


def assert_in_sync(
    source: EnumerationSource | Mapping[int, str],
    table: ResultCodeTable = TRANSACTION_RESULTS,
    *,
    report_all: bool = True,
) -> DriftReport:
    """Run :func:`verify` and raise :class:`DriftDetectedError` on any drift."""
    report = verify(source, table, report_all=report_all)
    if not report.in_sync:
        raise DriftDetectedError(report)
    return report
