"""Read-only lookup table from transaction result codes to canonical names."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from txresults.codes import RESULT_CODES
from txresults.errors import DuplicateResultCodeError, UnknownResultCodeError

UNKNOWN_RESULT = "UNKNOWN_RESULT_CODE"
SUCCESS_CODE = 22


class ResultCodeTable(Mapping[int, str]):
    """Immutable mapping of result code to name, fixed at construction.

    ``lookup`` raises :class:`UnknownResultCodeError` for absent codes;
    ``get`` returns a sentinel instead. There are no mutation methods, so a
    table built before any reader starts can be shared across threads.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[int, str] | Iterable[tuple[int, str]]) -> None:
        pairs = entries.items() if isinstance(entries, Mapping) else entries
        built: dict[int, str] = {}
        for code, name in pairs:
            if code in built:
                raise DuplicateResultCodeError(code, built[code], name)
            built[code] = name
        self._entries = MappingProxyType(dict(sorted(built.items())))

    def lookup(self, code: int) -> str:
        """Return the canonical name for ``code``."""
        try:
            return self._entries[code]
        except KeyError:
            raise UnknownResultCodeError(code) from None

    def get(self, code: int, default: str | None = UNKNOWN_RESULT) -> str | None:  # type: ignore[override]
        """Return the name for ``code`` or ``default`` when it is unknown."""
        return self._entries.get(code, default)

    def is_success(self, code: int) -> bool:
        return code == SUCCESS_CODE and code in self._entries

    def codes(self) -> list[int]:
        return list(self._entries)

    def as_dict(self) -> dict[int, str]:
        return dict(self._entries)

    def __getitem__(self, code: int) -> str:
        return self.lookup(code)

    def __contains__(self, code: object) -> bool:
        return code in self._entries

    def __iter__(self) -> Iterator[int]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ResultCodeTable({len(self._entries)} codes)"


TRANSACTION_RESULTS = ResultCodeTable(RESULT_CODES)


def lookup(code: int) -> str:
    """Return the canonical name for ``code`` from the shipped table."""
    return TRANSACTION_RESULTS.lookup(code)


def get(code: int, default: str | None = UNKNOWN_RESULT) -> str | None:
    """Return the shipped name for ``code`` or ``default``."""
    return TRANSACTION_RESULTS.get(code, default)
