"""Transaction result code table and protocol drift verification."""

from txresults.errors import (
    ConfigLoadError,
    DriftDetectedError,
    DuplicateResultCodeError,
    EnumerationLoadError,
    TxResultsError,
    UnknownResultCodeError,
)
from txresults.sources import (
    EnumClassSource,
    EnumerationSource,
    FileSource,
    MappingSource,
    ProtoEnumSource,
    bundled_snapshot,
)
from txresults.table import (
    SUCCESS_CODE,
    TRANSACTION_RESULTS,
    UNKNOWN_RESULT,
    ResultCodeTable,
    get,
    lookup,
)
from txresults.verifier import Drift, DriftReport, assert_in_sync, verify

__all__ = [
    "ConfigLoadError",
    "Drift",
    "DriftDetectedError",
    "DriftReport",
    "DuplicateResultCodeError",
    "EnumClassSource",
    "EnumerationLoadError",
    "EnumerationSource",
    "FileSource",
    "MappingSource",
    "ProtoEnumSource",
    "ResultCodeTable",
    "SUCCESS_CODE",
    "TRANSACTION_RESULTS",
    "TxResultsError",
    "UNKNOWN_RESULT",
    "UnknownResultCodeError",
    "assert_in_sync",
    "bundled_snapshot",
    "get",
    "lookup",
    "verify",
]
