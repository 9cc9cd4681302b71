"""Configuration models for txresults."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from txresults.table import TRANSACTION_RESULTS, UNKNOWN_RESULT


class VerifierConfig(BaseModel):
    """Drift verification settings."""

    model_config = ConfigDict(extra="forbid")

    enumeration: str = Field(
        default="",
        description=(
            "Path to a YAML/JSON enumeration snapshot, relative to the config file. "
            "Empty uses the bundled snapshot."
        ),
    )
    report_all: bool = Field(default=True, description="Report every drift instead of stopping at the first.")


class LookupConfig(BaseModel):
    """Lookup policy for codes missing from the table."""

    model_config = ConfigDict(extra="forbid")

    unknown_name: str = Field(default=UNKNOWN_RESULT, min_length=1)

    @field_validator("unknown_name")
    @classmethod
    def _not_a_result_name(cls, value: str) -> str:
        # The sentinel must not be mistaken for a real result.
        if value in TRANSACTION_RESULTS.values():
            raise ValueError(f"unknown_name {value!r} is the name of a known result code")
        return value


class TxResultsConfig(BaseModel):
    """Root configuration."""

    model_config = ConfigDict(extra="forbid")

    verifier: VerifierConfig = Field(default_factory=VerifierConfig)
    lookup: LookupConfig = Field(default_factory=LookupConfig)
