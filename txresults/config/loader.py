"""Locate, read and validate txresults.yaml."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from pydantic import ValidationError

from txresults.config.models import TxResultsConfig
from txresults.errors import ConfigLoadError

CONFIG_ENV = "TXRESULTS_CONFIG"
DEFAULT_FILENAME = "txresults.yaml"


def resolve_config_path(cli_path: str | None = None) -> Path:
    """Pick the config file: $TXRESULTS_CONFIG, then ``cli_path``, then ./txresults.yaml."""
    for candidate in (os.environ.get(CONFIG_ENV, ""), cli_path or ""):
        if candidate.strip():
            return Path(candidate.strip())
    return Path.cwd() / DEFAULT_FILENAME


def load_config(cli_path: str | None = None) -> TxResultsConfig:
    """Load the config file, falling back to defaults when it is absent or empty.

    A relative ``verifier.enumeration`` is resolved against the directory
    holding the config file, so the config works from any cwd.
    """
    target = resolve_config_path(cli_path)
    try:
        config = TxResultsConfig.model_validate(_read_mapping(target))
    except ValidationError as exc:
        raise ConfigLoadError(f"Invalid config at {target}: {exc}") from exc

    enumeration = config.verifier.enumeration.strip()
    if enumeration and not Path(enumeration).is_absolute():
        resolved = str(target.parent.resolve() / enumeration)
        verifier = config.verifier.model_copy(update={"enumeration": resolved})
        config = config.model_copy(update={"verifier": verifier})
    return config


def _read_mapping(target: Path) -> dict[str, Any]:
    if not target.is_file():
        return {}
    try:
        data = yaml.safe_load(target.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        mark = getattr(exc, "problem_mark", None)
        where = f"{target}:{mark.line + 1}:{mark.column + 1}" if mark is not None else str(target)
        raise ConfigLoadError(f"Invalid YAML at {where}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigLoadError(f"Config root must be mapping: {target}")
    return data
