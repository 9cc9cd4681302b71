"""Configuration loading for txresults."""

from txresults.config.loader import CONFIG_ENV, DEFAULT_FILENAME, load_config, resolve_config_path
from txresults.config.models import LookupConfig, TxResultsConfig, VerifierConfig

__all__ = [
    "CONFIG_ENV",
    "DEFAULT_FILENAME",
    "LookupConfig",
    "TxResultsConfig",
    "VerifierConfig",
    "load_config",
    "resolve_config_path",
]
