# errtrace/config/loader.py
"""
Configuration Loader

Builds the ChainConfig from environment variables with code defaults as
fallback, and holds the process-wide default read by chain constructors.

Design principle:
- Code = truth (has all defaults)
- Environment = input parameters (optional)
- Constructors take an explicit config; the process-wide default is only
  consulted when none is passed

The process-wide default is meant to be set once at start-up. Changing it
while other threads are building errors is a data race the library does not
guard against.
"""

from __future__ import annotations

from typing import Mapping, Optional
import logging
import os

from .chain import ChainConfig
from .validator import ENV_INCLUDE_CALLER, parse_flag, validate_config


logger = logging.getLogger(__name__)

# Resolved lazily on first use (see get_config)
_DEFAULT_CONFIG: Optional[ChainConfig] = None


def load_config(environ: Optional[Mapping[str, str]] = None) -> ChainConfig:
    """
    Load configuration from environment variables.

    Args:
        environ: Mapping to read from. Defaults to os.environ.

    Returns:
        ChainConfig. Unusable values are logged and replaced by defaults.
    """
    if environ is None:
        environ = os.environ

    for issue in validate_config(environ):
        logger.warning("Invalid errtrace configuration: %s", issue)

    config = ChainConfig.default()
    include_caller = parse_flag(environ.get(ENV_INCLUDE_CALLER))
    if include_caller is not None:
        config = config.with_include_caller(include_caller)
    return config


def get_config() -> ChainConfig:
    """Process-wide default configuration, loaded from the environment once."""
    global _DEFAULT_CONFIG
    if _DEFAULT_CONFIG is None:
        _DEFAULT_CONFIG = load_config()
    return _DEFAULT_CONFIG


def set_config(config: ChainConfig) -> None:
    """Replace the process-wide default configuration."""
    global _DEFAULT_CONFIG
    _DEFAULT_CONFIG = config
    logger.debug("errtrace default configuration set: %s", config.to_dict())


def set_include_caller(include_caller: bool) -> None:
    """Toggle caller capture for every constructor that is not given a config."""
    set_config(get_config().with_include_caller(include_caller))


def reset_config() -> None:
    """Forget the process-wide default; the next get_config() reloads it."""
    global _DEFAULT_CONFIG
    _DEFAULT_CONFIG = None
