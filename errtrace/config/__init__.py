# errtrace/config/__init__.py
"""
errtrace Configuration

Design principles:
1. Code has the defaults; the environment only overrides them
2. Constructors accept an explicit ChainConfig; the process-wide default is
   the fallback, read at every call
3. The process-wide default is set at start-up, not toggled concurrently
"""

from .chain import ChainConfig
from .loader import get_config, load_config, reset_config, set_config, set_include_caller
from .validator import ENV_INCLUDE_CALLER, ConfigIssue, validate_config

__all__ = [
    "ChainConfig",

    # Loader / process-wide default
    "load_config",
    "get_config",
    "set_config",
    "set_include_caller",
    "reset_config",

    # Validator
    "ENV_INCLUDE_CALLER",
    "ConfigIssue",
    "validate_config",
]
