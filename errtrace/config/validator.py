# errtrace/config/validator.py
"""
Configuration Validator

Validates environment variables before they are turned into a ChainConfig.
Returns structured issues with level (warn/error), path, message, hint.
"""

from typing import List, Literal, Mapping, Optional
from dataclasses import dataclass


ENV_INCLUDE_CALLER = "ERRTRACE_INCLUDE_CALLER"

TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class ConfigIssue:
    """
    Configuration validation issue

    Structured output for logging.
    """
    level: Literal["warn", "error"]
    path: str  # environment variable name
    message: str
    hint: str = ""

    def __str__(self) -> str:
        hint_str = f" (hint: {self.hint})" if self.hint else ""
        return f"[{self.level}] {self.path}: {self.message}{hint_str}"


def parse_flag(raw: Optional[str]) -> Optional[bool]:
    """
    Parse a boolean environment value.

    Returns None for unset, empty or unrecognized values.
    """
    if raw is None:
        return None
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    return None


def validate_config(environ: Mapping[str, str]) -> List[ConfigIssue]:
    """
    Validate errtrace environment variables.

    Returns:
        List of issues (an empty list means the environment is usable as is)
    """
    issues = []

    raw = environ.get(ENV_INCLUDE_CALLER)
    if raw is not None and raw.strip() and parse_flag(raw) is None:
        issues.append(ConfigIssue(
            level="warn",
            path=ENV_INCLUDE_CALLER,
            message=f"unrecognized value {raw!r}, keeping include_caller=False",
            hint="Use one of: " + ", ".join(sorted(TRUE_VALUES | FALSE_VALUES)),
        ))

    return issues
