# errtrace/config/chain.py
"""
Chain Configuration

Settings read by every chain constructor.
"""

from dataclasses import dataclass, replace
from typing import Dict, Any


@dataclass(frozen=True)
class ChainConfig:
    """
    Configuration for building error chains.

    include_caller: record file/line of the code that builds each node.
    Off by default so that messages shown to end users do not carry
    source paths; turn it on while debugging the program that raises.
    """

    include_caller: bool = False

    @classmethod
    def default(cls) -> "ChainConfig":
        """Code defaults (no environment needed)"""
        return cls()

    def with_include_caller(self, include_caller: bool) -> "ChainConfig":
        return replace(self, include_caller=bool(include_caller))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {"include_caller": self.include_caller}
