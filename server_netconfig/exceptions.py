"""
Exception hierarchy for network configuration processing.

Every error raised by the normalization, query and reconciliation code
derives from NetworkConfigurationError so callers can catch one type.
"""

from typing import Any, Dict, Optional


class NetworkConfigurationError(Exception):
    """Base class for all network configuration errors"""


class InvalidConfigurationError(NetworkConfigurationError, ValueError):
    """Raw configuration is malformed (bad server type, name patterns, NIC types)"""


class TopologyMismatchError(NetworkConfigurationError):
    """Logical configuration does not line up with the discovered hardware"""


class InsufficientNicsError(TopologyMismatchError):
    """
    Fewer physical NIC cards were discovered than the configuration requires.

    Carries a message template and its named parameters so the message can be
    translated by the caller before it is shown to a user.
    """

    code = "ASM017"
    template = "Network configuration requires {expected_count} network cards but only {actual_count} were found"

    def __init__(self, expected_count: int, actual_count: int, fqdds: Optional[list] = None):
        self.params: Dict[str, Any] = {
            "expected_count": expected_count,
            "actual_count": actual_count,
        }
        self.fqdds = list(fqdds or [])
        super().__init__(self.template.format(**self.params))

    @property
    def expected_count(self) -> int:
        return self.params["expected_count"]

    @property
    def actual_count(self) -> int:
        return self.params["actual_count"]


class NicNotFoundError(TopologyMismatchError):
    """No discovered NIC matches a logical partition"""


class CardinalityError(NetworkConfigurationError):
    """A single-network lookup matched zero or several networks"""
