"""
Base output formatter - Abstract base class for formatters.
"""

from abc import ABC, abstractmethod
from ..services import NetworkConfiguration


class OutputFormatter(ABC):
    """
    Abstract base class for output formatters.

    Design Pattern: Strategy Pattern
    Different formatters for different output styles (list, table, JSON).
    """

    @abstractmethod
    def format(self, config: NetworkConfiguration) -> str:
        """
        Format a network configuration for output.

        Args:
            config: Normalized network configuration

        Returns:
            Formatted string for output
        """
        pass
