"""
Base inventory strategy - Abstract base class using Strategy Pattern.
Defines the interface that all NIC inventory sources must implement.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

import requests
from urllib3 import disable_warnings
from urllib3.exceptions import InsecureRequestWarning

from ..models import NicInfo

disable_warnings(InsecureRequestWarning)
logger = logging.getLogger(__name__)


class InventoryStrategy(ABC):
    """
    Abstract base class for NIC inventory sources.

    Design Pattern: Strategy Pattern
    Each management endpoint type implements this interface.

    Responsibilities:
    - Manage connection to the management endpoint
    - List the NIC ports/partitions of the server
    - Report permanent MAC addresses
    """

    def __init__(self, credentials: Dict[str, str]):
        """
        Initialize strategy with credentials.

        Args:
            credentials: Dictionary with host, username and password
        """
        self.credentials = credentials
        self._session: Optional[requests.Session] = None

    @property
    def host(self) -> Optional[str]:
        """Management endpoint host"""
        return self.credentials.get("host")

    def is_configured(self) -> bool:
        """
        Check if strategy is properly configured with credentials.

        Returns:
            True if all required credentials are present
        """
        return all([
            self.credentials.get("host"),
            self.credentials.get("username"),
            self.credentials.get("password")
        ])

    @abstractmethod
    def ensure_connected(self) -> None:
        """
        Ensure connection to the management endpoint.
        Authenticate if necessary.
        """
        pass

    @abstractmethod
    def list_discovered_adapters(self) -> List[NicInfo]:
        """
        Get all NIC ports and partitions of the server.

        Returns:
            List of NicInfo objects with their current MAC addresses
        """
        pass

    @abstractmethod
    def get_permanent_addresses(self) -> Dict[str, str]:
        """
        Get the permanent (burned-in) MAC address of every NIC partition.

        Returns:
            Dictionary mapping FQDD to permanent MAC address
        """
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the endpoint and cleanup resources"""
        pass

    def __enter__(self):
        """Context manager entry"""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit"""
        self.disconnect()
