"""
Server Network Configuration Package

Normalizes blade and rack server network configuration into a uniform
Card -> Interface -> Partition tree and ties the partitions to the NICs
discovered through the server's management endpoint.

Architecture:
- Facade Pattern for the network configuration wrapper
- Strategy Pattern for NIC inventory sources
- Registry Pattern for NIC types
- Value Object Pattern for data models
"""

from .exceptions import (
    CardinalityError,
    InsufficientNicsError,
    InvalidConfigurationError,
    NetworkConfigurationError,
    NicNotFoundError,
    TopologyMismatchError,
)
from .models import Card, Interface, Partition, NetworkObject, NicInfo, NicType
from .repositories import NicTypeCatalog
from .services import NetworkConfiguration, NicReconciler, Normalizer
from .strategies import InventoryStrategy, RedfishStrategy
from .formatters import CardTreeFormatter

__all__ = [
    # Models
    "Card",
    "Interface",
    "Partition",
    "NetworkObject",
    "NicInfo",
    "NicType",
    # Registry
    "NicTypeCatalog",
    # Services
    "NetworkConfiguration",
    "Normalizer",
    "NicReconciler",
    # Strategies
    "InventoryStrategy",
    "RedfishStrategy",
    # Formatters
    "CardTreeFormatter",
    # Errors
    "NetworkConfigurationError",
    "InvalidConfigurationError",
    "TopologyMismatchError",
    "InsufficientNicsError",
    "NicNotFoundError",
    "CardinalityError",
]
