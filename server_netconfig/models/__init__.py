"""
Data models and value objects.
"""

from .nic_type import NicType
from .nic_info import NicInfo
from .raw_config import (
    NetworkObject,
    RawCard,
    RawInterface,
    RawNetworkConfiguration,
    RawPartition,
    StaticNetworkConfiguration,
)
from .network_tree import Card, Interface, Partition

__all__ = [
    'NicType',
    'NicInfo',
    'NetworkObject',
    'StaticNetworkConfiguration',
    'RawNetworkConfiguration',
    'RawCard',
    'RawInterface',
    'RawPartition',
    'Card',
    'Interface',
    'Partition',
]
