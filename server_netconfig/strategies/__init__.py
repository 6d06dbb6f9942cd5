"""
NIC inventory strategy implementations - Strategy Pattern.
Each management endpoint type has its own strategy for listing NICs.
"""

from .base_strategy import InventoryStrategy
from .redfish_strategy import RedfishStrategy

__all__ = [
    'InventoryStrategy',
    'RedfishStrategy',
]
