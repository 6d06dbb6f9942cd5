"""
Services - normalization, queries and NIC matching.
"""

from .address_reset import reset_virtual_addresses
from .network_configuration import NetworkConfiguration
from .nic_reconciler import NicReconciler, ordered_nic_prefixes, reconcile
from .normalizer import Normalizer, normalize

__all__ = [
    'NetworkConfiguration',
    'Normalizer',
    'normalize',
    'NicReconciler',
    'ordered_nic_prefixes',
    'reconcile',
    'reset_virtual_addresses',
]
