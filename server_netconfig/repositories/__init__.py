"""
Repositories and registries.
"""

from .nic_type_catalog import NicTypeCatalog

__all__ = ['NicTypeCatalog']
