"""
NIC type catalog - Registry Pattern implementation.
Looks up the port and partition layout of a NIC type by name.
"""

import logging
from typing import Dict, List, Optional

from ..exceptions import InvalidConfigurationError
from ..models import NicType

logger = logging.getLogger(__name__)


class NicTypeCatalog:
    """
    Registry of known NIC types.

    Design Pattern: Registry Pattern
    Network configuration data names the NIC type of every card; the catalog
    tells how many 10Gb ports and partitions that type exposes.
    """

    DEFAULT_NIC_TYPE = "2x10Gb"

    _NIC_TYPES: Dict[str, NicType] = {
        "2x10Gb": NicType(name="2x10Gb", n_ports=2, n_10gb_ports=2, n_partitions=4),
        "4x10Gb": NicType(name="4x10Gb", n_ports=4, n_10gb_ports=4, n_partitions=2),
        "2x10Gb,2x1Gb": NicType(name="2x10Gb,2x1Gb", n_ports=4, n_10gb_ports=2, n_partitions=4),
    }

    @classmethod
    def get(cls, name: Optional[str]) -> NicType:
        """
        Look up a NIC type.

        Args:
            name: NIC type name; None or empty selects the default type

        Returns:
            NicType for the name

        Raises:
            InvalidConfigurationError: If the NIC type is unknown
        """
        nic_type = cls._NIC_TYPES.get(name or cls.DEFAULT_NIC_TYPE)

        if not nic_type:
            raise InvalidConfigurationError(f"Invalid nictype {name}")

        return nic_type

    @classmethod
    def get_supported_types(cls) -> List[str]:
        return list(cls._NIC_TYPES.keys())

    @classmethod
    def register(cls, nic_type: NicType):
        """
        Register a new NIC type (for extensibility).

        Args:
            nic_type: NIC type to register
        """
        cls._NIC_TYPES[nic_type.name] = nic_type
        logger.info(f"Registered NIC type: {nic_type.name}")
