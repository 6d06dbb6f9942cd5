"""
Name parser for extracting numbers and letters from configuration names.

Examples:
- Fabric A      → 'A'
- Port 2        → 2
- Partition 3   → 3
- 3             → 3
"""

import re

from ..exceptions import InvalidConfigurationError


class NameParser:
    """
    Parser for the human readable names used in network configuration data.

    Fabric and port names carry a fixed prefix; partition names are either a
    bare number or a label that contains one.
    """

    FABRIC_PATTERN = re.compile(r'Fabric ([A-Z])')
    PORT_PATTERN = re.compile(r'Port ([0-9]+)')
    PARTITION_PATTERN = re.compile(r'([0-9]+)')

    @classmethod
    def to_fabric(cls, fabric_name: str) -> str:
        """
        Extract the fabric letter from a blade card name.

        Raises:
            InvalidConfigurationError: If the name does not contain a fabric letter
        """
        match = cls.FABRIC_PATTERN.search(fabric_name or "")
        if not match:
            raise InvalidConfigurationError(f"Invalid fabric name {fabric_name}")
        return match.group(1)

    @classmethod
    def to_port(cls, port_name: str) -> int:
        """
        Extract the 1-based port number from an interface name.

        Raises:
            InvalidConfigurationError: If the name does not contain a port number
        """
        match = cls.PORT_PATTERN.search(port_name or "")
        if not match:
            raise InvalidConfigurationError(f"Invalid port name {port_name}")
        return int(match.group(1))

    @classmethod
    def to_partition(cls, partition_name: str) -> int:
        """
        Extract the 1-based partition number from a partition name.

        Raises:
            InvalidConfigurationError: If the name does not contain a number
        """
        match = cls.PARTITION_PATTERN.search(str(partition_name or ""))
        if not match:
            raise InvalidConfigurationError(f"Invalid partition name {partition_name}")
        return int(match.group(1))
