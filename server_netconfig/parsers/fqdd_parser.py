"""
FQDD parser for Dell NIC designators.

Logic:
1. Designators look like NIC.<Type>.<Card>[<Fabric>]-<Port>[-<Partition>]
2. A missing partition segment means partition 1
3. Mezzanine cards carry their fabric letter after the card number,
   integrated blade NICs always sit on fabric A
"""

import re
from typing import Dict, Optional

from ..exceptions import InvalidConfigurationError


class FqddParser:
    """Parser for the fully qualified device descriptors reported by iDRAC"""

    FQDD_PATTERN = re.compile(
        r'^NIC\.(Integrated|Slot|Mezzanine|Embedded|ChassisSlot)\.([0-9]+)([A-Z]?)-([0-9]+)(?:-([0-9]+))?$'
    )

    @classmethod
    def is_nic(cls, fqdd: Optional[str]) -> bool:
        """Check whether a designator names a NIC port or partition"""
        if not fqdd:
            return False
        return bool(cls.FQDD_PATTERN.match(fqdd.strip()))

    @classmethod
    def parse(cls, fqdd: str) -> Dict[str, Optional[str]]:
        """
        Split a NIC designator into its parts.

        Args:
            fqdd: Designator such as NIC.Mezzanine.2B-1-1

        Returns:
            Dict with type, card, fabric, port, partition_no and card_prefix

        Raises:
            InvalidConfigurationError: If the designator is not a NIC FQDD

        Examples:
            >>> FqddParser.parse('NIC.Integrated.1-2-1')['card_prefix']
            'NIC.Integrated.1'
            >>> FqddParser.parse('NIC.Mezzanine.2B-1')['fabric']
            'B'
        """
        match = cls.FQDD_PATTERN.match((fqdd or "").strip())
        if not match:
            raise InvalidConfigurationError(f"Invalid NIC FQDD {fqdd}")

        nic_type, card, fabric_letter, port, partition_no = match.groups()

        if fabric_letter:
            fabric = fabric_letter
        elif nic_type == "Integrated":
            fabric = "A"
        else:
            fabric = None

        return {
            "type": nic_type,
            "card": card,
            "fabric": fabric,
            "port": port,
            "partition_no": partition_no or "1",
            "card_prefix": fqdd.strip().split("-", 1)[0],
        }
