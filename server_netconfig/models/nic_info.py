"""
Discovered NIC data model.

One NicInfo describes a single NIC port or partition as reported by the
hardware management endpoint.
"""

from dataclasses import dataclass, replace
from typing import Optional

from ..parsers import FqddParser


@dataclass
class NicInfo:
    """
    Physical NIC partition discovered on a server.

    Attributes:
        fqdd: Full designator, e.g. NIC.Slot.2-1-1
        type: Card type (Integrated, Slot, Mezzanine, Embedded, ChassisSlot)
        card: Card number as reported in the designator
        port: Port number (string, as reported)
        partition_no: Partition number (string, '1' when not partitioned)
        fabric: Blade fabric letter, if any
        card_prefix: Designator up to the card, e.g. NIC.Slot.2
        mac_address: Current MAC address
    """
    fqdd: str
    type: str
    card: str
    port: str
    partition_no: str
    fabric: Optional[str] = None
    card_prefix: str = ""
    mac_address: Optional[str] = None

    @classmethod
    def from_fqdd(cls, fqdd: str, mac_address: Optional[str] = None) -> 'NicInfo':
        """Build a NicInfo by parsing its designator"""
        parts = FqddParser.parse(fqdd)
        return cls(fqdd=fqdd.strip(), mac_address=mac_address, **parts)

    @property
    def card_number(self) -> int:
        return int(self.card)

    def is_chassis_slot(self) -> bool:
        return "ChassisSlot" in self.fqdd

    def create_with_partition(self, partition_no: int) -> 'NicInfo':
        """
        Create the NicInfo another partition of the same port would have.

        Used when the server is not partitioned yet but the configuration
        needs partition data. The result has no MAC address.
        """
        return replace(
            self,
            fqdd=f"{self.card_prefix}-{self.port}-{partition_no}",
            partition_no=str(partition_no),
            mac_address=None
        )
