"""
Normalized network configuration tree: Card -> Interface -> Partition.

Only enabled, non-FC cards, exposed ports and usable partitions appear here.
"""

from dataclasses import dataclass, field, fields, asdict
from typing import Any, List, Optional

from .nic_info import NicInfo
from .nic_type import NicType
from .raw_config import NetworkObject, RawPartition


def _without_none(data: dict) -> dict:
    return {k: v for k, v in data.items() if v is not None}


@dataclass
class Partition:
    """
    One partition of a NIC port.

    Attributes:
        name: Raw partition name
        partition_index: Global 0-based index over all partitions
        port_no: 1-based port number of the owning interface
        partition_no: 1-based partition number
        fabric_letter: Blade fabric letter (blade servers only)
        network_objects: Networks assigned to the partition
        fqdd: Matched NIC designator (after reconciliation)
        mac_address: Matched NIC MAC address (after reconciliation)
        nic: Matched NicInfo, only set while NICs are being matched
    """
    name: str
    partition_index: int
    port_no: int
    partition_no: int
    fabric_letter: Optional[str] = None
    networks: List[Any] = field(default_factory=list)
    network_objects: List[NetworkObject] = field(default_factory=list)
    minimum: Optional[int] = None
    maximum: Optional[int] = None
    lan_mac_address: Optional[str] = None
    iscsi_mac_address: Optional[str] = None
    iscsi_iqn: Optional[str] = None
    fqdd: Optional[str] = None
    mac_address: Optional[str] = None
    nic: Optional[NicInfo] = field(default=None, repr=False, compare=False)

    @classmethod
    def from_raw(cls, raw: RawPartition, partition_index: int, port_no: int,
                 partition_no: int, fabric_letter: Optional[str] = None) -> 'Partition':
        return cls(
            name=raw.name,
            partition_index=partition_index,
            port_no=port_no,
            partition_no=partition_no,
            fabric_letter=fabric_letter,
            networks=list(raw.networks),
            network_objects=[n.model_copy(deep=True) for n in raw.network_objects or []],
            minimum=raw.minimum,
            maximum=raw.maximum,
            lan_mac_address=raw.lan_mac_address,
            iscsi_mac_address=raw.iscsi_mac_address,
            iscsi_iqn=raw.iscsi_iqn
        )

    def has_networks(self) -> bool:
        return bool(self.network_objects)

    def to_dict(self) -> dict:
        data = {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name not in ("nic", "network_objects")
        }
        data["network_objects"] = [
            n.model_dump(by_alias=True, exclude_none=True) for n in self.network_objects
        ]
        return _without_none(data)


@dataclass
class Interface:
    """One physical port of a card"""
    name: str
    interface_index: int
    partitioned: bool = False
    partitions: List[Partition] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "interface_index": self.interface_index,
            "partitioned": self.partitioned,
            "partitions": [p.to_dict() for p in self.partitions],
        }


@dataclass
class Card:
    """
    One enabled network card (rack) or fabric (blade).

    Attributes:
        name: Raw card name, e.g. 'Fabric A' or 'Slot 1'
        card_index: 0-based index over enabled, non-FC cards
        nic_type: Port/partition layout of the card
        nictype: Raw NIC type name
        partitioned: Whether the card's ports are partitioned
        interfaces: Exposed ports
    """
    name: str
    card_index: int
    nic_type: NicType
    nictype: Optional[str] = None
    partitioned: bool = False
    interfaces: List[Interface] = field(default_factory=list)

    def partitions(self) -> List[Partition]:
        """All partitions of all interfaces in order"""
        return [p for interface in self.interfaces for p in interface.partitions]

    def to_dict(self) -> dict:
        return _without_none({
            "name": self.name,
            "card_index": self.card_index,
            "nictype": self.nictype,
            "nic_type": asdict(self.nic_type),
            "partitioned": self.partitioned,
            "interfaces": [i.to_dict() for i in self.interfaces],
        })
