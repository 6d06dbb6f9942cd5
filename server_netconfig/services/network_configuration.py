"""
Network Configuration Service - wrapper around server networking data.

The raw data format differs between blades and racks. Blade cards live in
the ``fabrics`` field, rack cards in the ``interfaces`` field. Some oddities
of the raw data:

- fabrics are present even for rack servers, just not populated
- partitions above one are listed even when an interface is not partitioned

NetworkConfiguration exposes a uniform ``cards`` list with the irrelevant
entries stripped out, so all partitions can be iterated the same way:

    nc = NetworkConfiguration(params["network_configuration"])
    for card in nc.cards:
        for interface in card.interfaces:
            for partition in interface.partitions:
                networks = partition.network_objects

See add_nics for tying the partitions to the physical NICs of a server.
"""

import logging
import time
from typing import Any, Dict, List, Optional

from ..config import AppConfig
from ..models import Card, NetworkObject, NicInfo, Partition, RawNetworkConfiguration
from ..strategies import InventoryStrategy
from . import queries
from .address_reset import reset_virtual_addresses
from .nic_reconciler import NicReconciler, ordered_nic_prefixes
from .normalizer import Normalizer

logger = logging.getLogger(__name__)


class NetworkConfiguration:
    """
    Normalized network configuration of one server.

    Design Pattern: Facade Pattern
    Combines normalization, queries, NIC matching and MAC reset behind one object.
    """

    def __init__(self, network_config: Any):
        """
        Initialize from raw network configuration data.

        Args:
            network_config: Raw configuration mapping

        Raises:
            InvalidConfigurationError: If the configuration cannot be normalized
        """
        self.raw = RawNetworkConfiguration.parse(network_config)
        self.cards: List[Card] = Normalizer().normalize(self.raw)

    @property
    def server_type(self) -> str:
        return self.raw.server_type

    def is_blade(self) -> bool:
        return self.server_type == "blade"

    def is_rack(self) -> bool:
        return self.server_type == "rack"

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_partitions(self, *network_types: str) -> List[Partition]:
        return queries.partitions_with_network_types(self.cards, *network_types)

    def get_all_partitions(self) -> List[Partition]:
        return queries.all_nonempty_partitions(self.cards)

    def get_all_fqdds(self) -> List[Optional[str]]:
        return queries.all_designators(self.cards)

    def get_networks(self, *network_types: str) -> List[NetworkObject]:
        """Finds all networks of one of the specified network types"""
        return queries.networks_of_type(self.cards, *network_types)

    def get_network(self, network_type: str) -> NetworkObject:
        """
        Returns the network object for the given network type.

        Raises CardinalityError unless exactly one network is found, so it is
        never valid for types such as iSCSI or public/private LAN.
        """
        return queries.single_network_of_type(self.cards, network_type)

    def get_static_ips(self, *network_types: str) -> List[str]:
        return queries.static_ip_addresses(self.cards, *network_types)

    def strip_ip_ranges(self) -> int:
        """Remove ipRange data from all static networks"""
        return queries.strip_ip_ranges(self.cards)

    # ------------------------------------------------------------------
    # NIC matching
    # ------------------------------------------------------------------

    def get_nic_info(self, source: InventoryStrategy) -> List[NicInfo]:
        """
        Get the NICs of the server, asking a second time if none were found.

        The endpoint sometimes reports no NICs right after a reboot.
        """
        nics = source.list_discovered_adapters()
        if not nics:
            logger.debug(f"NICs Info is empty on {source.host}, retrying in "
                         f"{AppConfig.NIC_RETRY_DELAY_SECONDS}s")
            time.sleep(AppConfig.NIC_RETRY_DELAY_SECONDS)
            nics = source.list_discovered_adapters()
        return nics

    def ordered_nic_prefixes(self, nics: List[NicInfo]) -> List[str]:
        return ordered_nic_prefixes(nics, len(self.cards))

    def add_nics(self, source: InventoryStrategy, add_partitions: bool = False) -> None:
        """
        Add fqdd and mac_address fields to the partition data.

        Args:
            source: NIC inventory of the server
            add_partitions: Generate NIC data for partitions above one from
                partition 1 when the server is not partitioned yet

        Raises:
            TopologyMismatchError: If the NICs do not line up with the cards
        """
        nics = self.get_nic_info(source)
        NicReconciler(self.is_blade(), source.host).reconcile(self.cards, nics, add_partitions=add_partitions)

    def reset_virtual_mac_addresses(self, source: InventoryStrategy) -> None:
        """Resets virtual MAC addresses of partitions to their permanent MAC address"""
        permanent_macs: Dict[str, str] = source.get_permanent_addresses()
        reset_virtual_addresses(self.cards, permanent_macs)

    def to_dict(self) -> dict:
        return {
            "servertype": self.server_type,
            "cards": [card.to_dict() for card in self.cards],
        }
