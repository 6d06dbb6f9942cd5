"""
Resets virtual MAC addresses of partitions to the permanent NIC MAC addresses.
"""

import logging
from typing import Dict, List

from ..models import Card
from .queries import all_nonempty_partitions

logger = logging.getLogger(__name__)

NEUTRAL_ADDRESS = "0.0.0.0"


def reset_virtual_addresses(cards: List[Card], permanent_macs: Dict[str, str]) -> None:
    """
    Point every partition in use back at its permanent MAC address.

    Also clears the iSCSI IQN and the static addressing of static networks.
    Partitions must already carry their FQDD; a partition whose FQDD has no
    permanent MAC ends up with no MAC address.

    Args:
        cards: Normalized, reconciled cards
        permanent_macs: Permanent MAC address by FQDD
    """
    for partition in all_nonempty_partitions(cards):
        permanent_mac = permanent_macs.get(partition.fqdd)
        if permanent_mac is None:
            logger.debug(f"No permanent MAC address for {partition.fqdd}")

        partition.lan_mac_address = permanent_mac
        partition.iscsi_mac_address = permanent_mac
        partition.iscsi_iqn = ""

        for network in partition.network_objects:
            static_config = network.static_network_configuration
            if network.static and static_config is not None:
                static_config.gateway = NEUTRAL_ADDRESS
                static_config.subnet = NEUTRAL_ADDRESS
                static_config.ip_address = NEUTRAL_ADDRESS
