"""
Read-only queries over a normalized card tree.

None of these functions modify the tree. ``strip_ip_ranges`` is the one
explicit sanitization step and is kept separate from the read path.
"""

import logging
from typing import Iterator, List, Optional

from ..exceptions import CardinalityError
from ..models import Card, NetworkObject, Partition

logger = logging.getLogger(__name__)


def iter_partitions(cards: List[Card]) -> Iterator[Partition]:
    for card in cards:
        for interface in card.interfaces:
            yield from interface.partitions


def partitions_with_network_types(cards: List[Card], *network_types: str) -> List[Partition]:
    """Partitions that carry at least one network of the given types"""
    return [
        partition for partition in iter_partitions(cards)
        if any(network.type in network_types for network in partition.network_objects)
    ]


def all_nonempty_partitions(cards: List[Card]) -> List[Partition]:
    """Partitions that have any network assigned"""
    return [partition for partition in iter_partitions(cards) if partition.has_networks()]


def all_designators(cards: List[Card]) -> List[Optional[str]]:
    """FQDD of every partition; None for partitions not matched to a NIC yet"""
    return [partition.fqdd for partition in iter_partitions(cards)]


def _without_ip_range(network: NetworkObject) -> NetworkObject:
    if network.static_network_configuration is None:
        return network.model_copy(deep=True)
    static_config = network.static_network_configuration.model_copy(update={"ip_range": None})
    return network.model_copy(update={"static_network_configuration": static_config}, deep=True)


def networks_of_type(cards: List[Card], *network_types: str) -> List[NetworkObject]:
    """
    Find all networks of the given types.

    Returns copies with the ipRange field removed, deduplicated by value in
    first-seen order. The tree itself is left untouched.
    """
    networks: List[NetworkObject] = []
    for partition in iter_partitions(cards):
        for network in partition.network_objects:
            if network.type not in network_types:
                continue
            sanitized = _without_ip_range(network)
            if sanitized not in networks:
                networks.append(sanitized)
    return networks


def strip_ip_ranges(cards: List[Card]) -> int:
    """
    Remove the ipRange field from every static network in the tree.

    Safe to call repeatedly.

    Returns:
        Number of networks that still had an ipRange
    """
    stripped = 0
    for partition in iter_partitions(cards):
        for network in partition.network_objects:
            static_config = network.static_network_configuration
            if static_config is not None and static_config.ip_range is not None:
                static_config.ip_range = None
                stripped += 1
    if stripped:
        logger.debug(f"Removed ipRange from {stripped} networks")
    return stripped


def single_network_of_type(cards: List[Card], network_type: str) -> NetworkObject:
    """
    Return the one network of the given type.

    Never valid for types that may have several networks such as iSCSI or
    public/private LAN.

    Raises:
        CardinalityError: If zero or more than one network matches
    """
    networks = networks_of_type(cards, network_type)
    if len(networks) != 1:
        names = [network.name for network in networks]
        raise CardinalityError(
            f"There should be only one {network_type} network but found {len(networks)}: {names}"
        )
    return networks[0]


def static_ip_addresses(cards: List[Card], *network_types: str) -> List[str]:
    """Unique IP addresses of the static networks of the given types"""
    addresses: List[str] = []
    for network in networks_of_type(cards, *network_types):
        if not network.static or network.static_network_configuration is None:
            continue
        ip_address = network.static_network_configuration.ip_address
        if ip_address is not None and ip_address not in addresses:
            addresses.append(ip_address)
    return addresses
