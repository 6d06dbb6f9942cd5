"""
NIC Reconciler - ties normalized partitions to discovered physical NICs.

Blade servers are matched by fabric letter, port and partition number. Rack
servers (and blade chassis slot NICs) are matched by lining up the cards in
the configuration with the physical cards ordered by type and card number.
"""

import logging
from typing import List, Optional

from ..exceptions import InsufficientNicsError, NicNotFoundError
from ..models import Card, Interface, NicInfo, Partition
from ..parsers import NameParser
from .queries import iter_partitions

logger = logging.getLogger(__name__)

INTEGRATED_PREFIX = "NIC.Integrated.1"
EMBEDDED_PREFIX = "NIC.Embedded.1"


def _card_sort_key(nic: NicInfo):
    # Type compares lexicographically; the real intent is Integrated before Slot
    return nic.type, nic.card_number


def ordered_nic_prefixes(nics: List[NicInfo], card_count: int) -> List[str]:
    """
    Ordered list of the card prefixes contained in the NICs.

    Ordering is by type and then card number, with NIC.Integrated.1 (or
    failing that NIC.Embedded.1) moved to the front. Position N of the result
    is the physical card for configuration card_index N.

    Args:
        nics: Discovered NICs
        card_count: Number of cards in the network configuration

    Returns:
        At most card_count + 1 prefixes

    Raises:
        InsufficientNicsError: If fewer physical cards than card_count were found
    """
    prefixes: List[str] = []
    for nic in sorted(nics, key=_card_sort_key):
        if nic.card_prefix not in prefixes:
            prefixes.append(nic.card_prefix)

    for preferred in (INTEGRATED_PREFIX, EMBEDDED_PREFIX):
        if preferred in prefixes:
            if prefixes[0] != preferred:
                prefixes.remove(preferred)
                prefixes.insert(0, preferred)
            break

    if len(prefixes) < card_count:
        fqdds = [nic.fqdd for nic in nics]
        logger.debug(f"Found nic fqdd's: {fqdds}")
        raise InsufficientNicsError(expected_count=card_count, actual_count=len(prefixes), fqdds=fqdds)

    # One prefix more than there are cards; only card_index lookups use it
    return prefixes[:card_count + 1]


class NicReconciler:
    """
    Matches every partition of a card tree to a discovered NIC.

    On success each partition carries the NIC's fqdd and mac_address. A failed
    reconciliation leaves the tree partially annotated; do not reuse it.
    """

    def __init__(self, is_blade: bool, host: Optional[str] = None):
        """
        Args:
            is_blade: Whether the configuration describes a blade server
            host: Management endpoint host, used in error messages
        """
        self.is_blade = is_blade
        self.host = host

    def reconcile(self, cards: List[Card], nics: List[NicInfo], add_partitions: bool = False) -> None:
        """
        Add nic, fqdd and mac_address data to every partition.

        By default an error is raised if no NIC is found for a partition.
        With add_partitions, NICs for partition numbers above one are derived
        from the partition 1 NIC, so partitioned settings can be generated
        even when the server NICs are not partitioned yet.

        Raises:
            InsufficientNicsError: If fewer physical cards than cards were found
            NicNotFoundError: If a partition has no matching NIC
        """
        prefixes = ordered_nic_prefixes(nics, len(cards)) if cards else []

        for card in cards:
            for interface in card.interfaces:
                for partition in interface.partitions:
                    nic = self._find_nic(card, interface, partition, nics, prefixes)

                    if nic is None and add_partitions:
                        first_nic = interface.partitions[0].nic
                        if first_nic:
                            nic = first_nic.create_with_partition(partition.partition_no)
                            logger.debug(f"Generated {nic.fqdd} for {card.name} {interface.name} "
                                         f"partition {partition.name}")

                    if nic is None:
                        raise NicNotFoundError(
                            f"Mac address not found on {self.host} for {card.name} "
                            f"{interface.name} partition {partition.name}"
                        )

                    partition.nic = nic
                    partition.fqdd = nic.fqdd
                    partition.mac_address = nic.mac_address

        # The NicInfo reference must not end up in serialized output
        for partition in iter_partitions(cards):
            partition.nic = None

        logger.info(f"Matched NICs for {len(list(iter_partitions(cards)))} partitions on {self.host}")

    def _find_nic(self, card: Card, interface: Interface, partition: Partition,
                  nics: List[NicInfo], prefixes: List[str]) -> Optional[NicInfo]:
        port = str(partition.port_no)
        partition_no = str(partition.partition_no)

        for nic in nics:
            if nic.port != port or nic.partition_no != partition_no:
                continue
            if self.is_blade and not nic.is_chassis_slot():
                if NameParser.to_fabric(card.name) == nic.fabric:
                    return nic
            else:
                if card.card_index >= len(prefixes):
                    raise NicNotFoundError(f"No slot found for card_index {card.card_index} in {prefixes}")
                if nic.fqdd.startswith(prefixes[card.card_index]):
                    return nic
        return None


def reconcile(cards: List[Card], nics: List[NicInfo], is_blade: bool,
              host: Optional[str] = None, add_partitions: bool = False) -> None:
    """Convenience wrapper around NicReconciler.reconcile"""
    NicReconciler(is_blade, host).reconcile(cards, nics, add_partitions=add_partitions)
