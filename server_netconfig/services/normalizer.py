"""
Normalizer - builds the uniform card tree from raw network configuration.

Blade and rack data both end up as Card -> Interface -> Partition with:
- disabled and Fibre Channel cards discarded
- ports beyond the card's 10Gb port count discarded
- partitions above 1 discarded unless the card is partitioned
"""

import logging
from dataclasses import dataclass
from typing import Any, List

from ..models import Card, Interface, Partition, RawCard, RawInterface, RawNetworkConfiguration
from ..parsers import NameParser
from ..repositories import NicTypeCatalog

logger = logging.getLogger(__name__)


@dataclass
class _Counters:
    """Next free card, interface and partition indices for one normalization pass"""
    card: int = 0
    interface: int = 0
    partition: int = 0


class Normalizer:
    """Turns a raw network configuration into a list of Cards"""

    def normalize(self, raw_config: Any) -> List[Card]:
        """
        Build the normalized card list.

        Args:
            raw_config: Raw configuration mapping or RawNetworkConfiguration

        Returns:
            Cards in raw order; empty when the server type has no cards

        Raises:
            InvalidConfigurationError: On an unsupported server type or
                unparseable fabric, port or partition names
        """
        config = RawNetworkConfiguration.parse(raw_config)
        is_blade = config.server_type == "blade"
        counters = _Counters()
        cards: List[Card] = []

        for raw_card in config.cards:
            # FC cards are discarded
            if not raw_card.enabled or raw_card.used_for_fc:
                logger.debug(f"Skipping card {raw_card.name} (enabled={raw_card.enabled}, fc={raw_card.used_for_fc})")
                continue
            cards.append(self._build_card(raw_card, is_blade, counters))

        logger.debug(
            f"Normalized {config.server_type} configuration: {counters.card} cards, "
            f"{counters.interface} interfaces, {counters.partition} partitions"
        )
        return cards

    def _build_card(self, raw_card: RawCard, is_blade: bool, counters: _Counters) -> Card:
        card = Card(
            name=raw_card.name,
            card_index=counters.card,
            nic_type=NicTypeCatalog.get(raw_card.nictype),
            nictype=raw_card.nictype,
            partitioned=raw_card.partitioned
        )
        counters.card += 1

        for raw_interface in raw_card.interfaces:
            port_no = NameParser.to_port(raw_interface.name)
            # Assumes all 10Gb ports enumerate first
            if port_no > card.nic_type.n_10gb_ports:
                logger.debug(f"Skipping {card.name} {raw_interface.name}: {card.nictype} exposes "
                             f"{card.nic_type.n_10gb_ports} 10Gb ports")
                continue
            card.interfaces.append(self._build_interface(card, raw_interface, port_no, is_blade, counters))

        return card

    def _build_interface(self, card: Card, raw_interface: RawInterface, port_no: int,
                         is_blade: bool, counters: _Counters) -> Interface:
        interface = Interface(
            name=raw_interface.name,
            interface_index=counters.interface,
            partitioned=raw_interface.partitioned
        )
        counters.interface += 1

        # The partitioned flag moved from the interface to the card at some point
        partitioned = card.partitioned or interface.partitioned
        max_partitions = card.nic_type.n_partitions

        for raw_partition in raw_interface.partitions:
            partition_no = NameParser.to_partition(raw_partition.name)
            if partition_no != 1 and not (partitioned and partition_no <= max_partitions):
                continue

            fabric_letter = NameParser.to_fabric(card.name) if is_blade else None
            interface.partitions.append(Partition.from_raw(
                raw_partition,
                partition_index=counters.partition,
                port_no=port_no,
                partition_no=partition_no,
                fabric_letter=fabric_letter
            ))
            counters.partition += 1

        return interface


def normalize(raw_config: Any) -> List[Card]:
    """Convenience wrapper around Normalizer.normalize"""
    return Normalizer().normalize(raw_config)
