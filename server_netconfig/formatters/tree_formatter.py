"""
Card tree formatter - Displays partitions grouped by card and interface.

Output format:
Card 0: Slot 1 (2x10Gb)
  Port 1:
    - 1  NIC.Slot.1-1-1  00:11:22:33:44:55  [PXE, HYPERVISOR_MANAGEMENT]
    - 2  NIC.Slot.1-1-2  00:11:22:33:44:56  [STORAGE_ISCSI_SAN]
"""

import json
from typing import List

from .base_formatter import OutputFormatter
from ..models import Partition
from ..services import NetworkConfiguration

NO_VALUE = "-"


class CardTreeFormatter(OutputFormatter):
    """
    Formatter that groups partitions by card, then by interface.

    Design Pattern: Strategy Pattern implementation
    """

    def __init__(self, output_format: str = "list"):
        """
        Initialize formatter.

        Args:
            output_format: Output format type ('list', 'table', 'json')
        """
        self.output_format = output_format

    def format(self, config: NetworkConfiguration) -> str:
        if self.output_format == "json":
            return self._format_json(config)
        elif self.output_format == "table":
            return self._format_table(config)
        else:  # list (default)
            return self._format_list(config)

    @staticmethod
    def _network_types(partition: Partition) -> List[str]:
        return [n.type or NO_VALUE for n in partition.network_objects]

    def _format_list(self, config: NetworkConfiguration) -> str:
        """Format as nested list of cards, ports and partitions"""
        if not config.cards:
            return f"No enabled network cards in {config.server_type} configuration."

        lines = []
        for card in config.cards:
            lines.append(f"\nCard {card.card_index}: {card.name} ({card.nic_type.name})")
            lines.append("=" * 60)

            for interface in card.interfaces:
                lines.append(f"\n  {interface.name}:")
                for partition in interface.partitions:
                    networks = ", ".join(self._network_types(partition))
                    lines.append(
                        f"    - {partition.partition_no}  {partition.fqdd or NO_VALUE}  "
                        f"{partition.mac_address or NO_VALUE}  [{networks}]"
                    )

        return "\n".join(lines)

    def _format_table(self, config: NetworkConfiguration) -> str:
        """Format as table with one row per partition"""
        row = "{:<6} {:<14} {:<10} {:<6} {:<28} {:<20} {:<30}"
        lines = [
            "\n" + row.format("INDEX", "CARD", "PORT", "PART", "FQDD", "MAC", "NETWORKS"),
            "=" * 118,
        ]

        for card in config.cards:
            for interface in card.interfaces:
                for partition in interface.partitions:
                    lines.append(row.format(
                        partition.partition_index,
                        card.name or NO_VALUE,
                        interface.name or NO_VALUE,
                        partition.partition_no,
                        partition.fqdd or NO_VALUE,
                        partition.mac_address or NO_VALUE,
                        ",".join(self._network_types(partition))
                    ))

        if not config.cards:
            lines.append("No enabled network cards.")

        return "\n".join(lines)

    def _format_json(self, config: NetworkConfiguration) -> str:
        """Format the normalized tree as JSON"""
        return json.dumps(config.to_dict(), indent=2)
