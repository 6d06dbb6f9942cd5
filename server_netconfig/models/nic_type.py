"""
NIC type data model - Value Object pattern.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class NicType:
    """
    Port and partition layout of a NIC model.

    Attributes:
        name: NIC type name as used in network configuration data (e.g. '2x10Gb')
        n_ports: Total number of physical ports
        n_10gb_ports: Number of high-speed ports; these enumerate first
        n_partitions: Maximum number of partitions per high-speed port
    """
    name: str
    n_ports: int
    n_10gb_ports: int
    n_partitions: int

    def __post_init__(self):
        """Validate invariants"""
        if not self.name:
            raise ValueError("NIC type name cannot be empty")
        if self.n_10gb_ports > self.n_ports:
            raise ValueError(f"NIC type {self.name} has more 10Gb ports than ports")
        if self.n_partitions < 1:
            raise ValueError(f"NIC type {self.name} must support at least one partition")
