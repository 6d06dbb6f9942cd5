"""
Pytest configuration and shared fixtures.

Provides builders for raw network configuration documents and discovered
NIC lists:
- make_network / make_partitions / make_card: raw document pieces
- rack_config / blade_config: complete documents
- nics_for: NicInfo list from (fqdd, mac) pairs
"""

from typing import List, Optional

import pytest

from server_netconfig.models import NicInfo


def make_network(name: str, network_type: str, static: bool = False,
                 ip_address: Optional[str] = None, ip_range=None) -> dict:
    network = {
        "id": f"id-{name}",
        "name": name,
        "type": network_type,
        "vlanId": 20,
        "static": static,
    }
    if static:
        network["staticNetworkConfiguration"] = {
            "gateway": "172.20.0.1",
            "subnet": "255.255.0.0",
            "ipAddress": ip_address,
            "ipRange": ip_range if ip_range is not None else [{"startingIp": "172.20.1.1", "endingIp": "172.20.1.9"}],
        }
    return network


def make_partitions(count: int = 4, networks: Optional[dict] = None) -> List[dict]:
    """Raw partitions named '1'..'count'; networks maps partition number to networks"""
    networks = networks or {}
    return [
        {"name": str(number), "networkObjects": networks.get(number, [])}
        for number in range(1, count + 1)
    ]


def make_interface(port: int, partitions: Optional[List[dict]] = None, partitioned: bool = False) -> dict:
    return {
        "name": f"Port {port}",
        "partitioned": partitioned,
        "partitions": partitions if partitions is not None else make_partitions(),
    }


def make_card(name: str, interfaces: List[dict], nictype: str = "2x10Gb", enabled=True,
              usedforfc=False, partitioned=False) -> dict:
    return {
        "name": name,
        "enabled": enabled,
        "usedforfc": usedforfc,
        "nictype": nictype,
        "partitioned": partitioned,
        "interfaces": interfaces,
    }


def rack(*cards: dict) -> dict:
    # Fabrics are present but not populated in rack data
    return {
        "servertype": "rack",
        "fabrics": [{"name": "Fabric A", "enabled": "false", "interfaces": [{"name": "bogus"}]}],
        "interfaces": list(cards),
    }


def blade(*cards: dict) -> dict:
    return {
        "servertype": "blade",
        "fabrics": list(cards),
        "interfaces": [{"name": "Slot 1", "enabled": "true", "interfaces": [{"name": "bogus"}]}],
    }


def nics_for(*fqdds: str) -> List[NicInfo]:
    """NicInfos with a MAC derived from their position in the list"""
    return [
        NicInfo.from_fqdd(fqdd, mac_address=f"00:0E:1E:00:00:{index:02X}")
        for index, fqdd in enumerate(fqdds)
    ]


@pytest.fixture
def pxe_network() -> dict:
    return make_network("pxe", "PXE")


@pytest.fixture
def management_network() -> dict:
    return make_network("hypervisor-mgmt", "HYPERVISOR_MANAGEMENT", static=True, ip_address="172.20.1.5")


@pytest.fixture
def iscsi_networks() -> List[dict]:
    return [
        make_network("iscsi-a", "STORAGE_ISCSI_SAN", static=True, ip_address="172.16.1.10"),
        make_network("iscsi-b", "STORAGE_ISCSI_SAN", static=True, ip_address="172.16.2.10"),
    ]


@pytest.fixture
def rack_config(pxe_network, management_network, iscsi_networks) -> dict:
    """Rack server: partitioned 2x10Gb in Slot 1, FC card, unpartitioned 4x10Gb in Slot 2"""
    slot1 = make_card(
        "Slot 1",
        [
            make_interface(1, make_partitions(4, {1: [pxe_network, management_network], 2: [iscsi_networks[0]]})),
            make_interface(2, make_partitions(4, {1: [pxe_network, management_network], 2: [iscsi_networks[1]]})),
            make_interface(3, make_partitions(4)),
            make_interface(4, make_partitions(4)),
        ],
        nictype="2x10Gb",
        partitioned=True,
    )
    fc_card = make_card("Slot 2", [make_interface(1), make_interface(2)], usedforfc=True)
    slot3 = make_card(
        "Slot 3",
        [make_interface(port) for port in range(1, 5)],
        nictype="4x10Gb",
    )
    return rack(slot1, fc_card, slot3)


@pytest.fixture
def blade_config(pxe_network, management_network) -> dict:
    """Blade server: partitioned Fabric A, disabled Fabric B, unpartitioned Fabric C"""
    fabric_a = make_card(
        "Fabric A",
        [
            make_interface(1, make_partitions(4, {1: [pxe_network], 2: [management_network]})),
            make_interface(2, make_partitions(4, {1: [pxe_network]})),
        ],
        partitioned=True,
    )
    fabric_b = make_card("Fabric B", [make_interface(1), make_interface(2)], enabled=False)
    fabric_c = make_card("Fabric C", [make_interface(1), make_interface(2)])
    return blade(fabric_a, fabric_b, fabric_c)
