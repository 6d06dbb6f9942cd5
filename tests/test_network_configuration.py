"""Tests for the NetworkConfiguration facade and MAC reset."""

from typing import Dict, List

import pytest

from conftest import nics_for
from server_netconfig.config import AppConfig
from server_netconfig.exceptions import InsufficientNicsError, InvalidConfigurationError
from server_netconfig.models import NicInfo
from server_netconfig.services import NetworkConfiguration, reset_virtual_addresses
from server_netconfig.services import network_configuration
from server_netconfig.strategies import InventoryStrategy

RACK_FQDDS = (
    [f"NIC.Integrated.1-{port}-{part}" for port in (1, 2) for part in range(1, 5)]
    + [f"NIC.Slot.2-{port}-1" for port in range(1, 5)]
)


class FakeInventory(InventoryStrategy):
    """Inventory source returning canned NIC lists, one per call"""

    def __init__(self, responses: List[List[NicInfo]], permanent_macs: Dict[str, str] = None):
        super().__init__({"host": "idrac.example.com", "username": "root", "password": "calvin"})
        self.responses = list(responses)
        self.permanent_macs = permanent_macs or {}
        self.calls = 0

    def ensure_connected(self) -> None:
        pass

    def list_discovered_adapters(self) -> List[NicInfo]:
        self.calls += 1
        return self.responses.pop(0) if self.responses else []

    def get_permanent_addresses(self) -> Dict[str, str]:
        return self.permanent_macs

    def disconnect(self) -> None:
        pass


@pytest.fixture
def sleeps(monkeypatch):
    calls = []
    monkeypatch.setattr(network_configuration.time, "sleep", calls.append)
    return calls


def test_facade_exposes_normalized_tree(rack_config) -> None:
    config = NetworkConfiguration(rack_config)

    assert config.is_rack()
    assert not config.is_blade()
    assert config.server_type == "rack"
    assert [c.name for c in config.cards] == ["Slot 1", "Slot 3"]
    assert [p.partition_index for p in config.get_partitions("PXE")] == [0, 4]
    assert len(config.get_all_partitions()) == 4
    assert config.get_network("PXE").name == "pxe"
    assert config.get_static_ips("HYPERVISOR_MANAGEMENT") == ["172.20.1.5"]
    assert len(config.get_networks("STORAGE_ISCSI_SAN")) == 2


def test_facade_rejects_invalid_configuration() -> None:
    with pytest.raises(InvalidConfigurationError):
        NetworkConfiguration({"servertype": "tower"})


def test_add_nics_does_not_retry_when_nics_found(rack_config, sleeps) -> None:
    config = NetworkConfiguration(rack_config)
    source = FakeInventory([nics_for(*RACK_FQDDS)])

    config.add_nics(source)

    assert source.calls == 1
    assert sleeps == []
    assert config.get_all_fqdds()[0] == "NIC.Integrated.1-1-1"


def test_add_nics_retries_once_on_empty_inventory(rack_config, sleeps) -> None:
    config = NetworkConfiguration(rack_config)
    source = FakeInventory([[], nics_for(*RACK_FQDDS)])

    config.add_nics(source)

    assert source.calls == 2
    assert sleeps == [AppConfig.NIC_RETRY_DELAY_SECONDS]
    assert None not in config.get_all_fqdds()


def test_add_nics_fails_when_inventory_stays_empty(rack_config, sleeps) -> None:
    config = NetworkConfiguration(rack_config)
    source = FakeInventory([[], []])

    with pytest.raises(InsufficientNicsError):
        config.add_nics(source)

    assert source.calls == 2
    assert len(sleeps) == 1


def test_ordered_nic_prefixes_uses_card_count(rack_config) -> None:
    config = NetworkConfiguration(rack_config)

    assert config.ordered_nic_prefixes(nics_for(*RACK_FQDDS)) == ["NIC.Integrated.1", "NIC.Slot.2"]


def test_reset_virtual_mac_addresses(rack_config, sleeps) -> None:
    config = NetworkConfiguration(rack_config)
    permanent = {fqdd: f"F8:BC:12:00:00:{i:02X}" for i, fqdd in enumerate(RACK_FQDDS)}
    del permanent["NIC.Integrated.1-2-2"]
    source = FakeInventory([nics_for(*RACK_FQDDS)], permanent_macs=permanent)
    config.add_nics(source)

    config.reset_virtual_mac_addresses(source)

    partitions = {p.fqdd: p for p in config.get_all_partitions()}
    assert partitions["NIC.Integrated.1-1-1"].lan_mac_address == permanent["NIC.Integrated.1-1-1"]
    assert partitions["NIC.Integrated.1-1-1"].iscsi_mac_address == permanent["NIC.Integrated.1-1-1"]
    assert partitions["NIC.Integrated.1-2-2"].lan_mac_address is None
    assert {p.iscsi_iqn for p in partitions.values()} == {""}

    for partition in partitions.values():
        for network in partition.network_objects:
            if network.static:
                static_config = network.static_network_configuration
                assert static_config.gateway == "0.0.0.0"
                assert static_config.subnet == "0.0.0.0"
                assert static_config.ip_address == "0.0.0.0"
            else:
                assert network.static_network_configuration is None


def test_reset_skips_partitions_without_networks(rack_config) -> None:
    config = NetworkConfiguration(rack_config)
    unused = config.cards[1].partitions()[0]

    reset_virtual_addresses(config.cards, {})

    assert unused.iscsi_iqn is None
    assert config.cards[0].partitions()[0].iscsi_iqn == ""


def test_to_dict_omits_nic_reference(rack_config, sleeps) -> None:
    config = NetworkConfiguration(rack_config)
    config.add_nics(FakeInventory([nics_for(*RACK_FQDDS)]))

    data = config.to_dict()

    partition = data["cards"][0]["interfaces"][0]["partitions"][0]
    assert data["servertype"] == "rack"
    assert partition["fqdd"] == "NIC.Integrated.1-1-1"
    assert "nic" not in partition
    assert partition["network_objects"][1]["staticNetworkConfiguration"]["ipAddress"] == "172.20.1.5"
