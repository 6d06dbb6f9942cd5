"""Tests for building the normalized card tree."""

import pytest

from conftest import blade, make_card, make_interface, make_partitions, rack
from server_netconfig.exceptions import InvalidConfigurationError
from server_netconfig.services import Normalizer, normalize


def _partition_names(cards):
    return [p.name for card in cards for i in card.interfaces for p in i.partitions]


def test_rack_partitioned_card_keeps_both_partitions() -> None:
    config = rack(make_card(
        "Slot 1",
        [make_interface(1, [{"name": "Partition 1"}, {"name": "Partition 2"}])],
        nictype="2x10Gb",
        partitioned=True,
    ))

    cards = normalize(config)

    assert len(cards) == 1
    assert cards[0].card_index == 0
    assert len(cards[0].interfaces) == 1
    assert cards[0].interfaces[0].interface_index == 0
    assert [p.partition_index for p in cards[0].interfaces[0].partitions] == [0, 1]
    assert [p.partition_no for p in cards[0].interfaces[0].partitions] == [1, 2]


def test_rack_unpartitioned_card_keeps_only_partition_one() -> None:
    config = rack(make_card(
        "Slot 1",
        [make_interface(1, [{"name": "Partition 1"}, {"name": "Partition 2"}])],
        nictype="2x10Gb",
        partitioned=False,
    ))

    cards = normalize(config)

    assert _partition_names(cards) == ["Partition 1"]


def test_blade_partitions_carry_fabric_letter() -> None:
    config = blade(make_card("Fabric A", [make_interface(1)], partitioned=True))

    cards = normalize(config)

    partitions = cards[0].interfaces[0].partitions
    assert len(partitions) == 4
    assert {p.fabric_letter for p in partitions} == {"A"}
    assert {p.port_no for p in partitions} == {1}


def test_rack_partitions_have_no_fabric_letter(rack_config) -> None:
    cards = normalize(rack_config)

    assert {p.fabric_letter for card in cards for p in card.partitions()} == {None}


def test_indices_are_contiguous_in_traversal_order(rack_config) -> None:
    cards = normalize(rack_config)

    interfaces = [i for card in cards for i in card.interfaces]
    partitions = [p for card in cards for p in card.partitions()]
    assert [c.card_index for c in cards] == [0, 1]
    assert [i.interface_index for i in interfaces] == list(range(6))
    assert [p.partition_index for p in partitions] == list(range(12))


def test_disabled_and_fc_cards_are_dropped(rack_config, blade_config) -> None:
    assert [c.name for c in normalize(rack_config)] == ["Slot 1", "Slot 3"]
    assert [c.name for c in normalize(blade_config)] == ["Fabric A", "Fabric C"]
    assert normalize(blade_config)[1].card_index == 1


def test_ports_beyond_10gb_port_count_are_dropped(rack_config) -> None:
    cards = normalize(rack_config)

    assert [i.name for i in cards[0].interfaces] == ["Port 1", "Port 2"]
    assert [i.name for i in cards[1].interfaces] == ["Port 1", "Port 2", "Port 3", "Port 4"]


def test_card_without_eligible_interfaces_is_kept() -> None:
    config = rack(
        make_card("Slot 1", [make_interface(3), make_interface(4)], nictype="2x10Gb,2x1Gb"),
        make_card("Slot 2", [make_interface(1)]),
    )

    cards = normalize(config)

    assert [c.name for c in cards] == ["Slot 1", "Slot 2"]
    assert cards[0].interfaces == []
    assert cards[1].card_index == 1
    assert cards[1].interfaces[0].interface_index == 0


def test_partitions_limited_by_nic_type() -> None:
    config = rack(make_card("Slot 1", [make_interface(1)], nictype="4x10Gb", partitioned=True))

    cards = normalize(config)

    assert [p.partition_no for p in cards[0].partitions()] == [1, 2]


def test_interface_partitioned_flag_is_honoured() -> None:
    config = rack(make_card("Slot 1", [make_interface(1, partitioned=True), make_interface(2)]))

    cards = normalize(config)

    assert [len(i.partitions) for i in cards[0].interfaces] == [4, 1]


def test_string_flags_use_to_boolean_semantics() -> None:
    config = rack(
        make_card("Slot 1", [make_interface(1)], enabled="TRUE", partitioned="true"),
        make_card("Slot 2", [make_interface(1)], enabled="false"),
        make_card("Slot 3", [make_interface(1)], enabled=""),
        make_card("Slot 4", [make_interface(1)], enabled="true", usedforfc="true"),
    )

    cards = normalize(config)

    assert [c.name for c in cards] == ["Slot 1"]
    assert len(cards[0].partitions()) == 4


def test_numeric_partition_names_are_accepted() -> None:
    config = rack(make_card("Slot 1", [make_interface(1, [{"name": 1}, {"name": 2}])], partitioned=True))

    cards = normalize(config)

    assert _partition_names(cards) == ["1", "2"]


def test_server_type_alias_is_accepted() -> None:
    config = rack(make_card("Slot 1", [make_interface(1)]))
    config["serverType"] = config.pop("servertype")

    assert len(normalize(config)) == 1


def test_missing_card_list_gives_empty_tree() -> None:
    assert normalize({"servertype": "blade", "fabrics": None}) == []
    assert normalize({"servertype": "rack"}) == []


def test_normalize_is_repeatable(rack_config) -> None:
    normalizer = Normalizer()

    first = normalizer.normalize(rack_config)
    first[0].partitions()[0].network_objects[0].name = "changed"

    assert normalizer.normalize(rack_config) != first
    assert normalizer.normalize(rack_config) == normalizer.normalize(rack_config)


@pytest.mark.parametrize("server_type", ["tower", "", None])
def test_unsupported_server_type(server_type) -> None:
    with pytest.raises(InvalidConfigurationError, match="Unsupported server type"):
        normalize({"servertype": server_type, "interfaces": []})


def test_invalid_port_name() -> None:
    config = rack(make_card("Slot 1", [{"name": "Uplink", "partitions": make_partitions(1)}]))

    with pytest.raises(InvalidConfigurationError, match="Invalid port name Uplink"):
        normalize(config)


def test_invalid_partition_name() -> None:
    config = rack(make_card("Slot 1", [make_interface(1, [{"name": "first"}])]))

    with pytest.raises(InvalidConfigurationError, match="Invalid partition name first"):
        normalize(config)


def test_invalid_fabric_name() -> None:
    config = blade(make_card("Slot 1", [make_interface(1)]))

    with pytest.raises(InvalidConfigurationError, match="Invalid fabric name Slot 1"):
        normalize(config)


def test_invalid_nic_type() -> None:
    config = rack(make_card("Slot 1", [make_interface(1)], nictype="8x100Gb"))

    with pytest.raises(InvalidConfigurationError, match="Invalid nictype 8x100Gb"):
        normalize(config)


def test_missing_nic_type_uses_default() -> None:
    config = rack(make_card("Slot 1", [make_interface(1), make_interface(2)], nictype=None))

    cards = normalize(config)

    assert cards[0].nic_type.name == "2x10Gb"
    assert len(cards[0].interfaces) == 2
