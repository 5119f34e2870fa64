"""Unit tests for maas_netbridge.parser.interface and maas_netbridge.parser.machine."""

from __future__ import annotations

from typing import Any

import pytest

from maas_netbridge.client.errors import MaasParseError
from maas_netbridge.model.interface import VlanRef
from maas_netbridge.parser.interface import parse_interface, parse_interfaces
from maas_netbridge.parser.machine import parse_machine, parse_machines

# Trimmed from a real ``GET nodes/<system_id>/interfaces/`` response.
BRIDGE_PAYLOAD: dict[str, Any] = {
    "id": 42,
    "name": "br0",
    "type": "bridge",
    "mac_address": "52:54:00:AA:BB:CC",
    "vlan": {
        "id": 5001,
        "vid": 0,
        "name": "untagged",
        "fabric": "fabric-0",
        "mtu": 1500,
    },
    "parents": ["eth0"],
    "children": [],
    "tags": ["virt", "bridge"],
    "enabled": True,
    "effective_mtu": 1500,
    "params": {"bridge_type": "standard", "bridge_stp": False, "bridge_fd": 15},
    "system_id": "4y3h7n",
}


class TestParseInterface:
    def test_full_payload(self) -> None:
        iface = parse_interface(BRIDGE_PAYLOAD)
        assert iface.id == 42
        assert iface.name == "br0"
        assert iface.type == "bridge"
        assert iface.mac_address == "52:54:00:aa:bb:cc"
        assert iface.vlan == VlanRef(id=5001, vid=0, name="untagged", fabric="fabric-0")
        assert iface.vlan_id == 5001
        assert iface.parents == ["eth0"]
        assert iface.tags == ["bridge", "virt"]
        assert iface.effective_mtu == 1500
        assert iface.params["bridge_fd"] == 15

    def test_minimal_payload(self) -> None:
        iface = parse_interface({"id": "7", "name": "eth1", "type": "physical"})
        assert iface.id == 7
        assert iface.mac_address == ""
        assert iface.vlan is None
        assert iface.vlan_id is None
        assert iface.tags == []
        assert iface.effective_mtu is None
        assert iface.enabled is True

    def test_null_vlan_and_string_params(self) -> None:
        payload = dict(BRIDGE_PAYLOAD, vlan=None, params="")
        iface = parse_interface(payload)
        assert iface.vlan is None
        assert iface.params == {}

    @pytest.mark.parametrize("missing", ["id", "name", "type"])
    def test_missing_required_field(self, missing: str) -> None:
        payload = {k: v for k, v in BRIDGE_PAYLOAD.items() if k != missing}
        with pytest.raises(MaasParseError):
            parse_interface(payload)

    def test_non_numeric_id(self) -> None:
        with pytest.raises(MaasParseError):
            parse_interface(dict(BRIDGE_PAYLOAD, id="abc"))

    @pytest.mark.parametrize(
        "overrides",
        [
            {"vlan": {"id": "x"}},
            {"vlan": {"id": 5001, "vid": "x"}},
            {"effective_mtu": "jumbo"},
        ],
    )
    def test_non_numeric_nested_field(self, overrides: dict[str, Any]) -> None:
        with pytest.raises(MaasParseError):
            parse_interface(dict(BRIDGE_PAYLOAD, **overrides))

    def test_not_an_object(self) -> None:
        with pytest.raises(MaasParseError):
            parse_interface(["br0"])


class TestParseInterfaces:
    def test_preserves_order(self) -> None:
        payload = [
            {"id": 3, "name": "eth0", "type": "physical"},
            {"id": 1, "name": "br0", "type": "bridge"},
        ]
        assert [i.id for i in parse_interfaces(payload)] == [3, 1]

    def test_not_a_list(self) -> None:
        with pytest.raises(MaasParseError):
            parse_interfaces({"id": 1})


class TestParseMachine:
    def test_full_payload(self) -> None:
        machine = parse_machine(
            {
                "system_id": "4y3h7n",
                "hostname": "node01",
                "fqdn": "node01.maas",
                "status_name": "Ready",
            }
        )
        assert machine.system_id == "4y3h7n"
        assert machine.hostname == "node01"
        assert machine.fqdn == "node01.maas"
        assert machine.status_name == "Ready"

    def test_missing_system_id(self) -> None:
        with pytest.raises(MaasParseError):
            parse_machine({"hostname": "node01"})

    def test_list(self) -> None:
        machines = parse_machines([{"system_id": "a"}, {"system_id": "b"}])
        assert [m.system_id for m in machines] == ["a", "b"]

    def test_list_not_a_list(self) -> None:
        with pytest.raises(MaasParseError):
            parse_machines({"system_id": "a"})

    @pytest.mark.parametrize("identifier", ["4y3h7n", "node01", "node01.maas"])
    def test_matches(self, identifier: str) -> None:
        machine = parse_machine(
            {"system_id": "4y3h7n", "hostname": "node01", "fqdn": "node01.maas"}
        )
        assert machine.matches(identifier)

    def test_does_not_match_other(self) -> None:
        machine = parse_machine({"system_id": "4y3h7n", "hostname": "node01"})
        assert not machine.matches("node02")
