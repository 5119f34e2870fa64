"""Unit tests for maas_netbridge.resolver."""

from __future__ import annotations

import json

import pytest
import responses as responses_lib

from maas_netbridge.client.errors import BridgeNotFoundError, MaasRequestError
from maas_netbridge.client.session import MaasCredentials, MaasSession
from maas_netbridge.model.interface import NetworkInterface
from maas_netbridge.resolver import find_bridge, require_bridge, select_bridge, select_parent

_BASE = "http://maas.test:5240/MAAS"
_LIST_URL = f"{_BASE}/api/2.0/nodes/m1/interfaces/"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def make_iface(iface_id: int, iface_type: str, mac: str = "", name: str = "") -> NetworkInterface:
    return NetworkInterface(
        id=iface_id,
        name=name or f"if{iface_id}",
        type=iface_type,
        mac_address=mac,
    )


def _session() -> MaasSession:
    return MaasSession(base_url=_BASE, credentials=MaasCredentials("c", "t", "s"))


# ---------------------------------------------------------------------------
# select_bridge
# ---------------------------------------------------------------------------

class TestSelectBridge:
    def test_bridge_preferred_over_physical_with_same_mac(self) -> None:
        interfaces = [
            make_iface(5, "bridge", mac="aa:bb", name="br0"),
            make_iface(6, "physical", mac="aa:bb", name="eth0"),
        ]
        result = select_bridge(interfaces, "AA:BB")
        assert result is not None
        assert result.id == 5

    def test_physical_listed_first_still_ignored(self) -> None:
        interfaces = [
            make_iface(6, "physical", mac="aa:bb", name="eth0"),
            make_iface(5, "bridge", mac="aa:bb", name="br0"),
        ]
        result = select_bridge(interfaces, "aa:bb")
        assert result is not None
        assert result.id == 5

    def test_non_bridge_exact_mac_is_not_a_match(self) -> None:
        interfaces = [make_iface(6, "physical", mac="aa:bb"), make_iface(7, "bond", mac="aa:bb")]
        assert select_bridge(interfaces, "aa:bb") is None

    def test_not_found(self) -> None:
        interfaces = [make_iface(5, "bridge", mac="aa:bb", name="br0")]
        assert select_bridge(interfaces, "cc:dd") is None

    def test_empty_list(self) -> None:
        assert select_bridge([], "aa:bb") is None

    def test_match_by_name(self) -> None:
        interfaces = [make_iface(5, "bridge", mac="aa:bb", name="br0")]
        result = select_bridge(interfaces, "br0")
        assert result is not None and result.id == 5

    def test_match_by_id(self) -> None:
        interfaces = [make_iface(5, "bridge", mac="aa:bb", name="br0")]
        result = select_bridge(interfaces, "5")
        assert result is not None and result.id == 5

    def test_mac_takes_precedence_over_name(self) -> None:
        # Bridge 1 is *named* like bridge 2's MAC address.
        interfaces = [
            make_iface(1, "bridge", mac="11:11", name="22:22"),
            make_iface(2, "bridge", mac="22:22", name="br2"),
        ]
        result = select_bridge(interfaces, "22:22")
        assert result is not None and result.id == 2

    def test_name_takes_precedence_over_id(self) -> None:
        interfaces = [
            make_iface(7, "bridge", mac="11:11", name="br7"),
            make_iface(8, "bridge", mac="22:22", name="7"),
        ]
        result = select_bridge(interfaces, "7")
        assert result is not None and result.id == 8

    def test_first_in_list_wins_within_same_kind(self) -> None:
        interfaces = [
            make_iface(3, "bridge", mac="aa:bb", name="br-a"),
            make_iface(4, "bridge", mac="aa:bb", name="br-b"),
        ]
        result = select_bridge(interfaces, "aa:bb")
        assert result is not None and result.id == 3

    def test_bridge_without_mac_not_matched_by_empty_identifier(self) -> None:
        interfaces = [make_iface(3, "bridge", mac="", name="br0")]
        assert select_bridge(interfaces, "") is None


# ---------------------------------------------------------------------------
# select_parent
# ---------------------------------------------------------------------------

class TestSelectParent:
    def test_physical_preferred(self) -> None:
        interfaces = [
            make_iface(9, "vlan", mac="aa:bb"),
            make_iface(5, "bridge", mac="aa:bb"),
            make_iface(1, "physical", mac="aa:bb"),
        ]
        result = select_parent(interfaces, "AA-BB")
        assert result is not None and result.id == 1

    def test_falls_back_to_bond(self) -> None:
        interfaces = [make_iface(2, "bond", mac="aa:bb")]
        result = select_parent(interfaces, "aa:bb")
        assert result is not None and result.id == 2

    def test_bridge_is_never_a_parent(self) -> None:
        assert select_parent([make_iface(5, "bridge", mac="aa:bb")], "aa:bb") is None


# ---------------------------------------------------------------------------
# find_bridge / require_bridge
# ---------------------------------------------------------------------------

_INTERFACES = [
    {"id": 5, "name": "br0", "type": "bridge", "mac_address": "AA:BB"},
    {"id": 6, "name": "eth0", "type": "physical", "mac_address": "AA:BB"},
]


class TestFindBridge:
    @responses_lib.activate
    def test_scenario_bridge_not_physical(self) -> None:
        responses_lib.add(responses_lib.GET, _LIST_URL, body=json.dumps(_INTERFACES))
        result = find_bridge(_session(), "m1", "AA:BB")
        assert result is not None
        assert result.id == 5
        assert len(responses_lib.calls) == 1

    @responses_lib.activate
    def test_not_found_is_none(self) -> None:
        responses_lib.add(responses_lib.GET, _LIST_URL, body=json.dumps(_INTERFACES))
        assert find_bridge(_session(), "m1", "eth0") is None

    @responses_lib.activate
    def test_transport_error_propagates(self) -> None:
        import requests

        responses_lib.add(
            responses_lib.GET,
            _LIST_URL,
            body=requests.exceptions.ConnectTimeout("timed out"),
        )
        with pytest.raises(MaasRequestError):
            find_bridge(_session(), "m1", "AA:BB")


class TestRequireBridge:
    @responses_lib.activate
    def test_found(self) -> None:
        responses_lib.add(responses_lib.GET, _LIST_URL, body=json.dumps(_INTERFACES))
        assert require_bridge(_session(), "m1", "br0").id == 5

    @responses_lib.activate
    def test_missing_raises_with_identifier_and_machine(self) -> None:
        responses_lib.add(responses_lib.GET, _LIST_URL, body=json.dumps(_INTERFACES))
        with pytest.raises(BridgeNotFoundError) as exc_info:
            require_bridge(_session(), "m1", "br9")
        err = exc_info.value
        assert err.identifier == "br9"
        assert err.machine == "m1"
        assert "br9" in str(err) and "m1" in str(err)
