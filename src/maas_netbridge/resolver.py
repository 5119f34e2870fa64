"""Lookup of bridge interfaces on a machine.

An interface identifier may be a MAC address, an interface name or a
stringified numeric ID.  Lookups only ever consider interfaces whose type
is ``bridge`` and try the three kinds in a fixed order: every bridge is
checked by MAC address first, then by name, then by ID.  Within one kind
the first bridge in the order MAAS lists them wins.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from maas_netbridge.client.errors import BridgeNotFoundError
from maas_netbridge.client.interface_ops import list_interfaces
from maas_netbridge.client.session import MaasSession
from maas_netbridge.model.interface import NetworkInterface
from maas_netbridge.utils.normalize import normalize_mac
from maas_netbridge.vendor.maas.mappings import (
    INTERFACE_TYPE_BRIDGE,
    INTERFACE_TYPE_PHYSICAL,
)

logger = logging.getLogger(__name__)


def select_bridge(
    interfaces: Iterable[NetworkInterface],
    identifier: str,
) -> NetworkInterface | None:
    """Return the bridge in *interfaces* matching *identifier*, or ``None``."""
    bridges = [i for i in interfaces if i.type == INTERFACE_TYPE_BRIDGE]
    mac = normalize_mac(identifier)
    for iface in bridges:
        if iface.mac_address and iface.mac_address == mac:
            return iface
    for iface in bridges:
        if iface.name == identifier:
            return iface
    for iface in bridges:
        if str(iface.id) == identifier:
            return iface
    return None


def select_parent(
    interfaces: Iterable[NetworkInterface],
    mac_address: str,
) -> NetworkInterface | None:
    """Return the non-bridge interface carrying *mac_address*, or ``None``.

    A physical interface is preferred over bonds and VLAN interfaces that
    share the same MAC address.
    """
    mac = normalize_mac(mac_address)
    candidates = [
        i for i in interfaces
        if i.type != INTERFACE_TYPE_BRIDGE and i.mac_address == mac
    ]
    for iface in candidates:
        if iface.type == INTERFACE_TYPE_PHYSICAL:
            return iface
    return candidates[0] if candidates else None


def find_bridge(
    session: MaasSession,
    system_id: str,
    identifier: str,
) -> NetworkInterface | None:
    """Fetch the interfaces of *system_id* and select the bridge matching *identifier*.

    Args:
        session: Active session.
        system_id: Canonical machine system ID.
        identifier: MAC address, interface name or stringified interface ID.

    Returns:
        The matching bridge, or ``None`` if there is none.
    """
    bridge = select_bridge(list_interfaces(session, system_id), identifier)
    if bridge is None:
        logger.debug("No bridge matching %r on %s", identifier, system_id)
    return bridge


def require_bridge(
    session: MaasSession,
    system_id: str,
    identifier: str,
) -> NetworkInterface:
    """Like :func:`find_bridge` but the bridge must exist.

    Raises:
        BridgeNotFoundError: If no bridge matches *identifier*.
    """
    bridge = find_bridge(session, system_id, identifier)
    if bridge is None:
        raise BridgeNotFoundError(identifier=identifier, machine=system_id)
    return bridge
