"""Network interface read and write operations.

Each function maps to exactly one MAAS API call:

    LIST:    GET    nodes/<system_id>/interfaces/
    GET:     GET    nodes/<system_id>/interfaces/<id>/
    CREATE:  POST   nodes/<system_id>/interfaces/?op=create_bridge
             mac_address=..&tags=..&parent=<id>[&name=..&vlan=..&mtu=..&bridge_*=..]
    UPDATE:  PUT    nodes/<system_id>/interfaces/<id>/   (same fields, no parent)
    DELETE:  DELETE nodes/<system_id>/interfaces/<id>/   -> 204
"""

from __future__ import annotations

import logging

from maas_netbridge.client.session import MaasSession
from maas_netbridge.model.bridge import BridgeParams
from maas_netbridge.model.interface import NetworkInterface
from maas_netbridge.parser.interface import parse_interface, parse_interfaces
from maas_netbridge.vendor.maas.endpoints import (
    OP_CREATE_BRIDGE,
    node_interface,
    node_interfaces,
)

logger = logging.getLogger(__name__)


def list_interfaces(session: MaasSession, system_id: str) -> list[NetworkInterface]:
    """Return all interfaces of *system_id* in the order MAAS lists them."""
    return parse_interfaces(session.get(node_interfaces(system_id)))


def get_interface(
    session: MaasSession,
    system_id: str,
    interface_id: int,
) -> NetworkInterface:
    """Fetch one interface by ID.

    Raises:
        MaasNotFoundError: If the interface no longer exists.
    """
    return parse_interface(session.get(node_interface(system_id, interface_id)))


def create_bridge(
    session: MaasSession,
    system_id: str,
    params: BridgeParams,
) -> NetworkInterface:
    """Create a bridge interface on *system_id*.

    Args:
        session: Active session.
        system_id: Canonical machine system ID.
        params: Creation parameters; ``params.parent`` should be set.

    Returns:
        The created interface as reported by MAAS.
    """
    logger.debug("Creating bridge on %s with %r", system_id, params)
    payload = session.post(
        node_interfaces(system_id),
        data=params.to_form(),
        op=OP_CREATE_BRIDGE,
    )
    return parse_interface(payload)


def update_interface(
    session: MaasSession,
    system_id: str,
    interface_id: int,
    params: BridgeParams,
) -> NetworkInterface:
    """Overwrite the settings of interface *interface_id* with *params*."""
    logger.debug("Updating interface %d on %s with %r", interface_id, system_id, params)
    payload = session.put(node_interface(system_id, interface_id), data=params.to_form())
    return parse_interface(payload)


def delete_interface(
    session: MaasSession,
    system_id: str,
    interface_id: int,
) -> None:
    """Delete interface *interface_id* from *system_id*."""
    logger.debug("Deleting interface %d on %s", interface_id, system_id)
    session.delete(node_interface(system_id, interface_id))
