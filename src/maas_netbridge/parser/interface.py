"""Parser for MAAS interface JSON payloads."""

from __future__ import annotations

import logging
from typing import Any

from maas_netbridge.client.errors import MaasParseError
from maas_netbridge.model.interface import NetworkInterface, VlanRef
from maas_netbridge.utils.normalize import normalize_mac, normalize_tags

logger = logging.getLogger(__name__)


def parse_interface(payload: Any) -> NetworkInterface:
    """Convert one interface object from the API into a :class:`NetworkInterface`.

    Args:
        payload: Decoded JSON object as returned by
            ``GET nodes/{system_id}/interfaces/{id}/``.

    Returns:
        The typed interface.

    Raises:
        MaasParseError: If *payload* is not an object, lacks ``id``,
            ``name`` or ``type``, or carries a non-numeric VLAN or MTU.
    """
    if not isinstance(payload, dict):
        raise MaasParseError(f"Expected interface object, got {type(payload).__name__}")
    try:
        iface_id = int(payload["id"])
        name = str(payload["name"])
        iface_type = str(payload["type"])
        vlan = _parse_vlan(payload.get("vlan"))
        effective_mtu = payload.get("effective_mtu")
        if effective_mtu is not None:
            effective_mtu = int(effective_mtu)
    except (KeyError, TypeError, ValueError) as exc:
        raise MaasParseError(f"Malformed interface payload: {exc!r}") from exc

    params = payload.get("params")
    return NetworkInterface(
        id=iface_id,
        name=name,
        type=iface_type,
        mac_address=normalize_mac(payload.get("mac_address") or ""),
        vlan=vlan,
        parents=[str(p) for p in payload.get("parents") or []],
        children=[str(c) for c in payload.get("children") or []],
        tags=normalize_tags(payload.get("tags") or []),
        effective_mtu=effective_mtu,
        enabled=bool(payload.get("enabled", True)),
        # MAAS reports an empty string instead of {} for some interface types.
        params=params if isinstance(params, dict) else {},
    )


def parse_interfaces(payload: Any) -> list[NetworkInterface]:
    """Convert the interface list of a node, preserving remote order.

    Raises:
        MaasParseError: If *payload* is not a list or any entry is malformed.
    """
    if not isinstance(payload, list):
        raise MaasParseError(f"Expected interface list, got {type(payload).__name__}")
    interfaces = [parse_interface(item) for item in payload]
    logger.debug("Parsed %d interfaces", len(interfaces))
    return interfaces


def _parse_vlan(payload: Any) -> VlanRef | None:
    if not isinstance(payload, dict) or payload.get("id") is None:
        return None
    return VlanRef(
        id=int(payload["id"]),
        vid=int(payload.get("vid") or 0),
        name=str(payload.get("name") or ""),
        fabric=str(payload.get("fabric") or ""),
    )
