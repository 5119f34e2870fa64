"""Typed models for network interface data as reported by MAAS."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class VlanRef:
    """The VLAN an interface is attached to.

    Attributes:
        id: MAAS database ID of the VLAN.
        vid: 802.1Q tag (0 for the untagged VLAN of a fabric).
        name: VLAN name (``"untagged"`` for the default VLAN).
        fabric: Name of the fabric the VLAN belongs to.
    """

    id: int
    vid: int = 0
    name: str = ""
    fabric: str = ""


@dataclass
class NetworkInterface:
    """A single network interface on a machine.

    Attributes:
        id: Remote-assigned numeric identifier, stable for the interface's lifetime.
        name: Interface name (e.g. ``"br0"``).
        type: Discriminator: ``"physical"``, ``"bond"``, ``"bridge"``, ``"vlan"``...
        mac_address: MAC address, lower-case colon form.
        vlan: Attached VLAN, or ``None`` when disconnected.
        parents: Names of the interfaces composing this one, in remote order.
        children: Names of interfaces built on top of this one.
        tags: Tag names.
        effective_mtu: MTU currently in effect, or ``None`` if not reported.
        enabled: Whether the interface is enabled.
        params: Type-specific settings (``bridge_type``, ``bridge_stp``,
            ``bridge_fd``, ``mtu``...).
    """

    id: int
    name: str
    type: str
    mac_address: str = ""
    vlan: VlanRef | None = None
    parents: list[str] = field(default_factory=list)
    children: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    effective_mtu: int | None = None
    enabled: bool = True
    params: dict[str, Any] = field(default_factory=dict)

    @property
    def vlan_id(self) -> int | None:
        """Database ID of the attached VLAN, or ``None``."""
        return self.vlan.id if self.vlan is not None else None
