"""Typed models for bridge interface desired state, wire parameters and tracked state."""

from __future__ import annotations

from dataclasses import dataclass, field

from maas_netbridge.vendor.maas.mappings import TAG_SEPARATOR


@dataclass(frozen=True)
class BridgeConfig:
    """Desired state of a bridge interface.

    Any optional field set to ``None`` means "let MAAS decide".

    Attributes:
        machine: System ID, hostname or FQDN of the machine.
        mac_address: MAC address of the physical interface to bridge.
            Changing it requires replacing the bridge.
        vlan: MAAS VLAN ID; ``None`` or ``"untagged"`` keeps the parent's
            untagged VLAN.
        name: Interface name; MAAS assigns one when ``None``.
        tags: Tag names.  Order is irrelevant and duplicates collapse;
            ``None`` keeps the tags MAAS holds and ``()`` clears them.
        mtu: Maximum transmission unit; the effective MTU applies when ``None``.
        bridge_type: ``"standard"`` or ``"ovs"``.
        bridge_stp: Spanning tree protocol on/off.
        bridge_fd: Forward delay in seconds.
    """

    machine: str
    mac_address: str
    vlan: str | None = None
    name: str | None = None
    tags: tuple[str, ...] | None = None
    mtu: int | None = None
    bridge_type: str | None = None
    bridge_stp: bool | None = None
    bridge_fd: int | None = None


@dataclass
class BridgeParams:
    """Form parameters for ``create_bridge`` and interface ``update`` calls.

    Built by :func:`~maas_netbridge.utils.params.build_bridge_params`;
    ``None`` fields are not sent.
    """

    mac_address: str
    tags: list[str] | None = None
    parent: int | None = None
    name: str | None = None
    vlan: str | None = None
    mtu: int | None = None
    bridge_type: str | None = None
    bridge_stp: bool | None = None
    bridge_fd: int | None = None

    def to_form(self) -> dict[str, str]:
        """Return the form-encoded payload.

        An empty ``tags`` list is sent as ``""`` so that MAAS clears the tags.
        """
        form: dict[str, str] = {"mac_address": self.mac_address}
        if self.tags is not None:
            form["tags"] = TAG_SEPARATOR.join(self.tags)
        if self.parent is not None:
            form["parent"] = str(self.parent)
        if self.name is not None:
            form["name"] = self.name
        if self.vlan is not None:
            form["vlan"] = self.vlan
        if self.mtu is not None:
            form["mtu"] = str(self.mtu)
        if self.bridge_type is not None:
            form["bridge_type"] = self.bridge_type
        if self.bridge_stp is not None:
            form["bridge_stp"] = "true" if self.bridge_stp else "false"
        if self.bridge_fd is not None:
            form["bridge_fd"] = str(self.bridge_fd)
        return form


@dataclass
class BridgeState:
    """Tracked state of a managed bridge interface.

    ``id`` is the decimal string of the MAAS interface ID; it is empty until
    the bridge has been created or adopted.

    Attributes:
        id: Stringified numeric interface ID.
        machine: Machine identifier as given (system ID after import).
        mac_address: MAC address of the bridged interface.
        vlan: Stringified MAAS VLAN ID, or ``None``.
        name: Interface name.
        tags: Sorted tag names.
        mtu: Effective MTU.
        parents: Names of the interfaces composing the bridge.
        bridge_type: Bridge implementation (``"standard"``/``"ovs"``), or
            the ``"bridge"`` discriminator when MAAS does not report one.
        bridge_stp: Spanning tree setting, when known.
        bridge_fd: Forward delay, when known.
    """

    id: str = ""
    machine: str = ""
    mac_address: str = ""
    vlan: str | None = None
    name: str | None = None
    tags: list[str] = field(default_factory=list)
    mtu: int | None = None
    parents: list[str] = field(default_factory=list)
    bridge_type: str | None = None
    bridge_stp: bool | None = None
    bridge_fd: int | None = None


@dataclass
class BridgeChangeSet:
    """Planned changes to reach a desired bridge configuration.

    Attributes:
        create: ``True`` if no bridge exists for the MAC address yet.
        interface_id: ID of the existing bridge, or ``None`` when creating.
        changes: Field name to ``(current, desired)`` for each differing
            mutable attribute of an existing bridge.
    """

    create: bool = False
    interface_id: int | None = None
    changes: dict[str, tuple[object, object]] = field(default_factory=dict)

    @property
    def changed(self) -> bool:
        """``True`` if applying the plan would touch the remote service."""
        return self.create or bool(self.changes)
