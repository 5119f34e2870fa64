"""Desired bridge configuration to MAAS form parameters.

The single place where :class:`~maas_netbridge.model.bridge.BridgeConfig`
fields meet the wire shape of ``create_bridge`` and interface ``update``:

    parent       <- ID of the interface carrying ``mac_address`` (create only)
    mac_address  <- mac_address
    name         <- name
    vlan         <- vlan (omitted for the untagged sentinel)
    tags         <- tags, comma-joined (omitted when ``None``)
    mtu          <- mtu
    bridge_type  <- bridge_type
    bridge_stp   <- bridge_stp
    bridge_fd    <- bridge_fd
"""

from __future__ import annotations

from maas_netbridge.model.bridge import BridgeConfig, BridgeParams
from maas_netbridge.utils.normalize import normalize_bridge_config
from maas_netbridge.vendor.maas.mappings import BRIDGE_TYPES


def build_bridge_params(
    desired: BridgeConfig,
    parent_id: int | None = None,
) -> BridgeParams:
    """Map *desired* onto :class:`BridgeParams`.

    Args:
        desired: Desired bridge configuration (normalized here).
        parent_id: ID of the physical interface to bridge.  Required by
            ``create_bridge``; leave ``None`` for updates so the parent is
            not re-sent.

    Returns:
        The parameter set.  Every update sends the full set; MAAS leaves
        unchanged fields as they are.

    Raises:
        ValueError: If ``mtu`` is not positive, ``bridge_fd`` is negative, or
            ``bridge_type`` is not a known bridge implementation.
    """
    cfg = normalize_bridge_config(desired)
    if cfg.mtu is not None and cfg.mtu <= 0:
        raise ValueError(f"mtu must be a positive integer, got {cfg.mtu!r}")
    if cfg.bridge_fd is not None and cfg.bridge_fd < 0:
        raise ValueError(f"bridge_fd must not be negative, got {cfg.bridge_fd!r}")
    if cfg.bridge_type is not None and cfg.bridge_type not in BRIDGE_TYPES:
        raise ValueError(
            f"bridge_type must be one of {sorted(BRIDGE_TYPES)}, got {cfg.bridge_type!r}"
        )
    return BridgeParams(
        mac_address=cfg.mac_address,
        tags=list(cfg.tags) if cfg.tags is not None else None,
        parent=parent_id,
        name=cfg.name,
        vlan=cfg.vlan,
        mtu=cfg.mtu,
        bridge_type=cfg.bridge_type,
        bridge_stp=cfg.bridge_stp,
        bridge_fd=cfg.bridge_fd,
    )
