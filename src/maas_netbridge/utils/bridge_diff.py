"""Bridge change-set planner.

Compares the bridge currently found for a MAC address (if any) against a
desired :class:`BridgeConfig` and reports what applying it would do.
Used for check mode; applying never depends on the plan, since updates are
always full overwrites.
"""

from __future__ import annotations

from maas_netbridge.model.bridge import BridgeChangeSet, BridgeConfig
from maas_netbridge.model.interface import NetworkInterface
from maas_netbridge.utils.normalize import normalize_bridge_config


def plan_bridge_changes(
    current: NetworkInterface | None,
    desired: BridgeConfig,
) -> BridgeChangeSet:
    """Compute the changes needed to reach *desired* from *current*.

    Args:
        current: Existing bridge for the MAC address, or ``None``.
        desired: Target configuration.  ``None`` fields are not compared.

    Returns:
        A :class:`BridgeChangeSet`; ``create`` is set when *current* is ``None``.
    """
    if current is None:
        return BridgeChangeSet(create=True)

    cfg = normalize_bridge_config(desired)
    pairs: dict[str, tuple[object, object]] = {}
    if cfg.tags is not None:
        pairs["tags"] = (list(current.tags), list(cfg.tags))
    if cfg.name is not None:
        pairs["name"] = (current.name, cfg.name)
    if cfg.mtu is not None:
        pairs["mtu"] = (current.effective_mtu, cfg.mtu)
    if cfg.vlan is not None:
        current_vlan = str(current.vlan_id) if current.vlan_id is not None else None
        pairs["vlan"] = (current_vlan, cfg.vlan)
    if cfg.bridge_type is not None:
        pairs["bridge_type"] = (current.params.get("bridge_type"), cfg.bridge_type)
    if cfg.bridge_stp is not None:
        pairs["bridge_stp"] = (current.params.get("bridge_stp"), cfg.bridge_stp)
    if cfg.bridge_fd is not None:
        pairs["bridge_fd"] = (current.params.get("bridge_fd"), cfg.bridge_fd)

    changes = {key: pair for key, pair in pairs.items() if pair[0] != pair[1]}
    return BridgeChangeSet(create=False, interface_id=current.id, changes=changes)
