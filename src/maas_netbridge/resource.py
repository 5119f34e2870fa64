"""Bridge interface lifecycle: create-or-adopt, read, update, delete and import."""

from __future__ import annotations

import logging
from dataclasses import replace

from maas_netbridge.client.errors import ParentNotFoundError
from maas_netbridge.client.interface_ops import (
    create_bridge,
    delete_interface,
    get_interface,
    list_interfaces,
    update_interface,
)
from maas_netbridge.client.machine_ops import resolve_machine
from maas_netbridge.client.session import MaasSession
from maas_netbridge.model.bridge import BridgeChangeSet, BridgeConfig, BridgeState
from maas_netbridge.model.interface import NetworkInterface
from maas_netbridge.resolver import require_bridge, select_bridge, select_parent
from maas_netbridge.utils.bridge_diff import plan_bridge_changes
from maas_netbridge.utils.identifiers import parse_import_id, parse_interface_id
from maas_netbridge.utils.normalize import normalize_bridge_config
from maas_netbridge.utils.params import build_bridge_params

logger = logging.getLogger(__name__)


class BridgeInterfaceResource:
    """Manages one bridge interface per ``(machine, mac_address)`` on MAAS.

    Every entry point is independent: it resolves the machine, talks to the
    region controller and returns fresh state.  Nothing is cached between
    calls and nothing is retried.

    Args:
        session: Signed API session used for every call.
    """

    def __init__(self, session: MaasSession) -> None:
        self._session = session

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def create(self, desired: BridgeConfig) -> BridgeState:
        """Create the bridge for ``desired.mac_address``, or adopt an existing one.

        An existing bridge on the MAC address is taken over unchanged; its ID
        becomes the managed identifier.  Either way the mutable attributes
        are then converged with :meth:`update`.  If that update fails the
        bridge stays created.

        Raises:
            MachineNotFoundError: If ``desired.machine`` does not resolve.
            ParentNotFoundError: If no interface carries the MAC address.
            MaasError: On any API failure.
        """
        cfg = normalize_bridge_config(desired)
        system_id = resolve_machine(self._session, cfg.machine).system_id
        interfaces = list_interfaces(self._session, system_id)

        bridge = select_bridge(interfaces, cfg.mac_address)
        if bridge is None:
            parent = select_parent(interfaces, cfg.mac_address)
            if parent is None:
                raise ParentNotFoundError(mac_address=cfg.mac_address, machine=system_id)
            bridge = create_bridge(
                self._session,
                system_id,
                build_bridge_params(cfg, parent_id=parent.id),
            )
            logger.info(
                "Created bridge %s (id=%d) on %s over %s",
                bridge.name, bridge.id, system_id, parent.name,
            )
        else:
            logger.info(
                "Adopted existing bridge %s (id=%d) on %s", bridge.name, bridge.id, system_id
            )

        state = BridgeState(
            id=str(bridge.id),
            machine=cfg.machine,
            mac_address=cfg.mac_address,
            parents=list(bridge.parents),
        )
        return self.update(state, cfg)

    def read(self, state: BridgeState) -> BridgeState:
        """Refresh the mutable attributes of *state* from MAAS.

        Only ``name``, ``tags`` and ``mtu`` (the effective MTU) are refreshed;
        every other field of *state* is returned as given.

        Raises:
            MalformedIdentifierError: If ``state.id`` is not numeric.
            MaasNotFoundError: If the bridge no longer exists.
        """
        system_id = resolve_machine(self._session, state.machine).system_id
        iface = get_interface(self._session, system_id, parse_interface_id(state.id))
        return replace(
            state,
            name=iface.name,
            tags=list(iface.tags),
            mtu=iface.effective_mtu,
        )

    def update(self, state: BridgeState, desired: BridgeConfig) -> BridgeState:
        """Send the full parameter set of *desired* to the bridge, then :meth:`read`.

        Raises:
            MalformedIdentifierError: If ``state.id`` is not numeric.
            MaasError: On any API failure.
        """
        cfg = normalize_bridge_config(desired)
        system_id = resolve_machine(self._session, state.machine).system_id
        interface_id = parse_interface_id(state.id)
        update_interface(self._session, system_id, interface_id, build_bridge_params(cfg))
        logger.info("Updated bridge id=%d on %s", interface_id, system_id)

        applied = replace(
            state,
            vlan=cfg.vlan,
            name=cfg.name,
            tags=list(cfg.tags) if cfg.tags is not None else state.tags,
            mtu=cfg.mtu,
            bridge_type=cfg.bridge_type,
            bridge_stp=cfg.bridge_stp,
            bridge_fd=cfg.bridge_fd,
        )
        return self.read(applied)

    def delete(self, state: BridgeState) -> None:
        """Delete the bridge identified by *state*.

        Raises:
            MalformedIdentifierError: If ``state.id`` is not numeric.
            MaasError: On any API failure.
        """
        system_id = resolve_machine(self._session, state.machine).system_id
        interface_id = parse_interface_id(state.id)
        delete_interface(self._session, system_id, interface_id)
        logger.info("Deleted bridge id=%d on %s", interface_id, system_id)

    def import_state(self, import_id: str) -> BridgeState:
        """Build state for an existing bridge from ``MACHINE:NETWORK_INTERFACE``.

        The interface part may be the bridge's MAC address, name or ID.

        Raises:
            ImportFormatError: If *import_id* is malformed.
            MachineNotFoundError: If the machine does not resolve.
            BridgeNotFoundError: If no bridge on the machine matches.
        """
        machine_id, identifier = parse_import_id(import_id)
        system_id = resolve_machine(self._session, machine_id).system_id
        bridge = require_bridge(self._session, system_id, identifier)
        logger.info("Imported bridge %s (id=%d) from %s", bridge.name, bridge.id, system_id)
        return state_from_interface(system_id, bridge)

    # ------------------------------------------------------------------
    # Planning
    # ------------------------------------------------------------------

    def plan(self, desired: BridgeConfig) -> BridgeChangeSet:
        """Report what :meth:`create` would change, without changing anything."""
        cfg = normalize_bridge_config(desired)
        system_id = resolve_machine(self._session, cfg.machine).system_id
        current = select_bridge(list_interfaces(self._session, system_id), cfg.mac_address)
        return plan_bridge_changes(current, cfg)


def state_from_interface(system_id: str, iface: NetworkInterface) -> BridgeState:
    """Build a :class:`BridgeState` from everything MAAS reports for *iface*."""
    return BridgeState(
        id=str(iface.id),
        machine=system_id,
        mac_address=iface.mac_address,
        vlan=str(iface.vlan_id) if iface.vlan_id is not None else None,
        name=iface.name,
        tags=list(iface.tags),
        mtu=iface.effective_mtu,
        parents=list(iface.parents),
        bridge_type=iface.params.get("bridge_type") or iface.type,
        bridge_stp=iface.params.get("bridge_stp"),
        bridge_fd=iface.params.get("bridge_fd"),
    )
