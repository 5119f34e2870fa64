#!/usr/bin/python3
# Copyright: (c) 2024, maas-netbridge contributors
# SPDX-License-Identifier: Apache-2.0
"""Ansible module: maas_bridge_interface — idempotent bridge interfaces on MAAS machines."""

from __future__ import annotations

DOCUMENTATION = r"""
---
module: maas_bridge_interface
short_description: Manage a bridge network interface on a MAAS machine
description:
  - Ensures exactly one bridge interface exists over the physical interface
    with the given MAC address, and converges its name, tags, VLAN, MTU and
    bridge options.
  - An existing bridge on the MAC address is adopted instead of duplicated.
  - With I(import_id), reads back an existing bridge without changing it.
  - Supports Ansible check mode (dry-run) natively.
options:
  api_url:
    description: MAAS region controller URL, e.g. C(http://maas.example:5240/MAAS).
    required: true
    type: str
  api_key:
    description: MAAS API key in C(consumer:token:secret) form.
    required: true
    type: str
    no_log: true
  api_version:
    description: MAAS REST API version.
    type: str
    default: "2.0"
  verify_tls:
    description: Verify TLS certificates when connecting over HTTPS.
    type: bool
    default: true
  timeout:
    description: Request timeout in seconds.
    type: float
    default: 30
  machine:
    description: System ID, hostname or FQDN of the machine.
    type: str
  mac_address:
    description: MAC address of the physical interface to bridge.
    type: str
  vlan:
    description: MAAS VLAN ID of the bridge. Defaults to C(untagged).
    type: str
  name:
    description: Bridge interface name. Assigned by MAAS if not set.
    type: str
  tags:
    description:
      - Tag names to assign to the bridge.
      - If not set, the tags already on the bridge are kept. An empty list clears them.
    type: list
    elements: str
  mtu:
    description: MTU of the bridge. The effective MTU applies if not set.
    type: int
  bridge_type:
    description: Bridge implementation.
    type: str
    choices: [standard, ovs]
  bridge_stp:
    description: Turn spanning tree protocol on or off.
    type: bool
  bridge_fd:
    description: Bridge forward delay in seconds.
    type: int
  state:
    description: Whether the bridge should exist.
    type: str
    choices: [present, absent]
    default: present
  import_id:
    description: >
      C(MACHINE:NETWORK_INTERFACE) identifier of an existing bridge, where
      NETWORK_INTERFACE is its MAC address, name or ID. When set, the bridge
      is only read and I(machine)/I(mac_address) are not required. Cannot be
      combined with I(state=absent).
    type: str
notes:
  - Run this module on the Ansible controller (C(connection: local)).
  - maas-netbridge must be installed in the Python environment used by Ansible.
requirements:
  - maas-netbridge >= 0.1.0
author:
  - maas-netbridge contributors
"""

EXAMPLES = r"""
- name: Bridge eth0 of node01 (check mode)
  maas_bridge_interface:
    api_url: http://maas.example:5240/MAAS
    api_key: "{{ maas_api_key }}"
    machine: node01
    mac_address: "52:54:00:12:34:56"
    name: br0
    tags: [virt]
  check_mode: true

- name: Bridge with jumbo frames on VLAN 5002
  maas_bridge_interface:
    api_url: http://maas.example:5240/MAAS
    api_key: "{{ maas_api_key }}"
    machine: node01.maas
    mac_address: "52:54:00:12:34:56"
    vlan: "5002"
    mtu: 9000
    bridge_type: ovs

- name: Remove the bridge
  maas_bridge_interface:
    api_url: http://maas.example:5240/MAAS
    api_key: "{{ maas_api_key }}"
    machine: node01
    mac_address: "52:54:00:12:34:56"
    state: absent

- name: Read back an existing bridge
  maas_bridge_interface:
    api_url: http://maas.example:5240/MAAS
    api_key: "{{ maas_api_key }}"
    import_id: "4y3h7n:br0"
"""

RETURN = r"""
changed:
  description: Whether the bridge was (or, in check mode, would be) created, updated or deleted.
  type: bool
  returned: always
bridge:
  description: >
    Tracked state of the bridge (C(id), C(machine), C(mac_address), C(vlan),
    C(name), C(tags), C(mtu), C(parents), C(bridge_type), ...). Empty when
    the bridge does not exist.
  type: dict
  returned: always
plan:
  description: >
    Planned changes with C(create), C(interface_id), C(total_changes) and
    C(changes). Empty for I(import_id).
  type: dict
  returned: always
"""

from ansible.module_utils.basic import AnsibleModule  # noqa: E402


def _check_params(p: dict) -> str | None:  # type: ignore[type-arg]
    """Return an error message for option combinations AnsibleModule cannot express."""
    if p["import_id"] and p["state"] == "absent":
        return "import_id cannot be combined with state=absent"
    return None


def _build_desired_config(p: dict) -> object:  # type: ignore[type-arg]
    """Convert module params into a BridgeConfig instance."""
    # Import here so import errors surface as fail_json, not as a module crash
    from maas_netbridge.model.bridge import BridgeConfig

    return BridgeConfig(
        machine=p["machine"],
        mac_address=p["mac_address"],
        vlan=p["vlan"],
        name=p["name"],
        tags=tuple(p["tags"]) if p["tags"] is not None else None,
        mtu=p["mtu"],
        bridge_type=p["bridge_type"],
        bridge_stp=p["bridge_stp"],
        bridge_fd=p["bridge_fd"],
    )


def run_module() -> None:
    argument_spec = dict(
        api_url=dict(type="str", required=True),
        api_key=dict(type="str", required=True, no_log=True),
        api_version=dict(type="str", default="2.0"),
        verify_tls=dict(type="bool", default=True),
        timeout=dict(type="float", default=30.0),
        machine=dict(type="str"),
        mac_address=dict(type="str"),
        vlan=dict(type="str"),
        name=dict(type="str"),
        tags=dict(type="list", elements="str"),
        mtu=dict(type="int"),
        bridge_type=dict(type="str", choices=["standard", "ovs"]),
        bridge_stp=dict(type="bool"),
        bridge_fd=dict(type="int"),
        state=dict(type="str", choices=["present", "absent"], default="present"),
        import_id=dict(type="str"),
    )

    module = AnsibleModule(
        argument_spec=argument_spec,
        required_one_of=[("import_id", "mac_address")],
        required_by={"mac_address": ("machine",)},
        supports_check_mode=True,
    )

    p = module.params

    error = _check_params(p)
    if error:
        module.fail_json(msg=error)
        return

    try:
        from maas_netbridge.client.errors import MaasError
        from maas_netbridge.config import MaasConfig
        from maas_netbridge.model.bridge import BridgeState
        from maas_netbridge.resource import BridgeInterfaceResource
        from maas_netbridge.utils.render import render_plan, render_state
    except ImportError as exc:
        module.fail_json(msg=f"maas_netbridge is not installed: {exc}")
        return

    config = MaasConfig(
        api_url=p["api_url"],
        api_key=p["api_key"],
        api_version=p["api_version"],
        timeout_s=p["timeout"],
        verify_tls=p["verify_tls"],
    )

    try:
        with config.open_session() as session:
            resource = BridgeInterfaceResource(session)

            if p["import_id"]:
                state = resource.import_state(p["import_id"])
                result = dict(changed=False, bridge=render_state(state), plan={})
            else:
                desired = _build_desired_config(p)
                plan = resource.plan(desired)
                bridge: dict = {}
                if p["state"] == "absent":
                    changed = not plan.create
                    if changed and not module.check_mode:
                        resource.delete(
                            BridgeState(id=str(plan.interface_id), machine=desired.machine)
                        )
                else:
                    changed = plan.changed
                    if changed and not module.check_mode:
                        bridge = render_state(resource.create(desired))
                    elif not plan.create:
                        current = BridgeState(
                            id=str(plan.interface_id),
                            machine=desired.machine,
                            mac_address=desired.mac_address,
                        )
                        bridge = render_state(resource.read(current))
                result = dict(changed=changed, bridge=bridge, plan=render_plan(plan))
    except (MaasError, ValueError) as exc:
        module.fail_json(msg=str(exc))
        return

    module.exit_json(**result)


def main() -> None:
    run_module()


if __name__ == "__main__":
    main()
