#!/usr/bin/env python3
"""Example: create (or adopt) a bridge interface on a MAAS machine.

The bridge is built over the physical interface with ``MAC_ADDRESS``.  If a
bridge already exists on that MAC address it is adopted and its name, tags
and MTU are converged instead.

Usage (dry run, default):

    MAAS_API_URL=http://maas.example:5240/MAAS MAAS_API_KEY=... \
    MACHINE=node01 MAC_ADDRESS=52:54:00:12:34:56 python examples/create_bridge.py

Usage (live apply):

    APPLY=1 MAAS_API_URL=... MAAS_API_KEY=... MACHINE=... MAC_ADDRESS=... \
    python examples/create_bridge.py

Environment variables:
    MAAS_API_URL      Region controller URL (required).
    MAAS_API_KEY      API key, consumer:token:secret (required).
    MAAS_VERIFY_TLS   Set to "false" to skip TLS verification (default: true).
    MACHINE           System ID, hostname or FQDN (required).
    MAC_ADDRESS       MAC address of the physical interface (required).
    BRIDGE_NAME       Bridge name (default: assigned by MAAS).
    BRIDGE_MTU        Bridge MTU (default: effective MTU).
    BRIDGE_TAGS       Comma-separated tag names; unset keeps the current tags,
                      empty clears them.
    APPLY             Set to "1" to actually apply changes (default: dry-run).
"""

from __future__ import annotations

import logging
import os
import sys

from maas_netbridge.config import MaasConfig
from maas_netbridge.model.bridge import BridgeConfig
from maas_netbridge.resource import BridgeInterfaceResource
from maas_netbridge.utils.render import render_plan, render_state

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

# ---------------------------------------------------------------------------
# Read configuration from environment
# ---------------------------------------------------------------------------
machine = os.environ.get("MACHINE", "")
mac_address = os.environ.get("MAC_ADDRESS", "")
if not machine or not mac_address:
    print("ERROR: MACHINE and MAC_ADDRESS environment variables are required.", file=sys.stderr)
    sys.exit(1)

mtu_raw = os.environ.get("BRIDGE_MTU", "")
tags_raw = os.environ.get("BRIDGE_TAGS")
desired = BridgeConfig(
    machine=machine,
    mac_address=mac_address,
    name=os.environ.get("BRIDGE_NAME") or None,
    tags=tuple(t for t in tags_raw.split(",") if t) if tags_raw is not None else None,
    mtu=int(mtu_raw) if mtu_raw else None,
)
apply_changes = os.environ.get("APPLY", "0") == "1"

print(f"Target machine : {machine}")
print(f"Apply changes  : {apply_changes}")
print()

try:
    config = MaasConfig.from_env()
    with config.open_session() as session:
        resource = BridgeInterfaceResource(session)

        print("=== PLAN ===")
        plan = render_plan(resource.plan(desired))
        print(f"  Create  : {plan['create']}")
        print(f"  Bridge  : {plan['interface_id']}")
        for change in plan["changes"]:
            print(f"  {change['field']:<12}: {change['current']!r} -> {change['desired']!r}")
        print()

        if not apply_changes:
            print("Dry-run only -- set APPLY=1 to apply changes.")
            sys.exit(0)

        print("=== APPLYING ===")
        state = render_state(resource.create(desired))
        for key, value in state.items():
            print(f"  {key:<12}: {value}")
        print()
        print("Done.")

except Exception as exc:  # noqa: BLE001
    print(f"ERROR: {exc}", file=sys.stderr)
    sys.exit(1)
