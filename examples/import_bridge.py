#!/usr/bin/env python3
"""Example: read back an existing bridge by ``MACHINE:NETWORK_INTERFACE``.

NETWORK_INTERFACE may be the bridge's MAC address, name or numeric ID.

Usage:

    MAAS_API_URL=... MAAS_API_KEY=... python examples/import_bridge.py node01:br0
"""

from __future__ import annotations

import sys

from maas_netbridge.config import MaasConfig
from maas_netbridge.resource import BridgeInterfaceResource
from maas_netbridge.utils.render import render_state

if len(sys.argv) != 2:
    print("usage: import_bridge.py MACHINE:NETWORK_INTERFACE", file=sys.stderr)
    sys.exit(2)

try:
    with MaasConfig.from_env().open_session() as session:
        state = BridgeInterfaceResource(session).import_state(sys.argv[1])
except Exception as exc:  # noqa: BLE001
    print(f"ERROR: {exc}", file=sys.stderr)
    sys.exit(1)

for key, value in render_state(state).items():
    print(f"{key:<12}: {value}")
