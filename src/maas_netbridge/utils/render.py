"""Renderers for bridge state and change plans."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any

from maas_netbridge.model.bridge import BridgeChangeSet, BridgeState


def render_state(state: BridgeState) -> dict[str, Any]:
    """Serialize *state* to a JSON-serializable dict."""
    return asdict(state)


def render_plan(plan: BridgeChangeSet) -> dict[str, Any]:
    """Serialize *plan* to a JSON-serializable dict.

    Returns:
        A dict with keys:

        - ``"create"`` — whether a new bridge would be created.
        - ``"interface_id"`` — ID of the existing bridge, or ``None``.
        - ``"total_changes"`` — number of differing attributes.
        - ``"changes"`` — list of ``{"field", "current", "desired"}`` dicts,
          sorted by field name.
    """
    return {
        "create": plan.create,
        "interface_id": plan.interface_id,
        "total_changes": len(plan.changes),
        "changes": [
            {"field": key, "current": current, "desired": desired}
            for key, (current, desired) in sorted(plan.changes.items())
        ],
    }
