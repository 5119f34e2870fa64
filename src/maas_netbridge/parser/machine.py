"""Parser for MAAS machine JSON payloads."""

from __future__ import annotations

from typing import Any

from maas_netbridge.client.errors import MaasParseError
from maas_netbridge.model.machine import Machine


def parse_machine(payload: Any) -> Machine:
    """Convert one machine object into a :class:`Machine`.

    Raises:
        MaasParseError: If *payload* is not an object or has no ``system_id``.
    """
    if not isinstance(payload, dict) or not payload.get("system_id"):
        raise MaasParseError("Malformed machine payload: missing 'system_id'")
    return Machine(
        system_id=str(payload["system_id"]),
        hostname=str(payload.get("hostname") or ""),
        fqdn=str(payload.get("fqdn") or ""),
        status_name=str(payload.get("status_name") or ""),
    )


def parse_machines(payload: Any) -> list[Machine]:
    """Convert the ``machines/`` listing."""
    if not isinstance(payload, list):
        raise MaasParseError(f"Expected machine list, got {type(payload).__name__}")
    return [parse_machine(item) for item in payload]
