"""Typed model for MAAS machines."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Machine:
    """A machine as returned by the ``machines/`` endpoint.

    Attributes:
        system_id: Canonical, stable MAAS identifier (e.g. ``"4y3h7n"``).
        hostname: Short hostname.
        fqdn: Fully-qualified domain name.
        status_name: Human-readable lifecycle status (e.g. ``"Ready"``).
    """

    system_id: str
    hostname: str = ""
    fqdn: str = ""
    status_name: str = ""

    def matches(self, identifier: str) -> bool:
        """Return ``True`` if *identifier* is this machine's system ID, hostname or FQDN."""
        return bool(identifier) and identifier in (self.system_id, self.hostname, self.fqdn)
