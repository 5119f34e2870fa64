"""Machine lookup operations."""

from __future__ import annotations

import logging

from maas_netbridge.client.errors import MachineNotFoundError
from maas_netbridge.client.session import MaasSession
from maas_netbridge.model.machine import Machine
from maas_netbridge.parser.machine import parse_machines
from maas_netbridge.vendor.maas.endpoints import MACHINES

logger = logging.getLogger(__name__)


def list_machines(session: MaasSession) -> list[Machine]:
    """Return every machine visible to the API key."""
    return parse_machines(session.get(MACHINES))


def resolve_machine(session: MaasSession, identifier: str) -> Machine:
    """Find the machine whose system ID, hostname or FQDN equals *identifier*.

    Args:
        session: Active session.
        identifier: System ID, hostname or FQDN.

    Returns:
        The first matching :class:`Machine`.

    Raises:
        MachineNotFoundError: If no machine matches.
    """
    for machine in list_machines(session):
        if machine.matches(identifier):
            logger.debug("Resolved machine %r to %s", identifier, machine.system_id)
            return machine
    raise MachineNotFoundError(identifier)
