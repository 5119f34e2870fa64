"""Parsing of stored interface IDs and ``MACHINE:NETWORK_INTERFACE`` import IDs."""

from __future__ import annotations

from maas_netbridge.client.errors import ImportFormatError, MalformedIdentifierError

_IMPORT_SEPARATOR: str = ":"


def parse_interface_id(value: str) -> int:
    """Return the numeric interface ID stored as the decimal string *value*.

    Raises:
        MalformedIdentifierError: If *value* is not an ASCII decimal integer.
    """
    text = value.strip() if isinstance(value, str) else ""
    if not (text.isascii() and text.isdecimal()):
        raise MalformedIdentifierError(str(value))
    return int(text)


def parse_import_id(value: str) -> tuple[str, str]:
    """Split an import ID into ``(machine, interface_identifier)``.

    Only the first colon separates the two parts, so MAC addresses survive:
    ``"machine123:AA:BB:CC:DD:EE:FF"`` gives
    ``("machine123", "AA:BB:CC:DD:EE:FF")``.

    Raises:
        ImportFormatError: If there is no separator or either part is empty.
    """
    machine, sep, identifier = value.partition(_IMPORT_SEPARATOR)
    if not sep or not machine or not identifier:
        raise ImportFormatError(value)
    return machine, identifier
