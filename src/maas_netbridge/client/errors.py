"""Custom exceptions for the maas-netbridge client and reconciler."""

from __future__ import annotations

from dataclasses import dataclass

# HTTP status codes given their own exception types.
HTTP_UNAUTHORIZED: int = 401
HTTP_FORBIDDEN: int = 403
HTTP_NOT_FOUND: int = 404


class MaasError(Exception):
    """Base exception for all maas-netbridge errors."""


class MaasConfigError(MaasError):
    """Raised when connection settings are missing or malformed."""


class MaasRequestError(MaasError):
    """Raised when a network-level error occurs (connection refused, timeout, etc.)."""

    def __init__(self, url: str, cause: Exception) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"Request to {url!r} failed: {cause}")


class MaasResponseError(MaasError):
    """Raised when the region controller returns a non-2xx HTTP status code."""

    def __init__(self, status_code: int, url: str, body: str = "") -> None:
        self.status_code = status_code
        self.url = url
        self.body = body
        message = f"HTTP {status_code} for {url!r}"
        if body:
            message += f": {body[:200]}"
        super().__init__(message)


class MaasAuthError(MaasResponseError):
    """Raised on HTTP 401/403: the API key was rejected or lacks permission."""


class MaasNotFoundError(MaasResponseError):
    """Raised on HTTP 404: the requested machine or interface does not exist."""


class MaasParseError(MaasError):
    """Raised when a response is not JSON or lacks expected fields."""


@dataclass
class MachineNotFoundError(MaasError):
    """Raised when no machine matches a system ID, hostname or FQDN."""

    identifier: str

    def __post_init__(self) -> None:
        super().__init__(f"machine ({self.identifier}) was not found")


@dataclass
class BridgeNotFoundError(MaasError):
    """Raised when a bridge interface that must exist cannot be found.

    Attributes:
        identifier: The MAC address, name or numeric ID that was looked up.
        machine: System ID of the machine that was searched.
    """

    identifier: str
    machine: str

    def __post_init__(self) -> None:
        super().__init__(
            f"bridge network interface ({self.identifier}) was not found "
            f"on machine ({self.machine})"
        )


@dataclass
class ParentNotFoundError(MaasError):
    """Raised when no non-bridge interface on the machine carries the MAC address."""

    mac_address: str
    machine: str

    def __post_init__(self) -> None:
        super().__init__(
            f"no parent interface with MAC address ({self.mac_address}) "
            f"on machine ({self.machine})"
        )


@dataclass
class MalformedIdentifierError(MaasError):
    """Raised when a stored resource identifier is not a decimal integer."""

    value: str

    def __post_init__(self) -> None:
        super().__init__(f"invalid network interface ID ({self.value!r}), expected an integer")


@dataclass
class ImportFormatError(MaasError):
    """Raised when an import identifier is not ``MACHINE:NETWORK_INTERFACE``."""

    value: str

    def __post_init__(self) -> None:
        super().__init__(
            f"unexpected format of ID ({self.value!r}), expected MACHINE:NETWORK_INTERFACE"
        )
