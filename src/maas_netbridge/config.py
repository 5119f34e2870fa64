"""Connection settings for a MAAS region controller."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from maas_netbridge.client.errors import MaasConfigError
from maas_netbridge.client.session import DEFAULT_API_VERSION, MaasCredentials, MaasSession

logger = logging.getLogger(__name__)

_TRUE_VALUES: frozenset[str] = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES: frozenset[str] = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class MaasConfig:
    """Settings needed to open a :class:`MaasSession`.

    Attributes:
        api_url: Region controller URL, e.g. ``http://maas.example:5240/MAAS``.
        api_key: API key in ``consumer:token:secret`` form.
        api_version: REST API version (default ``"2.0"``).
        timeout_s: Request timeout in seconds.
        verify_tls: Whether to verify TLS certificates.
    """

    api_url: str
    api_key: str
    api_version: str = DEFAULT_API_VERSION
    timeout_s: float = 30.0
    verify_tls: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> MaasConfig:
        """Read settings from ``MAAS_*`` environment variables.

        ``MAAS_API_URL`` and ``MAAS_API_KEY`` are required; ``MAAS_API_VERSION``,
        ``MAAS_TIMEOUT`` and ``MAAS_VERIFY_TLS`` are optional.

        Raises:
            MaasConfigError: If a required variable is missing or a value
                cannot be parsed.
        """
        env = os.environ if environ is None else environ
        api_url = env.get("MAAS_API_URL", "").strip()
        api_key = env.get("MAAS_API_KEY", "").strip()
        missing = [
            name
            for name, value in (("MAAS_API_URL", api_url), ("MAAS_API_KEY", api_key))
            if not value
        ]
        if missing:
            raise MaasConfigError(f"missing required environment variable(s): {', '.join(missing)}")

        timeout_raw = env.get("MAAS_TIMEOUT", "30")
        try:
            timeout_s = float(timeout_raw)
        except ValueError as exc:
            raise MaasConfigError(f"MAAS_TIMEOUT must be a number, got {timeout_raw!r}") from exc

        return cls(
            api_url=api_url,
            api_key=api_key,
            api_version=env.get("MAAS_API_VERSION", DEFAULT_API_VERSION) or DEFAULT_API_VERSION,
            timeout_s=timeout_s,
            verify_tls=_parse_bool("MAAS_VERIFY_TLS", env.get("MAAS_VERIFY_TLS", "true")),
        )

    def open_session(self) -> MaasSession:
        """Build a signed :class:`MaasSession` from these settings.

        Raises:
            MaasConfigError: If :attr:`api_key` is malformed.
        """
        logger.debug("Opening MAAS session to %s (api %s)", self.api_url, self.api_version)
        return MaasSession(
            base_url=self.api_url,
            credentials=MaasCredentials.from_api_key(self.api_key),
            api_version=self.api_version,
            timeout_s=self.timeout_s,
            verify_tls=self.verify_tls,
        )


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise MaasConfigError(f"{name} must be a boolean, got {value!r}")
