"""Authenticated API session for a MAAS region controller."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

from oauthlib import oauth1

from maas_netbridge.client.errors import MaasConfigError, MaasParseError
from maas_netbridge.client.http import FormData, MaasHTTP

logger = logging.getLogger(__name__)

DEFAULT_API_VERSION: str = "2.0"


@dataclass(frozen=True)
class MaasCredentials:
    """Immutable OAuth1 token triple taken from a MAAS API key.

    Args:
        consumer_key: Consumer key (first API key segment).
        token_key: Resource owner key (second segment).
        token_secret: Resource owner secret (third segment).
    """

    consumer_key: str
    token_key: str
    token_secret: str

    @classmethod
    def from_api_key(cls, api_key: str) -> MaasCredentials:
        """Split a ``consumer:token:secret`` API key.

        Raises:
            MaasConfigError: If the key does not have exactly three
                non-empty colon-separated segments.
        """
        parts = api_key.strip().split(":")
        if len(parts) != 3 or not all(parts):
            raise MaasConfigError(
                "invalid MAAS API key, expected CONSUMER_KEY:TOKEN_KEY:TOKEN_SECRET"
            )
        return cls(consumer_key=parts[0], token_key=parts[1], token_secret=parts[2])

    def signer(self) -> oauth1.Client:
        """Return an OAuth1 PLAINTEXT signer for these credentials."""
        return oauth1.Client(
            self.consumer_key,
            resource_owner_key=self.token_key,
            resource_owner_secret=self.token_secret,
            signature_method=oauth1.SIGNATURE_PLAINTEXT,
        )


class MaasSession:
    """Manages a persistent, signed HTTP session to a MAAS region controller.

    Wraps :class:`.MaasHTTP` and adds:
    - The versioned API prefix (``/api/2.0/``) on every path.
    - ``?op=<name>`` injection for named operations.
    - JSON decoding of every response body.

    There is no login step: every request carries its own OAuth1 signature.

    Args:
        base_url: Region controller URL, e.g. ``http://maas.example:5240/MAAS``.
        credentials: OAuth1 token triple.
        api_version: REST API version segment (default ``"2.0"``).
        timeout_s: Request timeout in seconds (default 30).
        verify_tls: Whether to verify TLS certificates (default True).
    """

    def __init__(
        self,
        base_url: str,
        credentials: MaasCredentials,
        api_version: str = DEFAULT_API_VERSION,
        timeout_s: float = 30.0,
        verify_tls: bool = True,
    ) -> None:
        self._http: MaasHTTP = MaasHTTP(
            base_url=base_url,
            oauth=credentials.signer(),
            timeout_s=timeout_s,
            verify_tls=verify_tls,
        )
        self._prefix: str = f"/api/{api_version}/"

    # ------------------------------------------------------------------
    # Public request methods
    # ------------------------------------------------------------------

    def get(self, path: str, params: dict[str, str] | None = None) -> Any:
        """Perform a signed GET and return the decoded JSON body.

        Args:
            path: API path relative to the versioned prefix, e.g. ``"machines/"``.
            params: Optional query parameters.
        """
        resp = self._http.get(self._url(path), params=params)
        return self._parse_json(resp.text, path)

    def post(
        self,
        path: str,
        data: FormData | None = None,
        op: str | None = None,
    ) -> Any:
        """Perform a signed POST and return the decoded JSON body.

        Args:
            path: API path relative to the versioned prefix.
            data: Form fields.
            op: Named operation, sent as the ``op`` query parameter.
        """
        params = {"op": op} if op else None
        logger.debug("POST %s op=%s data=%r", path, op, data)
        resp = self._http.post_form(self._url(path), data=data, params=params)
        return self._parse_json(resp.text, path)

    def put(self, path: str, data: FormData | None = None) -> Any:
        """Perform a signed PUT and return the decoded JSON body."""
        logger.debug("PUT %s data=%r", path, data)
        resp = self._http.put_form(self._url(path), data=data)
        return self._parse_json(resp.text, path)

    def delete(self, path: str) -> None:
        """Perform a signed DELETE.  MAAS answers 204 with an empty body."""
        logger.debug("DELETE %s", path)
        self._http.delete(self._url(path))

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._http.close()

    def __enter__(self) -> MaasSession:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def base_url(self) -> str:
        """Normalised region controller URL."""
        return self._http.base_url

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _url(self, path: str) -> str:
        return self._prefix + path.lstrip("/")

    @staticmethod
    def _parse_json(text: str, endpoint: str) -> Any:
        """Parse *text* as JSON, raising :exc:`.MaasParseError` on failure."""
        try:
            return json.loads(text)
        except (json.JSONDecodeError, ValueError) as exc:
            raise MaasParseError(
                f"Non-JSON response from {endpoint!r}: {text[:200]!r}"
            ) from exc
