"""Low-level HTTP client wrapper for the MAAS REST API."""

from __future__ import annotations

import importlib.metadata
import logging

import requests
from oauthlib import oauth1

from maas_netbridge.client.errors import (
    HTTP_FORBIDDEN,
    HTTP_NOT_FOUND,
    HTTP_UNAUTHORIZED,
    MaasAuthError,
    MaasNotFoundError,
    MaasRequestError,
    MaasResponseError,
)

logger = logging.getLogger(__name__)

try:
    _VERSION: str = importlib.metadata.version("maas-netbridge")
except importlib.metadata.PackageNotFoundError:
    _VERSION = "0.0.0"

_USER_AGENT: str = f"maas-netbridge/{_VERSION}"

FormData = dict[str, str] | list[tuple[str, str]]


def _normalise_base_url(url: str) -> str:
    """Ensure the URL has a scheme and no trailing slash.

    A bare host gets the region controller's default ``/MAAS`` mount point.
    """
    url = url.rstrip("/")
    if not url.startswith(("http://", "https://")):
        url = "http://" + url
        if url.count("/") == 2:
            url += "/MAAS"
    return url


class MaasHTTP:
    """Low-level HTTP wrapper around :class:`requests.Session`.

    Signs every request with OAuth1 PLAINTEXT, sets a default ``User-Agent``
    header, applies the timeout and TLS verification settings, and maps
    transport/HTTP errors to :mod:`.errors` types.

    Args:
        base_url: Region controller URL, e.g. ``http://maas.example:5240/MAAS``.
        oauth: Pre-built signer, or ``None`` for anonymous requests.
        timeout_s: Request timeout in seconds (default 30).
        verify_tls: Whether to verify TLS certificates (default True).
    """

    def __init__(
        self,
        base_url: str,
        oauth: oauth1.Client | None = None,
        timeout_s: float = 30.0,
        verify_tls: bool = True,
    ) -> None:
        self.base_url: str = _normalise_base_url(base_url)
        self.timeout_s: float = timeout_s
        self.verify_tls: bool = verify_tls
        self._oauth: oauth1.Client | None = oauth
        self._session: requests.Session = requests.Session()
        self._session.headers.update(
            {"User-Agent": _USER_AGENT, "Accept": "application/json"}
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def request(
        self,
        method: str,
        path: str,
        params: dict[str, str] | None = None,
        data: FormData | None = None,
    ) -> requests.Response:
        """Send a signed HTTP request to *path* and return the response.

        Args:
            method: HTTP verb (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: URL path relative to :attr:`base_url`, with leading slash.
            params: Optional query-string parameters.
            data: Optional form fields.  A ``list[tuple[str, str]]`` allows
                repeated keys.

        Returns:
            The :class:`requests.Response`.

        Raises:
            MaasRequestError: On any transport-level failure.
            MaasAuthError: On HTTP 401 or 403.
            MaasNotFoundError: On HTTP 404.
            MaasResponseError: On any other non-2xx HTTP status code.
        """
        url = self.base_url + path
        try:
            resp = self._session.request(
                method,
                url,
                params=params,
                data=data,
                headers=self._sign(url),
                timeout=self.timeout_s,
                verify=self.verify_tls,
            )
        except requests.exceptions.RequestException as exc:
            raise MaasRequestError(url, exc) from exc
        logger.debug("%s %s -> %d", method, url, resp.status_code)
        self._raise_for_status(resp)
        return resp

    def get(self, path: str, params: dict[str, str] | None = None) -> requests.Response:
        """Send an HTTP GET to *path*."""
        return self.request("GET", path, params=params)

    def post_form(
        self,
        path: str,
        data: FormData | None = None,
        params: dict[str, str] | None = None,
    ) -> requests.Response:
        """Send an HTTP POST with form-encoded *data* to *path*."""
        return self.request("POST", path, params=params, data=data)

    def put_form(self, path: str, data: FormData | None = None) -> requests.Response:
        """Send an HTTP PUT with form-encoded *data* to *path*."""
        return self.request("PUT", path, data=data)

    def delete(self, path: str) -> requests.Response:
        """Send an HTTP DELETE to *path*."""
        return self.request("DELETE", path)

    def close(self) -> None:
        """Close the underlying :class:`requests.Session`."""
        self._session.close()

    def __enter__(self) -> MaasHTTP:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _sign(self, url: str) -> dict[str, str]:
        if self._oauth is None:
            return {}
        _, headers, _ = self._oauth.sign(url)
        return dict(headers)

    @staticmethod
    def _raise_for_status(resp: requests.Response) -> None:
        if resp.ok:
            return
        if resp.status_code in (HTTP_UNAUTHORIZED, HTTP_FORBIDDEN):
            raise MaasAuthError(resp.status_code, resp.url, resp.text)
        if resp.status_code == HTTP_NOT_FOUND:
            raise MaasNotFoundError(resp.status_code, resp.url, resp.text)
        raise MaasResponseError(resp.status_code, resp.url, resp.text)
