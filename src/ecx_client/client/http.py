"""Low-level HTTP client wrapper for the ECX Fabric REST API."""

from __future__ import annotations

import importlib.metadata
import json
import logging
from typing import Any

import requests

from ecx_client.client.errors import (
    EcxApiError,
    EcxParseError,
    EcxRequestError,
    EcxResponseError,
)

logger = logging.getLogger(__name__)

try:
    _VERSION: str = importlib.metadata.version("ecx-l2-client")
except importlib.metadata.PackageNotFoundError:
    _VERSION = "0.0.0"

_USER_AGENT: str = f"ecx-l2-client/{_VERSION}"

# Payload keys whose values are never written to the log.
_SECRET_KEYS: frozenset[str] = frozenset({"authorizationKey"})


def _normalise_base_url(url: str) -> str:
    """Ensure the URL has a scheme and no trailing slash."""
    url = url.rstrip("/")
    if not url.startswith(("http://", "https://")):
        url = "https://" + url
    return url


class EcxHTTP:
    """Low-level JSON wrapper around :class:`requests.Session`.

    Adds a default ``User-Agent``, JSON content negotiation headers and an
    optional bearer token, applies timeout and TLS verification, and maps
    transport, HTTP and decode errors to :mod:`.errors` types.

    Args:
        base_url: API base URL, e.g. ``https://api.equinix.com``.
        token: OAuth access token attached as ``Authorization: Bearer``.
        session: Pre-configured session to use.  When omitted a new one is
            created and owned (closed by :meth:`close`).
        timeout_s: Request timeout in seconds (default 30).
        verify_tls: Whether to verify TLS certificates (default True).
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        session: requests.Session | None = None,
        timeout_s: float = 30.0,
        verify_tls: bool = True,
    ) -> None:
        self.base_url: str = _normalise_base_url(base_url)
        self.timeout_s: float = timeout_s
        self.verify_tls: bool = verify_tls
        self._owns_session: bool = session is None
        self._session: requests.Session = session if session is not None else requests.Session()
        self._headers: dict[str, str] = {
            "User-Agent": _USER_AGENT,
            "Accept": "application/json",
        }
        if token:
            self._headers["Authorization"] = f"Bearer {token}"

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get_json(self, path: str) -> dict[str, Any]:
        """Send an HTTP GET to *path* and return the decoded JSON object.

        Args:
            path: URL path relative to :attr:`base_url`.

        Returns:
            The decoded response body.

        Raises:
            EcxRequestError: On any transport-level failure.
            EcxResponseError: On a non-2xx HTTP status code.
            EcxParseError: If the body is not a JSON object.
        """
        resp = self._request("GET", path)
        return self._parse_object(resp)

    def post_json(self, path: str, payload: dict[str, Any]) -> dict[str, Any]:
        """Send an HTTP POST with a JSON *payload* to *path*.

        Args:
            path: URL path relative to :attr:`base_url`.
            payload: JSON-serialisable request body.

        Returns:
            The decoded response body.

        Raises:
            EcxRequestError: On any transport-level failure.
            EcxResponseError: On a non-2xx HTTP status code.
            EcxParseError: If the body is not a JSON object.
        """
        resp = self._request("POST", path, payload=payload)
        return self._parse_object(resp)

    def delete(self, path: str) -> dict[str, Any] | None:
        """Send an HTTP DELETE to *path*.

        Returns:
            The decoded response body, or ``None`` if the API answered with
            an empty body.

        Raises:
            EcxRequestError: On any transport-level failure.
            EcxResponseError: On a non-2xx HTTP status code.
            EcxParseError: If a non-empty body is not a JSON object.
        """
        resp = self._request("DELETE", path)
        if not resp.content.strip():
            return None
        return self._parse_object(resp)

    def close(self) -> None:
        """Close the underlying :class:`requests.Session` if this object created it."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> EcxHTTP:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _request(
        self,
        method: str,
        path: str,
        payload: dict[str, Any] | None = None,
    ) -> requests.Response:
        url = self.base_url + path
        logger.debug("%s %s", method, url)
        if payload is not None:
            logger.debug("Request payload: %s", _redact(payload))
        try:
            resp = self._session.request(
                method,
                url,
                json=payload,
                headers=self._headers,
                timeout=self.timeout_s,
                verify=self.verify_tls,
            )
        except requests.exceptions.RequestException as exc:
            raise EcxRequestError(url, exc) from exc
        self._raise_for_status(resp)
        return resp

    @staticmethod
    def _raise_for_status(resp: requests.Response) -> None:
        if not resp.ok:
            raise EcxResponseError(resp.status_code, resp.url, _parse_api_errors(resp.text))

    @staticmethod
    def _parse_object(resp: requests.Response) -> dict[str, Any]:
        """Parse the body of *resp* as a JSON object, raising :exc:`.EcxParseError` on failure."""
        try:
            result = json.loads(resp.text)
        except (json.JSONDecodeError, ValueError) as exc:
            raise EcxParseError(
                f"Non-JSON response from {resp.url!r}: {resp.text[:200]!r}"
            ) from exc
        if not isinstance(result, dict):
            raise EcxParseError(
                f"Expected a JSON object from {resp.url!r}, got {type(result).__name__}"
            )
        return result


def _parse_api_errors(text: str) -> list[EcxApiError]:
    """Decode the API's error list from an error response body.

    The API answers failures with ``[{"errorCode": ..., "errorMessage": ...,
    "property": ...}, ...]``; some gateways wrap a single entry in an object.
    Bodies that are not in either shape yield an empty list.
    """
    try:
        body = json.loads(text)
    except (json.JSONDecodeError, ValueError):
        return []
    if isinstance(body, dict):
        body = [body]
    if not isinstance(body, list):
        return []
    errors: list[EcxApiError] = []
    for item in body:
        if not isinstance(item, dict) or not ("errorCode" in item or "errorMessage" in item):
            continue
        errors.append(
            EcxApiError(
                code=item.get("errorCode"),
                message=item.get("errorMessage"),
                property=item.get("property"),
            )
        )
    return errors


def _redact(payload: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of *payload* with secret values masked for logging."""
    return {k: "***" if k in _SECRET_KEYS else v for k, v in payload.items()}
