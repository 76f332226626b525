"""Layer-2 connection operations against the ECX Fabric API."""

from __future__ import annotations

import dataclasses
import logging

import requests

from ecx_client.client.errors import EcxParseError
from ecx_client.client.http import EcxHTTP
from ecx_client.client.settings import EcxSettings
from ecx_client.model.connection import L2Connection
from ecx_client.utils.mapping import build_l2_request, connection_from_response
from ecx_client.vendor.ecx.api import (
    CreateL2ConnectionResponse,
    DeleteL2ConnectionResponse,
    L2ConnectionResponse,
)
from ecx_client.vendor.ecx.endpoints import L2_CONNECTIONS, l2_connection

logger = logging.getLogger(__name__)


class EcxClient:
    """Client for the ECX ``l2/connections`` resource.

    Every operation issues exactly one HTTP request; errors from
    :class:`~ecx_client.client.http.EcxHTTP` propagate unchanged and nothing
    is retried.

    Args:
        base_url: API base URL, e.g. ``https://api.equinix.com``.
        token: OAuth access token attached to every request.
        session: Pre-configured :class:`requests.Session` to send requests
            with.  It is not closed by :meth:`close`.
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
        self._http: EcxHTTP = EcxHTTP(
            base_url=base_url,
            token=token,
            session=session,
            timeout_s=timeout_s,
            verify_tls=verify_tls,
        )

    @classmethod
    def from_settings(
        cls,
        settings: EcxSettings,
        session: requests.Session | None = None,
    ) -> EcxClient:
        """Build a client from :class:`~ecx_client.client.settings.EcxSettings`."""
        return cls(
            base_url=settings.base_url,
            token=settings.token,
            session=session,
            timeout_s=settings.timeout_s,
            verify_tls=settings.verify_tls,
        )

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def get_l2_connection(self, uuid: str) -> L2Connection:
        """Fetch a connection by identifier.

        Args:
            uuid: Connection identifier.

        Returns:
            A new :class:`L2Connection` populated from the API response.

        Raises:
            EcxRequestError: On any transport-level failure.
            EcxResponseError: On a non-2xx HTTP status code.
            EcxParseError: If the response is not a JSON object or a field
                has the wrong type.
        """
        payload = self._http.get_json(l2_connection(uuid))
        return connection_from_response(L2ConnectionResponse.from_payload(payload))

    def create_l2_connection(self, connection: L2Connection) -> L2Connection:
        """Create a single (non-redundant) connection.

        Args:
            connection: Desired connection; server-assigned fields are ignored.

        Returns:
            A copy of *connection* with :attr:`~L2Connection.uuid` set to the
            identifier assigned by the API.

        Raises:
            EcxParseError: If the response carries no primary identifier.
        """
        request = build_l2_request(connection)
        payload = self._http.post_json(L2_CONNECTIONS, request.to_payload())
        resp = CreateL2ConnectionResponse.from_payload(payload)
        _require_id(resp.primary_connection_id, "primaryConnectionId")
        logger.info("Created L2 connection %s (%s)", resp.primary_connection_id, connection.name)
        return dataclasses.replace(connection, uuid=resp.primary_connection_id)

    def create_l2_redundant_connection(
        self,
        primary: L2Connection,
        secondary: L2Connection,
    ) -> L2Connection:
        """Create a redundant primary/secondary pair with a single request.

        Connection-wide attributes (profile, speed, seller data, ...) come
        from *primary*; only name, ports and VLAN tags are read from
        *secondary*.

        Returns:
            A copy of *primary* with :attr:`~L2Connection.uuid` set to the
            primary identifier and :attr:`~L2Connection.redundant_uuid` set
            to the secondary identifier.

        Raises:
            EcxParseError: If either identifier is missing from the response.
        """
        request = build_l2_request(primary, secondary)
        payload = self._http.post_json(L2_CONNECTIONS, request.to_payload())
        resp = CreateL2ConnectionResponse.from_payload(payload)
        _require_id(resp.primary_connection_id, "primaryConnectionId")
        _require_id(resp.secondary_connection_id, "secondaryConnectionId")
        logger.info(
            "Created redundant L2 connection pair %s / %s",
            resp.primary_connection_id,
            resp.secondary_connection_id,
        )
        return dataclasses.replace(
            primary,
            uuid=resp.primary_connection_id,
            redundant_uuid=resp.secondary_connection_id,
        )

    def delete_l2_connection(self, uuid: str) -> None:
        """Delete a connection by identifier.

        An empty response body is accepted as success.

        Raises:
            EcxRequestError: On any transport-level failure.
            EcxResponseError: On a non-2xx HTTP status code.
            EcxParseError: If a non-empty response is not a JSON object.
        """
        payload = self._http.delete(l2_connection(uuid))
        if payload is not None:
            resp = DeleteL2ConnectionResponse.from_payload(payload)
            logger.debug("Delete acknowledged: %s", resp.message)
        logger.info("Deleted L2 connection %s", uuid)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Close the underlying HTTP session (unless it was injected)."""
        self._http.close()

    def __enter__(self) -> EcxClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def _require_id(value: str | None, key: str) -> None:
    if not value:
        raise EcxParseError(f"Create response has no {key!r}")
