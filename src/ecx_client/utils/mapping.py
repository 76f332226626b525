"""Translation between the domain model and the ECX wire models.

The API flattens a redundant pair into one request whose keys carry a
``primary``/``secondary`` prefix, while a single connection is read back with
unprefixed keys.  All conversions happen here so that wire models never
cross the :class:`~ecx_client.client.l2.EcxClient` boundary.
"""

from __future__ import annotations

from ecx_client.model.connection import L2Connection
from ecx_client.vendor.ecx.api import L2ConnectionRequest, L2ConnectionResponse


def build_l2_request(
    primary: L2Connection,
    secondary: L2Connection | None = None,
) -> L2ConnectionRequest:
    """Build the creation request for *primary* and an optional *secondary*.

    Connection-wide attributes (profile, speed, notifications, seller data,
    ...) are always taken from *primary*.  From *secondary* only its name,
    port and VLAN tags are used.

    Args:
        primary: The primary (or only) connection.
        secondary: The secondary connection of a redundant pair.

    Returns:
        A :class:`L2ConnectionRequest` ready to be serialized.
    """
    request = L2ConnectionRequest(
        primary_name=primary.name,
        profile_uuid=primary.profile_uuid,
        speed=primary.speed,
        speed_unit=primary.speed_unit,
        notifications=list(primary.notifications) or None,
        purchase_order_number=primary.purchase_order_number,
        primary_port_uuid=primary.port_uuid,
        primary_vlan_stag=primary.vlan_stag,
        primary_vlan_ctag=primary.vlan_ctag,
        named_tag=primary.named_tag,
        primary_zside_port_uuid=primary.zside_port_uuid,
        primary_zside_vlan_stag=primary.zside_vlan_stag,
        primary_zside_vlan_ctag=primary.zside_vlan_ctag,
        seller_region=primary.seller_region,
        seller_metro_code=primary.seller_metro_code,
        authorization_key=primary.authorization_key,
    )
    if secondary is not None:
        request.secondary_name = secondary.name
        request.secondary_port_uuid = secondary.port_uuid
        request.secondary_vlan_stag = secondary.vlan_stag
        request.secondary_vlan_ctag = secondary.vlan_ctag
        request.secondary_zside_port_uuid = secondary.zside_port_uuid
        request.secondary_zside_vlan_stag = secondary.zside_vlan_stag
        request.secondary_zside_vlan_ctag = secondary.zside_vlan_ctag
    return request


def connection_from_response(resp: L2ConnectionResponse) -> L2Connection:
    """Convert a connection read from the API into a new :class:`L2Connection`."""
    return L2Connection(
        uuid=resp.uuid,
        name=resp.name,
        profile_uuid=resp.seller_service_uuid,
        speed=resp.speed,
        speed_unit=resp.speed_unit,
        status=resp.status,
        notifications=list(resp.notifications),
        purchase_order_number=resp.purchase_order_number,
        port_uuid=resp.port_uuid,
        vlan_stag=resp.vlan_stag,
        vlan_ctag=resp.vlan_ctag,
        named_tag=resp.named_tag,
        zside_port_uuid=resp.zside_port_uuid,
        zside_vlan_stag=resp.zside_vlan_stag,
        zside_vlan_ctag=resp.zside_vlan_ctag,
        seller_region=resp.seller_region,
        seller_metro_code=resp.seller_metro_code,
        authorization_key=resp.authorization_key,
        redundant_uuid=resp.redundant_uuid,
    )
