"""Typed model for Layer-2 connections."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class L2Connection:
    """A point-to-point Layer-2 connection as seen by library callers.

    No field is validated here; the API rejects invalid combinations.

    Attributes:
        uuid: Connection identifier assigned by the API.
        name: Connection name.
        profile_uuid: Seller service profile identifier.
        speed: Bandwidth value, interpreted with :attr:`speed_unit`.
        speed_unit: Bandwidth unit (``"MB"`` or ``"GB"``).
        status: Provisioning status reported by the API (e.g. ``"PROVISIONED"``).
        notifications: E-mail addresses notified about connection events.
        purchase_order_number: Customer purchase order reference.
        port_uuid: Buyer-side port identifier.
        vlan_stag: Buyer-side outer VLAN tag.
        vlan_ctag: Buyer-side inner VLAN tag.
        named_tag: Named tag used instead of VLAN tags on some profiles
            (e.g. ``"Private"``, ``"Microsoft"``).
        zside_port_uuid: Seller-side port identifier.
        zside_vlan_stag: Seller-side outer VLAN tag.
        zside_vlan_ctag: Seller-side inner VLAN tag.
        seller_region: Seller region code (e.g. ``"EMEA"``).
        seller_metro_code: Seller metro code (e.g. ``"AM"``).
        authorization_key: Seller authorization key.
        redundant_uuid: Identifier of the secondary connection; only set on
            connections that are part of a redundant pair.
    """

    uuid: str | None = None
    name: str | None = None
    profile_uuid: str | None = None
    speed: int | None = None
    speed_unit: str | None = None
    status: str | None = None
    notifications: list[str] = field(default_factory=list)
    purchase_order_number: str | None = None
    port_uuid: str | None = None
    vlan_stag: int | None = None
    vlan_ctag: int | None = None
    named_tag: str | None = None
    zside_port_uuid: str | None = None
    zside_vlan_stag: int | None = None
    zside_vlan_ctag: int | None = None
    seller_region: str | None = None
    seller_metro_code: str | None = None
    authorization_key: str | None = None
    redundant_uuid: str | None = None
