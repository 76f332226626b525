#!/usr/bin/env python3
"""Create a redundant Layer-2 connection pair.

Reads the API settings from ``ECX_*`` environment variables (see
``get_connection.py``) and the connection details from ``CONN_*`` variables.

Usage::

    export CONN_PROFILE_UUID="69ee618d-be52-468d-bc99-00566f2dd2b9"
    export CONN_PRIMARY_PORT="febc9d80-11e0-4dc8-8eb8-c41b6b378df2"
    export CONN_SECONDARY_PORT="5e3c8eb2-7e5c-45d6-9dd2-9e6b5e4f1a2c"
    export CONN_METRO="SV"
    export CONN_NOTIFY="noc@example.com"
    python examples/create_redundant_connection.py my-conn 1234 1235
"""

from __future__ import annotations

import dataclasses
import json
import logging
import os
import sys


def _env(name: str, default: str | None = None) -> str:
    value = os.environ.get(name, default)
    if value is None:
        print(f"ERROR: required environment variable {name!r} is not set.", file=sys.stderr)
        sys.exit(1)
    return value


def main() -> None:
    if len(sys.argv) != 4:
        print(f"usage: {sys.argv[0]} <name> <primary-stag> <secondary-stag>", file=sys.stderr)
        sys.exit(1)
    name, primary_stag, secondary_stag = sys.argv[1], int(sys.argv[2]), int(sys.argv[3])
    logging.basicConfig(level=logging.DEBUG)

    from ecx_client.client.errors import EcxError
    from ecx_client.client.l2 import EcxClient
    from ecx_client.client.settings import EcxSettings
    from ecx_client.model.connection import L2Connection

    primary = L2Connection(
        name=f"{name}-pri",
        profile_uuid=_env("CONN_PROFILE_UUID"),
        speed=int(_env("CONN_SPEED", "50")),
        speed_unit=_env("CONN_SPEED_UNIT", "MB"),
        notifications=[_env("CONN_NOTIFY")],
        port_uuid=_env("CONN_PRIMARY_PORT"),
        vlan_stag=primary_stag,
        seller_metro_code=_env("CONN_METRO"),
        seller_region=os.environ.get("CONN_REGION"),
        authorization_key=os.environ.get("CONN_AUTH_KEY"),
    )
    secondary = L2Connection(
        name=f"{name}-sec",
        port_uuid=_env("CONN_SECONDARY_PORT"),
        vlan_stag=secondary_stag,
    )

    try:
        with EcxClient.from_settings(EcxSettings.from_env()) as client:
            conn = client.create_l2_redundant_connection(primary, secondary)
    except (EcxError, ValueError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)

    print(json.dumps(dataclasses.asdict(conn), indent=2))


if __name__ == "__main__":
    main()
