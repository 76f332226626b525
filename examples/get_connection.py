#!/usr/bin/env python3
"""Smoke-test script: fetch one Layer-2 connection from the ECX API.

Usage::

    export ECX_BASE_URL="https://api.equinix.com"
    export ECX_TOKEN="your-access-token"
    export ECX_VERIFY_TLS="true"   # optional, default true
    python examples/get_connection.py <connection-uuid>

Exit codes:
    0 - connection retrieved and printed successfully.
    1 - missing argument/environment variable or API error.
"""

from __future__ import annotations

import dataclasses
import json
import logging
import sys


def main() -> None:
    if len(sys.argv) != 2:
        print(f"usage: {sys.argv[0]} <connection-uuid>", file=sys.stderr)
        sys.exit(1)
    logging.basicConfig(level=logging.INFO)

    # Import here so import errors surface after argument check.
    from ecx_client.client.errors import EcxError
    from ecx_client.client.l2 import EcxClient
    from ecx_client.client.settings import EcxSettings

    try:
        settings = EcxSettings.from_env()
    except ValueError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)

    with EcxClient.from_settings(settings) as client:
        try:
            conn = client.get_l2_connection(sys.argv[1])
        except EcxError as exc:
            print(f"ERROR: {exc}", file=sys.stderr)
            sys.exit(1)

    print(json.dumps(dataclasses.asdict(conn), indent=2))


if __name__ == "__main__":
    main()
