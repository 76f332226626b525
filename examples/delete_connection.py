#!/usr/bin/env python3
"""Delete one or more Layer-2 connections.

Usage::

    export ECX_BASE_URL="https://api.equinix.com"
    export ECX_TOKEN="your-access-token"
    python examples/delete_connection.py <uuid> [<uuid> ...]

Each identifier is deleted with its own request; the script stops at the
first failure.
"""

from __future__ import annotations

import logging
import sys


def main() -> None:
    if len(sys.argv) < 2:
        print(f"usage: {sys.argv[0]} <uuid> [<uuid> ...]", file=sys.stderr)
        sys.exit(1)
    logging.basicConfig(level=logging.INFO)

    from ecx_client.client.errors import EcxError
    from ecx_client.client.l2 import EcxClient
    from ecx_client.client.settings import EcxSettings

    try:
        with EcxClient.from_settings(EcxSettings.from_env()) as client:
            for uuid in sys.argv[1:]:
                client.delete_l2_connection(uuid)
                print(f"deleted {uuid}")
    except (EcxError, ValueError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
