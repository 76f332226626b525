"""Environment-driven client configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

_FALSE_VALUES: frozenset[str] = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class EcxSettings:
    """Immutable connection settings for the ECX API.

    Args:
        base_url: API base URL, e.g. ``https://api.equinix.com``.
        token: OAuth access token, or ``None`` for unauthenticated access
            (sandbox / test endpoints).
        timeout_s: Request timeout in seconds.
        verify_tls: Whether to verify TLS certificates.
    """

    base_url: str
    token: str | None = None
    timeout_s: float = 30.0
    verify_tls: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> EcxSettings:
        """Read settings from ``ECX_*`` environment variables.

        ``ECX_BASE_URL`` is required; ``ECX_TOKEN``, ``ECX_TIMEOUT`` and
        ``ECX_VERIFY_TLS`` are optional.

        Args:
            environ: Mapping to read from instead of :data:`os.environ`.

        Raises:
            ValueError: If ``ECX_BASE_URL`` is missing or ``ECX_TIMEOUT``
                is not a number.
        """
        env = os.environ if environ is None else environ
        base_url = env.get("ECX_BASE_URL", "").strip()
        if not base_url:
            raise ValueError("required environment variable 'ECX_BASE_URL' is not set")

        timeout_raw = env.get("ECX_TIMEOUT", "30")
        try:
            timeout_s = float(timeout_raw)
        except ValueError as exc:
            raise ValueError(f"ECX_TIMEOUT must be a number, got {timeout_raw!r}") from exc

        verify_tls = env.get("ECX_VERIFY_TLS", "true").strip().lower() not in _FALSE_VALUES
        return cls(
            base_url=base_url,
            token=env.get("ECX_TOKEN") or None,
            timeout_s=timeout_s,
            verify_tls=verify_tls,
        )
