"""Custom exceptions for the ECX Fabric HTTP client."""

from __future__ import annotations

from dataclasses import dataclass


class EcxError(Exception):
    """Base exception for all ecx-l2-client errors."""


class EcxRequestError(EcxError):
    """Raised when a network-level error occurs (connection refused, timeout, etc.)."""

    def __init__(self, url: str, cause: Exception) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"Request to {url!r} failed: {cause}")


@dataclass(frozen=True)
class EcxApiError:
    """One entry of the error list returned by the ECX API on failure.

    Attributes:
        code: Machine-readable error code (e.g. ``"IC-LAYER2-4021"``).
        message: Human-readable error message.
        property: Request property the error refers to, if any.
    """

    code: str | None = None
    message: str | None = None
    property: str | None = None

    def __str__(self) -> str:
        text = f"[{self.code}] {self.message}"
        if self.property:
            text += f" ({self.property})"
        return text


class EcxResponseError(EcxError):
    """Raised when the API returns a non-2xx HTTP status code.

    Attributes:
        status_code: HTTP status code.
        url: Requested URL.
        errors: Error entries decoded from the response body, if the body
            carried the API's JSON error list.
    """

    def __init__(
        self,
        status_code: int,
        url: str,
        errors: list[EcxApiError] | None = None,
    ) -> None:
        self.status_code = status_code
        self.url = url
        self.errors: list[EcxApiError] = errors or []
        message = f"HTTP {status_code} for {url!r}"
        if self.errors:
            message += ": " + "; ".join(str(e) for e in self.errors)
        super().__init__(message)


class EcxParseError(EcxError):
    """Raised when a response body is not the JSON document that was expected."""
