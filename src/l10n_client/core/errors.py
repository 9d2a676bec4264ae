"""Exception taxonomy for the client.

Every failure the library raises derives from `L10nClientError`, so callers can
catch one type and decide on their own retry/backoff policy.
"""

from __future__ import annotations

from typing import Any


class L10nClientError(Exception):
    """Base exception for all client errors."""

    def __init__(
        self,
        message: str,
        code: str = "CLIENT_ERROR",
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class TransportError(L10nClientError):
    """Network-level failure (timeout, connection refused, TLS, ...)."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message=message, code=kwargs.pop("code", "TRANSPORT_ERROR"), **kwargs)


class ApiStatusError(L10nClientError):
    """The API answered with an error status code."""

    def __init__(self, message: str, status_code: int, **kwargs: Any) -> None:
        super().__init__(
            message=message,
            code=kwargs.pop("code", "API_ERROR"),
            status_code=status_code,
            **kwargs,
        )


class ApiValidationError(ApiStatusError):
    """Request rejected with field-level validation errors."""

    def __init__(
        self,
        message: str,
        status_code: int,
        errors: dict[str, list[str]] | None = None,
        **kwargs: Any,
    ) -> None:
        self.errors = errors or {}
        super().__init__(
            message=message,
            status_code=status_code,
            code="VALIDATION_ERROR",
            details={"errors": self.errors},
            **kwargs,
        )


class UnexpectedStatusError(L10nClientError):
    """An executor received a status code other than the one the endpoint promises."""

    def __init__(self, message: str, status_code: int, expected: int, **kwargs: Any) -> None:
        super().__init__(
            message=message,
            code="UNEXPECTED_STATUS",
            status_code=status_code,
            details={"expected": expected, "actual": status_code},
            **kwargs,
        )


class DeserializationError(L10nClientError):
    """Response payload does not match the expected shape."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message=message, code=kwargs.pop("code", "DESERIALIZATION_ERROR"), **kwargs)
