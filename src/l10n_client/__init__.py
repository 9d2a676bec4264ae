"""Async client for the Crowdin localization-management REST API."""

from l10n_client.client import LocalizationClient
from l10n_client.core.config import AppSettings
from l10n_client.core.errors import (
    ApiStatusError,
    ApiValidationError,
    DeserializationError,
    L10nClientError,
    TransportError,
    UnexpectedStatusError,
)

__version__ = "0.1.0"

__all__ = [
    "ApiStatusError",
    "ApiValidationError",
    "AppSettings",
    "DeserializationError",
    "L10nClientError",
    "LocalizationClient",
    "TransportError",
    "UnexpectedStatusError",
]
