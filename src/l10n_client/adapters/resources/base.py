"""Shared constructor for resource executors."""

from __future__ import annotations

from l10n_client.core.interfaces.parser import JsonParser
from l10n_client.core.interfaces.transport import ApiTransport


class ApiExecutor:
    """Holds the transport and the parser every executor method needs.

    The parser defaults to the one the transport carries, so tests can swap
    either independently.
    """

    def __init__(self, api_client: ApiTransport, json_parser: JsonParser | None = None) -> None:
        self._api_client = api_client
        self._json_parser = json_parser or api_client.json_parser
