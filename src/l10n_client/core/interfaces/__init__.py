"""Core interfaces/abstractions.

Why:
- Defines the contracts (Protocol) that concrete adapters implement.
- Executors depend on these abstractions, never on httpx directly.
"""

from l10n_client.core.interfaces.parser import JsonParser
from l10n_client.core.interfaces.transport import ApiTransport

__all__ = ["ApiTransport", "JsonParser"]
