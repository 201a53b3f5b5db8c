"""
Application Layer: Ports (Interfaces)
Defines how the API facades expect to talk to the transport.
"""
from typing import Any, Mapping, Optional, Protocol


class IFetcher(Protocol):
    """Interface for authenticated JSON requests against the API"""

    async def get(self, path: str, query: Optional[Mapping[str, Any]] = None) -> Any:
        """GET ``path`` with ``query`` parameters, returns decoded JSON"""
        ...

    async def post(self, path: str, body: Optional[Any] = None) -> Any:
        """POST a JSON ``body`` to ``path``, returns decoded JSON or None"""
        ...
