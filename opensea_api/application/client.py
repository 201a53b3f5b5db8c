"""
Application Layer: API Client
One transport shared by the offers, search and tokens facades.
"""
from typing import Any, Optional, Union

from opensea_api.application.offers import OffersAPI
from opensea_api.application.ports import IFetcher
from opensea_api.application.search import SearchAPI
from opensea_api.application.tokens import TokensAPI
from opensea_api.domain import Chain
from opensea_api.infrastructure.config import Settings, settings
from opensea_api.infrastructure.fetcher import Fetcher


class OpenSeaAPI:
    """
    Entry point bundling every facade.

    Usage:
        async with OpenSeaAPI.from_settings() as api:
            hits = await api.search.search({"query": "bored ape"})
    """

    def __init__(self, fetcher: IFetcher, chain: Union[Chain, str] = Chain.MAINNET) -> None:
        self.fetcher = fetcher
        self.chain = chain
        self.offers = OffersAPI(fetcher, chain)
        self.search = SearchAPI(fetcher)
        self.tokens = TokensAPI(fetcher)

    @classmethod
    def from_settings(cls, cfg: Optional[Settings] = None) -> "OpenSeaAPI":
        cfg = cfg or settings
        return cls(Fetcher.from_settings(cfg), cfg.chain)

    async def close(self) -> None:
        close = getattr(self.fetcher, "close", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> "OpenSeaAPI":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()
