"""
Application Layer: Search API
"""
from typing import Any, Mapping, Union

from opensea_api.application.ports import IFetcher
from opensea_api.application.schemas import SearchArgs, SearchResponse, to_query
from opensea_api.infrastructure.api_paths import get_search_path


class SearchAPI:
    """Search across collections, tokens, NFTs and accounts"""

    def __init__(self, fetcher: IFetcher) -> None:
        self.fetcher = fetcher

    async def search(self, args: Union[SearchArgs, Mapping[str, Any]]) -> SearchResponse:
        data = await self.fetcher.get(get_search_path(), to_query(args))
        return SearchResponse.model_validate(data)
