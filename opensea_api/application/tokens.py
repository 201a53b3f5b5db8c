"""
Application Layer: Tokens API
Trending/top token lists, swap quotes and token details.
"""
from typing import Any, Dict, Mapping, Optional, Union

from opensea_api.application.ports import IFetcher
from opensea_api.application.schemas import (
    GetSwapQuoteArgs,
    GetSwapQuoteResponse,
    GetTokenResponse,
    GetTokensArgs,
    GetTopTokensResponse,
    GetTrendingTokensResponse,
    to_query,
)
from opensea_api.domain import Chain
from opensea_api.infrastructure.api_paths import (
    get_swap_quote_path,
    get_token_path,
    get_top_tokens_path,
    get_trending_tokens_path,
)

TokensArgs = Optional[Union[GetTokensArgs, Mapping[str, Any]]]


class TokensAPI:
    """Token-related API operations"""

    def __init__(self, fetcher: IFetcher) -> None:
        self.fetcher = fetcher

    async def get_trending_tokens(self, args: TokensArgs = None) -> GetTrendingTokensResponse:
        data = await self.fetcher.get(get_trending_tokens_path(), _tokens_query(args))
        return GetTrendingTokensResponse.model_validate(data)

    async def get_top_tokens(self, args: TokensArgs = None) -> GetTopTokensResponse:
        data = await self.fetcher.get(get_top_tokens_path(), _tokens_query(args))
        return GetTopTokensResponse.model_validate(data)

    async def get_swap_quote(
        self, args: Union[GetSwapQuoteArgs, Mapping[str, Any]]
    ) -> GetSwapQuoteResponse:
        """
        Gets a swap quote. The quote is an estimate, not a binding order.
        Missing fields and liquidity errors come back from the server as APIError.
        """
        data = await self.fetcher.get(get_swap_quote_path(), to_query(args))
        return GetSwapQuoteResponse.model_validate(data)

    async def get_token(self, chain: Union[Chain, str], address: str) -> GetTokenResponse:
        data = await self.fetcher.get(get_token_path(chain, address))
        return GetTokenResponse.model_validate(data)


def _tokens_query(args: TokensArgs) -> Optional[Dict[str, Any]]:
    # No args means no query at all, not an empty one
    if args is None:
        return None
    return to_query(args)
