"""
Infrastructure: API Path Builders
"""
from typing import Union

from opensea_api.domain import Chain, OrderProtocol, OrderSide

API_V2 = "/api/v2"


def get_orders_api_path(
    chain: Union[Chain, str],
    protocol: Union[OrderProtocol, str],
    side: OrderSide,
) -> str:
    side_path = "offers" if side == OrderSide.OFFER else "listings"
    return f"/v2/orders/{_value(chain)}/{_value(protocol)}/{side_path}"


def get_all_offers_api_path(collection_slug: str) -> str:
    return f"{API_V2}/offers/collection/{collection_slug}/all"


def get_trait_offers_path(collection_slug: str) -> str:
    return f"{API_V2}/offers/collection/{collection_slug}"


def get_best_offer_api_path(collection_slug: str, token_id: Union[str, int]) -> str:
    return f"{API_V2}/offers/collection/{collection_slug}/nfts/{token_id}/best"


def get_build_offer_path() -> str:
    return f"{API_V2}/offers/build"


def get_collection_offers_path(collection_slug: str) -> str:
    return f"{API_V2}/offers/collection/{collection_slug}"


def get_post_collection_offer_path() -> str:
    return f"{API_V2}/offers"


def get_search_path() -> str:
    return f"{API_V2}/search"


def get_trending_tokens_path() -> str:
    return f"{API_V2}/tokens/trending"


def get_top_tokens_path() -> str:
    return f"{API_V2}/tokens/top"


def get_swap_quote_path() -> str:
    return f"{API_V2}/swap/quote"


def get_token_path(chain: Union[Chain, str], address: str) -> str:
    return f"{API_V2}/chain/{_value(chain)}/token/{address}"


def _value(item: Union[Chain, OrderProtocol, str]) -> str:
    return item.value if isinstance(item, (Chain, OrderProtocol)) else item
