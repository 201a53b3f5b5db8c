"""
Application Layer: Request Arguments and Response Models
"""
from typing import Annotated, Any, Dict, List, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from opensea_api.domain import Chain

ProtocolData = Dict[str, Any]


class APIModel(BaseModel):
    """Response model. Unknown server fields are kept."""
    model_config = ConfigDict(extra="allow")


class QueryArgs(BaseModel):
    """
    Typed request arguments. Only fields the caller set reach the query string.
    Filtering and required-field checks are left to the server.
    """
    model_config = ConfigDict(extra="allow")

    def to_query(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_unset=True)


def to_query(args: Union[QueryArgs, Mapping[str, Any]]) -> Dict[str, Any]:
    """Serializes a typed args model, forwards a plain mapping unchanged."""
    if isinstance(args, QueryArgs):
        return args.to_query()
    return dict(args)


# --- Offers ---

class Price(APIModel):
    currency: str
    decimals: int
    value: str


class Criteria(APIModel):
    collection: Dict[str, Any]
    contract: Optional[Dict[str, Any]] = None
    trait: Optional[Dict[str, Any]] = None
    traits: Optional[List[Dict[str, Any]]] = None
    numeric_traits: Optional[List[Dict[str, Any]]] = None
    encoded_token_ids: Optional[str] = None


class Offer(APIModel):
    order_hash: str
    chain: str
    protocol_data: ProtocolData
    protocol_address: str
    price: Optional[Price] = None
    criteria: Optional[Criteria] = None
    status: Optional[str] = None
    remaining_quantity: Optional[int] = None


class CollectionOffer(Offer):
    criteria: Criteria


class GetOffersResponse(APIModel):
    offers: List[Offer] = Field(default_factory=list)
    next: Optional[str] = None


GetBestOfferResponse = Offer


class BuildOfferResponse(APIModel):
    """Unsigned order skeleton, signed outside of this client"""
    partialParameters: Dict[str, Any]
    criteria: Criteria


# --- Search ---

class SearchArgs(QueryArgs):
    query: str
    chains: Optional[List[Union[Chain, str]]] = None
    asset_types: Optional[List[str]] = None
    limit: Optional[int] = None


class CollectionSearchResult(APIModel):
    collection: str
    name: str
    image_url: Optional[str] = None
    is_disabled: bool = False
    is_nsfw: bool = False
    opensea_url: str


class TokenSearchResult(APIModel):
    address: str
    chain: str
    name: str
    symbol: str
    image_url: Optional[str] = None
    usd_price: Optional[str] = None
    decimals: int
    opensea_url: str


class NftSearchResult(APIModel):
    identifier: str
    collection: str
    contract: str
    name: Optional[str] = None
    image_url: Optional[str] = None
    opensea_url: str


class AccountSearchResult(APIModel):
    address: str
    username: Optional[str] = None
    profile_image_url: Optional[str] = None
    opensea_url: str


class CollectionHit(BaseModel):
    type: Literal["collection"]
    collection: CollectionSearchResult


class TokenHit(BaseModel):
    type: Literal["token"]
    token: TokenSearchResult


class NftHit(BaseModel):
    type: Literal["nft"]
    nft: NftSearchResult


class AccountHit(BaseModel):
    type: Literal["account"]
    account: AccountSearchResult


SearchResult = Annotated[
    Union[CollectionHit, TokenHit, NftHit, AccountHit],
    Field(discriminator="type"),
]


class SearchResponse(APIModel):
    results: List[SearchResult] = Field(default_factory=list)


# --- Tokens ---

class GetTokensArgs(QueryArgs):
    limit: Optional[int] = None
    next: Optional[str] = None


class GetSwapQuoteArgs(QueryArgs):
    token_in: str
    token_out: str
    amount: str
    chain: Union[Chain, str]
    taker_address: Optional[str] = None
    slippage: Optional[float] = None


class Token(APIModel):
    address: str
    chain: str
    name: str
    symbol: str
    decimals: int
    image_url: Optional[str] = None
    opensea_url: Optional[str] = None
    usd_price: Optional[str] = None


class TokenListResponse(APIModel):
    tokens: List[Token] = Field(default_factory=list)
    next: Optional[str] = None


class GetTrendingTokensResponse(TokenListResponse):
    pass


class GetTopTokensResponse(TokenListResponse):
    pass


class GetSwapQuoteResponse(APIModel):
    """Price/route estimate. Shape is owned by the server."""
    price: Optional[str] = None
    route: Optional[Any] = None


GetTokenResponse = Token
