"""
OpenSea API client: offers, search and tokens.
"""
from opensea_api.application.client import OpenSeaAPI
from opensea_api.application.offers import OffersAPI
from opensea_api.application.search import SearchAPI
from opensea_api.application.tokens import TokensAPI
from opensea_api.domain import (
    APIError,
    Chain,
    InvalidArgumentError,
    NumericTrait,
    OpenSeaError,
    Trait,
    TraitFilter,
)
from opensea_api.infrastructure.fetcher import Fetcher

__version__ = "0.3.0"

__all__ = [
    "OpenSeaAPI",
    "OffersAPI",
    "SearchAPI",
    "TokensAPI",
    "Fetcher",
    "Chain",
    "Trait",
    "NumericTrait",
    "TraitFilter",
    "OpenSeaError",
    "InvalidArgumentError",
    "APIError",
]
