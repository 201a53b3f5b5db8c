"""
Shared test fixtures.
All tests run offline: facades get an AsyncMock fetcher, the real
Fetcher talks to a local aiohttp test server.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest

from opensea_api.application.offers import OffersAPI
from opensea_api.application.search import SearchAPI
from opensea_api.application.tokens import TokensAPI
from opensea_api.domain import Chain

WETH = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"


@pytest.fixture
def fetcher():
    mock = MagicMock()
    mock.get = AsyncMock()
    mock.post = AsyncMock()
    return mock


@pytest.fixture
def offers_api(fetcher):
    return OffersAPI(fetcher, Chain.MAINNET)


@pytest.fixture
def search_api(fetcher):
    return SearchAPI(fetcher)


@pytest.fixture
def tokens_api(fetcher):
    return TokensAPI(fetcher)


@pytest.fixture
def token_data():
    return {
        "address": WETH,
        "chain": "ethereum",
        "name": "Wrapped Ether",
        "symbol": "WETH",
        "decimals": 18,
        "image_url": "https://example.com/weth.png",
        "opensea_url": f"https://opensea.io/tokens/ethereum/{WETH}",
    }


@pytest.fixture
def make_offer():
    def _make(order_hash="0xabc123", slug="bored-ape-yacht-club", **criteria):
        return {
            "order_hash": order_hash,
            "chain": "ethereum",
            "protocol_data": {"parameters": {"offerer": "0xoff"}, "signature": "0xsig"},
            "protocol_address": "0x0000000000000068F116a894984e2DB1123eB395",
            "price": {"currency": "WETH", "decimals": 18, "value": "1500000000000000000"},
            "criteria": {"collection": {"slug": slug}, **criteria},
        }
    return _make
