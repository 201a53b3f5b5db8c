"""Tests for SearchAPI - query forwarding and tagged result parsing."""

import pytest
from pydantic import ValidationError

from opensea_api.application.schemas import (
    AccountHit,
    CollectionHit,
    NftHit,
    SearchArgs,
    TokenHit,
)
from opensea_api.domain import APIError, Chain

COLLECTION = {
    "collection": "bored-ape-yacht-club",
    "name": "Bored Ape Yacht Club",
    "image_url": "https://example.com/bayc.png",
    "is_disabled": False,
    "is_nsfw": False,
    "opensea_url": "https://opensea.io/collection/bored-ape-yacht-club",
}

TOKEN = {
    "address": "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2",
    "chain": "ethereum",
    "name": "Wrapped Ether",
    "symbol": "WETH",
    "image_url": "https://example.com/weth.png",
    "usd_price": "3500.00",
    "decimals": 18,
    "opensea_url": "https://opensea.io/token/ethereum/0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2",
}

NFT = {
    "identifier": "1234",
    "collection": "bored-ape-yacht-club",
    "contract": "0xBC4CA0EdA7647A8aB7C2061c2E118A18a936f13D",
    "name": "Bored Ape #1234",
    "image_url": "https://example.com/ape1234.png",
    "opensea_url": "https://opensea.io/assets/ethereum/0xBC4CA0EdA7647A8aB7C2061c2E118A18a936f13D/1234",
}

ACCOUNT = {
    "address": "0x1234567890abcdef1234567890abcdef12345678",
    "username": "testuser",
    "profile_image_url": "https://example.com/avatar.png",
    "opensea_url": "https://opensea.io/testuser",
}


class TestSearchQuery:
    async def test_query_only(self, search_api, fetcher):
        fetcher.get.return_value = {"results": [{"type": "collection", "collection": COLLECTION}]}

        result = await search_api.search({"query": "bored ape"})

        fetcher.get.assert_awaited_once_with("/api/v2/search", {"query": "bored ape"})
        assert len(result.results) == 1
        assert result.results[0].type == "collection"
        assert result.results[0].collection.name == "Bored Ape Yacht Club"

    async def test_all_filters(self, search_api, fetcher):
        fetcher.get.return_value = {"results": []}

        await search_api.search({
            "query": "ape",
            "chains": ["ethereum"],
            "asset_types": ["collection", "nft", "token", "account"],
            "limit": 50,
        })

        fetcher.get.assert_awaited_once_with(
            "/api/v2/search",
            {
                "query": "ape",
                "chains": ["ethereum"],
                "asset_types": ["collection", "nft", "token", "account"],
                "limit": 50,
            },
        )

    async def test_accepts_args_model_and_chain_enum(self, search_api, fetcher):
        fetcher.get.return_value = {"results": []}

        await search_api.search(SearchArgs(query="test", chains=[Chain.MAINNET, "polygon"]))

        fetcher.get.assert_awaited_once_with(
            "/api/v2/search", {"query": "test", "chains": ["ethereum", "polygon"]}
        )

    async def test_explicit_none_is_kept(self, search_api, fetcher):
        fetcher.get.return_value = {"results": []}

        await search_api.search({"query": "test", "limit": None})

        fetcher.get.assert_awaited_once_with("/api/v2/search", {"query": "test", "limit": None})

    async def test_filters_forwarded_without_local_checks(self, search_api, fetcher):
        fetcher.get.return_value = {"results": []}

        await search_api.search({"query": "ape", "asset_types": ["nfts"], "cursor": "x"})

        fetcher.get.assert_awaited_once_with(
            "/api/v2/search", {"query": "ape", "asset_types": ["nfts"], "cursor": "x"}
        )

    async def test_extra_fields_on_args_model_forwarded(self, search_api, fetcher):
        fetcher.get.return_value = {"results": []}

        await search_api.search(SearchArgs(query="ape", cursor="x"))

        fetcher.get.assert_awaited_once_with("/api/v2/search", {"query": "ape", "cursor": "x"})


class TestSearchResults:
    async def test_mixed_result_types(self, search_api, fetcher):
        fetcher.get.return_value = {
            "results": [
                {"type": "collection", "collection": COLLECTION},
                {"type": "token", "token": TOKEN},
                {"type": "nft", "nft": NFT},
                {"type": "account", "account": ACCOUNT},
            ]
        }

        result = await search_api.search({"query": "test"})

        collection, token, nft, account = result.results
        assert isinstance(collection, CollectionHit)
        assert collection.collection.collection == "bored-ape-yacht-club"
        assert isinstance(token, TokenHit)
        assert token.token.symbol == "WETH"
        assert isinstance(nft, NftHit)
        assert nft.nft.identifier == "1234"
        assert isinstance(account, AccountHit)
        assert account.account.username == "testuser"

    async def test_variant_carries_only_its_payload(self, search_api, fetcher):
        fetcher.get.return_value = {"results": [{"type": "token", "token": TOKEN}]}

        result = await search_api.search({"query": "weth"})

        hit = result.results[0]
        assert not hasattr(hit, "collection")
        assert not hasattr(hit, "nft")

    async def test_tag_payload_mismatch_rejected(self, search_api, fetcher):
        fetcher.get.return_value = {"results": [{"type": "token", "collection": COLLECTION}]}

        with pytest.raises(ValidationError):
            await search_api.search({"query": "mismatch"})

    async def test_empty_results(self, search_api, fetcher):
        fetcher.get.return_value = {"results": []}

        result = await search_api.search({"query": "nonexistent"})

        assert result.results == []

    async def test_account_with_null_username(self, search_api, fetcher):
        fetcher.get.return_value = {
            "results": [{"type": "account", "account": {**ACCOUNT, "username": None}}]
        }

        result = await search_api.search({"query": "0x1234"})

        assert result.results[0].account.username is None


class TestSearchErrors:
    async def test_api_failure_propagates(self, search_api, fetcher):
        fetcher.get.side_effect = APIError(500, "/api/v2/search", {"message": "API Error"})

        with pytest.raises(APIError, match="API Error"):
            await search_api.search({"query": "test"})
