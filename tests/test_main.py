"""Tests for the command line dispatch, the bundled client and rendering."""

import asyncio
from unittest.mock import AsyncMock

import aiohttp
import pytest
from rich.console import Console

from opensea_api.application.client import OpenSeaAPI
from opensea_api.application.schemas import GetTrendingTokensResponse, SearchResponse
from opensea_api.application.ui import ResultPrinter
from opensea_api.domain import APIError, Chain
from opensea_api.main import build_parser, execute, main


@pytest.fixture
def api(fetcher):
    fetcher.close = AsyncMock()
    return OpenSeaAPI(fetcher, Chain.MAINNET)


class TestOpenSeaAPI:
    async def test_facades_share_one_fetcher(self, api, fetcher):
        assert api.offers.fetcher is fetcher
        assert api.search.fetcher is fetcher
        assert api.tokens.fetcher is fetcher
        assert api.offers.chain is Chain.MAINNET

    async def test_context_manager_closes_fetcher(self, api, fetcher):
        async with api:
            pass
        fetcher.close.assert_awaited_once()


class TestExecute:
    async def test_search_command(self, api, fetcher):
        fetcher.get.return_value = {"results": []}
        args = build_parser().parse_args(["search", "bored ape", "--type", "collection", "--limit", "5"])

        result = await execute(api, args)

        fetcher.get.assert_awaited_once_with(
            "/api/v2/search",
            {"query": "bored ape", "asset_types": ["collection"], "limit": 5},
        )
        assert isinstance(result, SearchResponse)

    async def test_trending_without_filters(self, api, fetcher):
        fetcher.get.return_value = {"tokens": []}
        args = build_parser().parse_args(["trending"])

        await execute(api, args)

        fetcher.get.assert_awaited_once_with("/api/v2/tokens/trending", None)

    async def test_token_command(self, api, fetcher, token_data):
        fetcher.get.return_value = token_data
        args = build_parser().parse_args(["token", "ethereum", "0x123"])

        await execute(api, args)

        fetcher.get.assert_awaited_once_with("/api/v2/chain/ethereum/token/0x123")

    async def test_best_offer_command(self, api, fetcher, make_offer):
        fetcher.get.return_value = make_offer()
        args = build_parser().parse_args(["best-offer", "azuki", "42"])

        result = await execute(api, args)

        fetcher.get.assert_awaited_once_with("/api/v2/offers/collection/azuki/nfts/42/best")
        assert result.order_hash == "0xabc123"


class TestResultPrinter:
    def _render(self, response, **kwargs):
        console = Console(record=True, width=160)
        ResultPrinter(console=console, **kwargs).show(response, title="test")
        return console.export_text()

    def test_search_table(self):
        response = SearchResponse.model_validate({
            "results": [
                {
                    "type": "account",
                    "account": {"address": "0xacc", "username": None, "opensea_url": "https://opensea.io/0xacc"},
                }
            ]
        })

        output = self._render(response)

        assert "account" in output
        assert "0xacc" in output

    def test_token_table(self, token_data):
        response = GetTrendingTokensResponse.model_validate({"tokens": [token_data], "next": "c-1"})

        output = self._render(response)

        assert "WETH" in output
        assert "next: c-1" in output

    def test_json_output(self, token_data):
        response = GetTrendingTokensResponse.model_validate({"tokens": [token_data]})

        output = self._render(response, as_json=True)

        assert '"symbol": "WETH"' in output


class TestMain:
    @pytest.fixture
    def patched_api(self, api, monkeypatch):
        monkeypatch.setattr(OpenSeaAPI, "from_settings", lambda cfg: api)
        return api

    async def test_success_exit_code(self, patched_api, fetcher, token_data):
        fetcher.get.return_value = token_data

        assert await main(["--json", "token", "ethereum", "0x123"]) == 0
        fetcher.close.assert_awaited_once()

    @pytest.mark.parametrize("error", [
        APIError(404, "/api/v2/chain/ethereum/token/0x123", {"errors": ["Token not found"]}),
        aiohttp.ClientConnectionError("connection refused"),
        asyncio.TimeoutError(),
    ])
    async def test_request_failure_exit_code(self, patched_api, fetcher, error):
        fetcher.get.side_effect = error

        assert await main(["token", "ethereum", "0x123"]) == 1
        fetcher.close.assert_awaited_once()

    async def test_malformed_response_exit_code(self, patched_api, fetcher):
        fetcher.get.return_value = {"symbol": "WETH"}

        assert await main(["token", "ethereum", "0x123"]) == 1
