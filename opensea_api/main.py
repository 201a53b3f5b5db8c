"""
Main Entry Point (Composition Root)
"""
import argparse
import asyncio
import sys
from typing import List, Optional

import aiohttp
import structlog
from pydantic import BaseModel, ValidationError

from opensea_api.application.client import OpenSeaAPI
from opensea_api.application.ui import ResultPrinter
from opensea_api.domain import OpenSeaError
from opensea_api.infrastructure.config import settings
from opensea_api.infrastructure.logging_setup import configure_logging

logger = structlog.get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="opensea-api", description="Query the OpenSea API")
    parser.add_argument("--json", action="store_true", help="print raw JSON")
    sub = parser.add_subparsers(dest="command", required=True)

    search = sub.add_parser("search", help="search collections, tokens, NFTs and accounts")
    search.add_argument("query")
    search.add_argument("--chain", action="append", dest="chains")
    search.add_argument(
        "--type", action="append", dest="asset_types",
        choices=["collection", "nft", "token", "account"],
    )
    search.add_argument("--limit", type=int)

    for name in ("trending", "top"):
        tokens = sub.add_parser(name, help=f"{name} tokens")
        tokens.add_argument("--limit", type=int)
        tokens.add_argument("--next")

    token = sub.add_parser("token", help="token details")
    token.add_argument("chain")
    token.add_argument("address")

    best = sub.add_parser("best-offer", help="best offer for one NFT")
    best.add_argument("slug")
    best.add_argument("token_id")

    offers = sub.add_parser("offers", help="collection offers")
    offers.add_argument("slug")
    offers.add_argument("--limit", type=int)
    offers.add_argument("--next")

    return parser


def _filters(args: argparse.Namespace, *names: str) -> dict:
    return {name: getattr(args, name) for name in names if getattr(args, name) is not None}


async def execute(api: OpenSeaAPI, args: argparse.Namespace) -> BaseModel:
    """Dispatches one parsed command to the matching facade call"""
    if args.command == "search":
        return await api.search.search({"query": args.query, **_filters(args, "chains", "asset_types", "limit")})
    if args.command == "trending":
        return await api.tokens.get_trending_tokens(_filters(args, "limit", "next") or None)
    if args.command == "top":
        return await api.tokens.get_top_tokens(_filters(args, "limit", "next") or None)
    if args.command == "token":
        return await api.tokens.get_token(args.chain, args.address)
    if args.command == "best-offer":
        return await api.offers.get_best_offer(args.slug, args.token_id)
    if args.command == "offers":
        return await api.offers.get_collection_offers(args.slug, args.limit, args.next)
    raise ValueError(f"Unknown command: {args.command}")


async def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(settings.log_level, settings.log_json)
    printer = ResultPrinter(as_json=args.json)

    async with OpenSeaAPI.from_settings(settings) as api:
        try:
            response = await execute(api, args)
        except (OpenSeaError, aiohttp.ClientError, asyncio.TimeoutError, ValidationError) as e:
            logger.error("command_failed", command=args.command, error=str(e))
            return 1

    printer.show(response, title=args.command)
    return 0


def run() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
