"""
Application Layer: Terminal Rendering
Renders API responses using 'rich' library.
"""
import json
from typing import List, Optional

from pydantic import BaseModel
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from opensea_api.application.schemas import (
    AccountHit,
    CollectionHit,
    NftHit,
    Offer,
    SearchResponse,
    Token,
    TokenHit,
    TokenListResponse,
    GetOffersResponse,
)


class ResultPrinter:
    """Prints responses as tables, or raw JSON when asked to."""

    def __init__(self, console: Optional[Console] = None, as_json: bool = False) -> None:
        self.console = console or Console()
        self.as_json = as_json

    def show(self, response: BaseModel, title: str = "") -> None:
        if self.as_json:
            self.console.print_json(json.dumps(response.model_dump(mode="json")))
            return
        self.console.print(self.render(response, title))

    def render(self, response: BaseModel, title: str = "") -> Panel:
        if isinstance(response, SearchResponse):
            return self._make_search_table(response, title or "Search")
        if isinstance(response, TokenListResponse):
            return self._make_tokens_table(response.tokens, response.next, title or "Tokens")
        if isinstance(response, Token):
            return self._make_tokens_table([response], None, title or response.symbol)
        if isinstance(response, GetOffersResponse):
            return self._make_offers_table(response.offers, response.next, title or "Offers")
        if isinstance(response, Offer):
            return self._make_offers_table([response], None, title or "Best Offer")
        return Panel(json.dumps(response.model_dump(mode="json"), indent=2), title=title)

    def _make_search_table(self, response: SearchResponse, title: str) -> Panel:
        table = Table(box=box.SIMPLE, expand=True)
        table.add_column("Type", style="magenta", no_wrap=True)
        table.add_column("Name", style="cyan")
        table.add_column("Details", style="white")
        table.add_column("URL", style="blue")

        for hit in response.results:
            if isinstance(hit, CollectionHit):
                item = hit.collection
                flags = "disabled" if item.is_disabled else ""
                table.add_row(hit.type, item.name, f"{item.collection} {flags}".strip(), item.opensea_url)
            elif isinstance(hit, TokenHit):
                token = hit.token
                price = f"${token.usd_price}" if token.usd_price else "-"
                table.add_row(hit.type, f"{token.name} ({token.symbol})", f"{token.chain} {price}", token.opensea_url)
            elif isinstance(hit, NftHit):
                nft = hit.nft
                table.add_row(hit.type, nft.name or f"#{nft.identifier}", nft.collection, nft.opensea_url)
            elif isinstance(hit, AccountHit):
                account = hit.account
                table.add_row(hit.type, account.username or "-", account.address, account.opensea_url)

        if not response.results:
            table.add_row("No results", "", "", "")

        return Panel(table, title=title, border_style="blue")

    def _make_tokens_table(self, tokens: List[Token], next_cursor: Optional[str], title: str) -> Panel:
        table = Table(box=box.SIMPLE, expand=True)
        table.add_column("Symbol", style="cyan", no_wrap=True)
        table.add_column("Name", style="white")
        table.add_column("Chain", style="magenta")
        table.add_column("USD Price", justify="right", style="green")
        table.add_column("Address", style="grey50")

        for token in tokens:
            table.add_row(
                token.symbol,
                token.name,
                token.chain,
                token.usd_price or "-",
                token.address,
            )

        if not tokens:
            table.add_row("No tokens", "", "", "", "")

        return Panel(table, title=title, subtitle=_cursor(next_cursor), border_style="green")

    def _make_offers_table(self, offers: List[Offer], next_cursor: Optional[str], title: str) -> Panel:
        table = Table(box=box.SIMPLE, expand=True)
        table.add_column("Order Hash", style="cyan", no_wrap=True)
        table.add_column("Chain", style="magenta")
        table.add_column("Price", justify="right", style="green")
        table.add_column("Criteria", style="white")

        for offer in offers:
            price = "-"
            if offer.price is not None:
                amount = int(offer.price.value) / (10 ** offer.price.decimals)
                price = f"{amount:g} {offer.price.currency}"
            criteria = "-"
            if offer.criteria is not None:
                criteria = str(offer.criteria.collection.get("slug", "-"))
                if offer.criteria.trait:
                    criteria += f" [{offer.criteria.trait.get('type')}={offer.criteria.trait.get('value')}]"
            table.add_row(_short(offer.order_hash), offer.chain, price, criteria)

        if not offers:
            table.add_row("No offers", "", "", "")

        return Panel(table, title=title, subtitle=_cursor(next_cursor), border_style="yellow")


def _short(value: str, size: int = 10) -> str:
    return value if len(value) <= size * 2 else f"{value[:size]}…{value[-4:]}"


def _cursor(next_cursor: Optional[str]) -> Optional[str]:
    return f"next: {next_cursor}" if next_cursor else None
