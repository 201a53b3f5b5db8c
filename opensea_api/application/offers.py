"""
Application Layer: Offers API
Builds, validates and submits collection, trait and NFT offers.
"""
from typing import Iterable, Optional, Union

import structlog

from opensea_api.application.ports import IFetcher
from opensea_api.application.schemas import (
    BuildOfferResponse,
    CollectionOffer,
    GetBestOfferResponse,
    GetOffersResponse,
    ProtocolData,
)
from opensea_api.domain import Chain, OrderProtocol, OrderSide, TraitFilter
from opensea_api.domain.trait_filter import NumericTraitInput, TraitInput
from opensea_api.infrastructure.api_paths import (
    get_all_offers_api_path,
    get_best_offer_api_path,
    get_build_offer_path,
    get_collection_offers_path,
    get_orders_api_path,
    get_post_collection_offer_path,
    get_trait_offers_path,
)
from opensea_api.infrastructure.payloads import (
    compact,
    get_build_collection_offer_payload,
    get_post_collection_offer_payload,
    serialize_orders_query_options,
)

logger = structlog.get_logger()


class OffersAPI:
    """Offer-related API operations"""

    def __init__(self, fetcher: IFetcher, chain: Union[Chain, str] = Chain.MAINNET) -> None:
        self.fetcher = fetcher
        self.chain = chain

    async def get_all_offers(
        self,
        collection_slug: str,
        limit: Optional[int] = None,
        next: Optional[str] = None,
    ) -> GetOffersResponse:
        """Gets all offers for a given collection."""
        data = await self.fetcher.get(
            get_all_offers_api_path(collection_slug),
            compact(limit=limit, next=next),
        )
        return GetOffersResponse.model_validate(data)

    async def get_trait_offers(
        self,
        collection_slug: str,
        type: str,
        value: str,
        limit: Optional[int] = None,
        next: Optional[str] = None,
        float_value: Optional[float] = None,
        int_value: Optional[int] = None,
    ) -> GetOffersResponse:
        """Gets trait offers for a given collection."""
        data = await self.fetcher.get(
            get_trait_offers_path(collection_slug),
            compact(
                type=type,
                value=value,
                limit=limit,
                next=next,
                float_value=float_value,
                int_value=int_value,
            ),
        )
        return GetOffersResponse.model_validate(data)

    async def get_best_offer(
        self,
        collection_slug: str,
        token_id: Union[str, int],
    ) -> GetBestOfferResponse:
        """Gets the best offer for a given token."""
        data = await self.fetcher.get(get_best_offer_api_path(collection_slug, token_id))
        return GetBestOfferResponse.model_validate(data)

    async def build_offer(
        self,
        offerer_address: str,
        quantity: int,
        collection_slug: str,
        offer_protection_enabled: bool = True,
        trait_type: Optional[str] = None,
        trait_value: Optional[str] = None,
        traits: Optional[Iterable[TraitInput]] = None,
        numeric_traits: Optional[Iterable[NumericTraitInput]] = None,
    ) -> BuildOfferResponse:
        """
        Builds an unsigned collection offer.

        Trait arguments are validated before anything is sent, an invalid
        combination raises InvalidArgumentError. The returned order skeleton
        still has to be signed before it can be posted.
        """
        trait_filter = TraitFilter.validated(trait_type, trait_value, traits, numeric_traits)
        payload = get_build_collection_offer_payload(
            offerer_address,
            quantity,
            collection_slug,
            offer_protection_enabled,
            self.chain,
            trait_filter,
        )
        logger.debug("offer_build_requested", slug=collection_slug, quantity=quantity)
        data = await self.fetcher.post(get_build_offer_path(), payload)
        return BuildOfferResponse.model_validate(data)

    async def get_collection_offers(
        self,
        slug: str,
        limit: Optional[int] = None,
        next: Optional[str] = None,
    ) -> GetOffersResponse:
        """Gets a list of collection offers for a given slug."""
        data = await self.fetcher.get(
            get_collection_offers_path(slug),
            compact(limit=limit, next=next),
        )
        return GetOffersResponse.model_validate(data)

    async def post_collection_offer(
        self,
        order: ProtocolData,
        slug: str,
        trait_type: Optional[str] = None,
        trait_value: Optional[str] = None,
        traits: Optional[Iterable[TraitInput]] = None,
        numeric_traits: Optional[Iterable[NumericTraitInput]] = None,
    ) -> Optional[CollectionOffer]:
        """
        Posts a signed collection offer.
        Returns None when the server created no offer.
        """
        payload = get_post_collection_offer_payload(
            slug,
            order,
            self.chain,
            TraitFilter.from_fields(trait_type, trait_value, traits, numeric_traits),
        )
        data = await self.fetcher.post(get_post_collection_offer_path(), payload)
        if not data:
            logger.info("collection_offer_not_created", slug=slug)
            return None
        return CollectionOffer.model_validate(data)

    async def get_nft_offers(
        self,
        asset_contract_address: str,
        token_id: str,
        limit: Optional[int] = None,
        next: Optional[str] = None,
        chain: Optional[Union[Chain, str]] = None,
    ) -> GetOffersResponse:
        """Gets all active offers for a specific NFT."""
        data = await self.fetcher.get(
            get_orders_api_path(chain or self.chain, OrderProtocol.SEAPORT, OrderSide.OFFER),
            serialize_orders_query_options(
                asset_contract_address=asset_contract_address,
                token_ids=[token_id],
                limit=limit,
                next=next,
            ),
        )
        return GetOffersResponse.model_validate(data)
