"""
Infrastructure: Request Payload Builders
Shapes offer bodies and order queries into the API wire format.
"""
from typing import Any, Dict, List, Optional, Union

from opensea_api.domain import Chain, TraitFilter

# Seaport 1.6
SEAPORT_CONTRACT_ADDRESS = "0x0000000000000068F116a894984e2DB1123eB395"


def compact(**params: Any) -> Dict[str, Any]:
    """Drops parameters that were not supplied (None)."""
    return {key: value for key, value in params.items() if value is not None}


def _criteria(collection_slug: str, trait_filter: TraitFilter) -> Dict[str, Any]:
    criteria: Dict[str, Any] = {"collection": {"slug": collection_slug}}
    criteria.update(trait_filter.criteria())
    return criteria


def get_build_collection_offer_payload(
    offerer_address: str,
    quantity: int,
    collection_slug: str,
    offer_protection_enabled: bool,
    chain: Union[Chain, str],
    trait_filter: TraitFilter,
) -> Dict[str, Any]:
    return {
        "offerer": offerer_address,
        "quantity": quantity,
        "criteria": _criteria(collection_slug, trait_filter),
        "protocol_address": SEAPORT_CONTRACT_ADDRESS,
        "offer_protection_enabled": offer_protection_enabled,
        "chain": str(chain),
    }


def get_post_collection_offer_payload(
    collection_slug: str,
    protocol_data: Dict[str, Any],
    chain: Union[Chain, str],
    trait_filter: TraitFilter,
) -> Dict[str, Any]:
    return {
        "criteria": _criteria(collection_slug, trait_filter),
        "protocol_data": protocol_data,
        "protocol_address": SEAPORT_CONTRACT_ADDRESS,
        "chain": str(chain),
    }


def serialize_orders_query_options(
    asset_contract_address: Optional[str] = None,
    token_ids: Optional[List[str]] = None,
    limit: Optional[int] = None,
    next: Optional[str] = None,
) -> Dict[str, Any]:
    """Maps order filters to the orders endpoint query parameters"""
    return compact(
        asset_contract_address=asset_contract_address,
        token_ids=token_ids,
        limit=limit,
        next=next,
    )
