"""
Domain Layer
"""
from .models import (
    Chain,
    OrderSide,
    OrderProtocol,
    Trait,
    NumericTrait,
    OpenSeaError,
    InvalidArgumentError,
    APIError,
)
from .trait_filter import TraitFilter

__all__ = [
    "Chain",
    "OrderSide",
    "OrderProtocol",
    "Trait",
    "NumericTrait",
    "OpenSeaError",
    "InvalidArgumentError",
    "APIError",
    "TraitFilter",
]
