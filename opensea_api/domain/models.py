"""
Domain Layer: Enums, Value Objects and Errors
Pure Python, No external dependencies.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Union

# --- Enums ---

class Chain(str, Enum):
    """Chains supported by the marketplace API"""
    MAINNET = "ethereum"
    POLYGON = "matic"
    KLAYTN = "klaytn"
    BASE = "base"
    BLAST = "blast"
    ARBITRUM = "arbitrum"
    ARBITRUM_NOVA = "arbitrum_nova"
    AVALANCHE = "avalanche"
    OPTIMISM = "optimism"
    SOLANA = "solana"
    ZORA = "zora"
    SEI = "sei"
    B3 = "b3"
    BERA_CHAIN = "bera_chain"
    APE_CHAIN = "ape_chain"
    FLOW = "flow"
    RONIN = "ronin"
    ABSTRACT = "abstract"
    SHAPE = "shape"
    UNICHAIN = "unichain"
    # Testnets
    SEPOLIA = "sepolia"
    AMOY = "amoy"
    BASE_SEPOLIA = "base_sepolia"

    def __str__(self) -> str:
        return self.value


class OrderSide(str, Enum):
    OFFER = "offer"
    LISTING = "listing"


class OrderProtocol(str, Enum):
    SEAPORT = "seaport"


# --- Value Objects ---

@dataclass(frozen=True)
class Trait:
    """Categorical trait (name/value pair)"""
    type: str
    value: str

    @classmethod
    def coerce(cls, raw: Union["Trait", Mapping[str, Any]]) -> "Trait":
        if isinstance(raw, Trait):
            return raw
        return cls(type=raw.get("type", ""), value=raw.get("value", ""))

    def as_dict(self) -> dict:
        return {"type": self.type, "value": self.value}


@dataclass(frozen=True)
class NumericTrait:
    """Numeric trait range. Either bound may be open."""
    type: str
    min: Optional[float] = None
    max: Optional[float] = None

    @classmethod
    def coerce(cls, raw: Union["NumericTrait", Mapping[str, Any]]) -> "NumericTrait":
        if isinstance(raw, NumericTrait):
            return raw
        return cls(type=raw.get("type", ""), min=raw.get("min"), max=raw.get("max"))

    def as_dict(self) -> dict:
        data: dict = {"type": self.type}
        if self.min is not None:
            data["min"] = self.min
        if self.max is not None:
            data["max"] = self.max
        return data


# --- Exceptions ---

class OpenSeaError(Exception):
    """Base client exception"""


class InvalidArgumentError(OpenSeaError, ValueError):
    """Raised when request arguments fail local validation"""


class APIError(OpenSeaError):
    """Raised when the API answers with a non-2xx status"""

    def __init__(self, status: int, path: str, body: Any = None) -> None:
        self.status = status
        self.path = path
        self.body = body
        super().__init__(f"API error {status} on {path}: {_describe(body)}")


def _describe(body: Any) -> str:
    if isinstance(body, Mapping):
        errors = body.get("errors")
        if isinstance(errors, list) and errors:
            return "; ".join(str(e) for e in errors)
        for key in ("detail", "message", "error"):
            if body.get(key):
                return str(body[key])
    if body is None or body == "":
        return "no response body"
    return str(body)[:200]
