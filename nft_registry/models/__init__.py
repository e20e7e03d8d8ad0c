"""Domain models for the NFT Registry API."""

from nft_registry.models.canister import CanisterInfo, Detail
from nft_registry.models.detail import (
    DetailValue,
    TrueValue,
    FalseValue,
    U64Value,
    I64Value,
    FloatValue,
    TextValue,
    PrincipalValue,
    SliceValue,
    VecValue,
    detail_from_python,
    detail_to_python,
)

__all__ = [
    "CanisterInfo",
    "Detail",
    "DetailValue",
    "TrueValue",
    "FalseValue",
    "U64Value",
    "I64Value",
    "FloatValue",
    "TextValue",
    "PrincipalValue",
    "SliceValue",
    "VecValue",
    "detail_from_python",
    "detail_to_python",
]
