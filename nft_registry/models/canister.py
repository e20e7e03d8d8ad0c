"""
Registry record model.

Field constraints (URL syntax, lengths, the single "standard" detail) are
not enforced here: they are checked by the validator at admission time, after
the caller has been authorized.
"""

from pydantic import BaseModel, ConfigDict, Field

from nft_registry.models.detail import DetailValue

Detail = tuple[str, DetailValue]


class CanisterInfo(BaseModel):
    """Metadata descriptor for a registered NFT or token canister."""

    model_config = ConfigDict(frozen=True, ser_json_inf_nan="constants")

    name: str = Field(
        ...,
        description="Display name (at most 120 characters)",
        examples=["xtc"],
    )
    description: str = Field(
        ...,
        description="Free-form description (at most 1200 characters)",
        examples=["XTC is your cycles wallet."],
    )
    thumbnail: str = Field(
        ...,
        description="Thumbnail image URL",
        examples=["https://example.org/xtc.png"],
    )
    frontend: str | None = Field(
        default=None,
        description="Optional frontend URL",
    )
    principal_id: str = Field(
        ...,
        description="Identifier of the canister; unique registry key",
        examples=["aanaa-xaaaa-aaaah-aaeiq-cai"],
    )
    details: tuple[Detail, ...] = Field(
        default=(),
        description='Typed attributes; must be exactly one ("standard", value) pair',
    )

    def __repr__(self) -> str:
        return f"<CanisterInfo(principal_id={self.principal_id}, name={self.name})>"
