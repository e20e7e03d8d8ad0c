"""
Admission checks for registry records.

Checks run in a fixed order and stop at the first failure.
"""

from pydantic import AnyUrl, TypeAdapter, ValidationError

from nft_registry.core.exceptions import BadParameters
from nft_registry.models.canister import CanisterInfo

MAX_NAME_LENGTH = 120
MAX_DESCRIPTION_LENGTH = 1200
STANDARD_DETAIL_KEY = "standard"

_url_adapter = TypeAdapter(AnyUrl)


def is_valid_url(value: str) -> bool:
    """Check that a string parses as an absolute URL with a scheme."""
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        return False
    return True


def validate_canister(canister: CanisterInfo) -> None:
    """
    Validate a record before it may enter the registry.

    Order of checks:
    1. thumbnail is a valid URL
    2. frontend, when present, is a valid URL
    3. exactly one detail pair
    4. that pair's key is "standard"
    5. name is at most 120 characters
    6. description is at most 1200 characters

    Args:
        canister: Record to check

    Raises:
        BadParameters: On the first failed check
    """
    if not is_valid_url(canister.thumbnail):
        raise BadParameters(
            "thumbnail must be a valid URL",
            details={"field": "thumbnail"},
        )

    if canister.frontend is not None and not is_valid_url(canister.frontend):
        raise BadParameters(
            "frontend must be a valid URL",
            details={"field": "frontend"},
        )

    if len(canister.details) != 1:
        raise BadParameters(
            f"details must contain exactly one entry, got {len(canister.details)}",
            details={"field": "details"},
        )

    key, _ = canister.details[0]
    if key != STANDARD_DETAIL_KEY:
        raise BadParameters(
            f"details entry must be keyed '{STANDARD_DETAIL_KEY}', got '{key}'",
            details={"field": "details"},
        )

    if len(canister.name) > MAX_NAME_LENGTH:
        raise BadParameters(
            f"name exceeds {MAX_NAME_LENGTH} characters",
            details={"field": "name", "length": len(canister.name)},
        )

    if len(canister.description) > MAX_DESCRIPTION_LENGTH:
        raise BadParameters(
            f"description exceeds {MAX_DESCRIPTION_LENGTH} characters",
            details={"field": "description", "length": len(canister.description)},
        )
