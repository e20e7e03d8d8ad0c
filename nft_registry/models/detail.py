"""
Typed detail values attached to registry records.

A detail value is a closed tagged union discriminated by ``kind``:
true, false, u64, i64, float, text, principal, slice (raw bytes) and
vec (an ordered list of detail values, nestable to any depth).
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

U64_MAX = 2**64 - 1
I64_MIN = -(2**63)
I64_MAX = 2**63 - 1

# Shared by every variant; bytes travel as base64 in JSON and non-finite
# floats as the Infinity/-Infinity/NaN constants.
_VARIANT_CONFIG = ConfigDict(
    frozen=True,
    extra="forbid",
    ser_json_bytes="base64",
    val_json_bytes="base64",
    ser_json_inf_nan="constants",
)


class TrueValue(BaseModel):
    model_config = _VARIANT_CONFIG

    kind: Literal["true"] = "true"


class FalseValue(BaseModel):
    model_config = _VARIANT_CONFIG

    kind: Literal["false"] = "false"


class U64Value(BaseModel):
    model_config = _VARIANT_CONFIG

    kind: Literal["u64"] = "u64"
    value: int = Field(ge=0, le=U64_MAX)


class I64Value(BaseModel):
    model_config = _VARIANT_CONFIG

    kind: Literal["i64"] = "i64"
    value: int = Field(ge=I64_MIN, le=I64_MAX)


class FloatValue(BaseModel):
    model_config = _VARIANT_CONFIG

    kind: Literal["float"] = "float"
    value: float


class TextValue(BaseModel):
    model_config = _VARIANT_CONFIG

    kind: Literal["text"] = "text"
    value: str


class PrincipalValue(BaseModel):
    model_config = _VARIANT_CONFIG

    kind: Literal["principal"] = "principal"
    value: str


class SliceValue(BaseModel):
    model_config = _VARIANT_CONFIG

    kind: Literal["slice"] = "slice"
    value: bytes


class VecValue(BaseModel):
    model_config = _VARIANT_CONFIG

    kind: Literal["vec"] = "vec"
    value: tuple["DetailValue", ...] = ()


DetailValue = Annotated[
    Union[
        TrueValue,
        FalseValue,
        U64Value,
        I64Value,
        FloatValue,
        TextValue,
        PrincipalValue,
        SliceValue,
        VecValue,
    ],
    Field(discriminator="kind"),
]

VecValue.model_rebuild()


def detail_to_python(detail: DetailValue) -> Any:
    """
    Unwrap a detail value into plain Python data.

    Vec values become lists (recursively); principals become their text form.
    """
    match detail:
        case TrueValue():
            return True
        case FalseValue():
            return False
        case U64Value(value=value) | I64Value(value=value) | FloatValue(value=value):
            return value
        case TextValue(value=value) | PrincipalValue(value=value):
            return value
        case SliceValue(value=value):
            return value
        case VecValue(value=items):
            return [detail_to_python(item) for item in items]
        case _:
            raise TypeError(f"Not a detail value: {detail!r}")


def detail_from_python(value: Any) -> DetailValue:
    """
    Wrap plain Python data into a detail value.

    Non-negative ints map to u64, negative ints to i64, bytes to slice and
    lists/tuples to vec. Principals cannot be inferred from a plain string;
    construct ``PrincipalValue`` directly for those.
    """
    match value:
        case True:
            return TrueValue()
        case False:
            return FalseValue()
        case int() if value >= 0:
            return U64Value(value=value)
        case int():
            return I64Value(value=value)
        case float():
            return FloatValue(value=value)
        case str():
            return TextValue(value=value)
        case bytes() | bytearray():
            return SliceValue(value=bytes(value))
        case list() | tuple():
            return VecValue(value=tuple(detail_from_python(item) for item in value))
        case _:
            raise TypeError(f"Cannot convert {type(value).__name__} to a detail value")
