"""Shared schema base and field types: camelCase JSON on the wire, snake_case in Python."""

from decimal import Decimal
from typing import Annotated

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    EmailStr,
    PlainSerializer,
)
from pydantic.alias_generators import to_camel


def _lower(value: str) -> str:
    return value.strip().lower()


def _upper(value: object) -> object:
    if isinstance(value, str):
        return value.strip().upper()
    return value


# Emails are case-folded before they reach a service or the database.
NormalizedEmail = Annotated[EmailStr, AfterValidator(_lower)]

# Enum inputs accepted in any case ("deluxe", "Deluxe", "DELUXE").
UpperCase = BeforeValidator(_upper)

# Money stays Decimal in Python and is rendered as a JSON number.
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CamelModel(BaseModel):
    """Base for request/response bodies. Accepts either camelCase or snake_case input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class SuccessResponse(CamelModel):
    success: bool = True


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str
    message: str
    details: object | None = None
