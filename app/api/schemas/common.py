from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

Money = Annotated[
    Decimal,
    PlainSerializer(lambda v: format(v, ".2f"), return_type=str, when_used="json"),
]


class CamelModel(BaseModel):
    """Wire models use camelCase, matching the browser client."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class CamelRequest(CamelModel):
    model_config = ConfigDict(extra="forbid")


class ErrorResponse(BaseModel):
    error: str
    code: str | None = None
    error_id: str | None = None
