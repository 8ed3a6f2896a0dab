"""Response envelope and the camelCase base shared by all wire schemas."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

DataT = TypeVar("DataT")


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire (both accepted on input)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Envelope(BaseModel, Generic[DataT]):
    """Every successful response: {"success": true, "data": ...}."""

    success: bool = True
    data: DataT


class SuccessResponse(BaseModel):
    success: bool = True


class ErrorResponse(BaseModel):
    success: bool = False
    error: str


class CreatedId(BaseModel):
    id: str
