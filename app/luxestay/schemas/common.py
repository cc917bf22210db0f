from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PaginatedData(CamelModel, Generic[T]):
    items: list[T]
    total_items: int
    total_pages: int
    current_page: int
    page_size: int


class ApiResponse(CamelModel, Generic[T]):
    success: bool = True
    data: T
    message: str
    status: int = 200


class ApiErrorResponse(CamelModel):
    success: bool = False
    code: str
    message: str
    details: dict | None = None
    trace_id: str | None = Field(default=None, alias="trace_id")
    status: int
    data: None = None
