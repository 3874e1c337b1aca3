"""Page Schema — generic envelope for paged list responses."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

ItemT = TypeVar("ItemT")


class PageResponse(BaseModel, Generic[ItemT]):
    """A slice of matching rows plus page number, size and total count."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    content: list[ItemT]
    page: int
    size: int
    total_elements: int
    total_pages: int
