"""
==============================================================================
Common Schemas Module
==============================================================================

Response envelopes shared by the catalog endpoints.

==============================================================================
"""

import math
from typing import Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


T = TypeVar("T")


class PagedResult(BaseModel, Generic[T]):
    """
    One page of items plus pagination metadata.

    Serialized with camelCase keys (pageNumber, totalPages, totalElements,
    isFirst, isLast, hasNext, hasPrevious).
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    data: List[T]
    page_number: int = Field(ge=1)
    total_pages: int = Field(ge=1)
    total_elements: int = Field(ge=0)
    is_first: bool
    is_last: bool
    has_next: bool
    has_previous: bool

    @classmethod
    def create(
        cls,
        data: List[T],
        total_elements: int,
        page_number: int,
        page_size: int
    ) -> "PagedResult[T]":
        """Factory method computing the metadata from the total count."""
        total_pages = max(1, math.ceil(total_elements / page_size))
        is_first = page_number == 1
        is_last = page_number == total_pages

        return cls(
            data=data,
            page_number=page_number,
            total_pages=total_pages,
            total_elements=total_elements,
            is_first=is_first,
            is_last=is_last,
            has_next=not is_last,
            has_previous=not is_first,
        )
