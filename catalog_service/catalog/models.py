"""
==============================================================================
Product Models Module
==============================================================================

Pydantic model for catalog items as handed out by the query service.

==============================================================================
"""

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer


# Prices stay exact in Python and are rendered as JSON numbers
Price = Annotated[
    Decimal,
    PlainSerializer(float, return_type=float, when_used="json"),
]


class Product(BaseModel):
    """
    Immutable product record.

    Attributes:
        code: Unique product code (e.g. "P100")
        name: Product display name
        description: Product description
        price: Non-negative unit price
    """

    model_config = ConfigDict(from_attributes=True, frozen=True)

    code: str = Field(..., min_length=1, description="Unique product code")
    name: str = Field(..., description="Product name")
    description: str = Field(default="", description="Product description")
    price: Price = Field(..., ge=0, description="Unit price")
