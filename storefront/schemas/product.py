from pydantic import BaseModel, Field, AliasChoices, ConfigDict, field_validator
from typing import List
from decimal import Decimal, ROUND_HALF_UP


class ProductCreate(BaseModel):
    id: int
    name: str = Field(..., min_length=1)
    price: Decimal = Field(..., ge=0)
    category: str = Field(..., min_length=1)
    image_url: str = Field(..., min_length=1, validation_alias=AliasChoices("imageUrl", "image_url"))
    description: str = Field(..., min_length=1)
    details: List[str]

    @field_validator("price")
    @classmethod
    def round_to_cents(cls, value: Decimal) -> Decimal:
        # Column is Numeric(10, 2)
        return value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


class ProductResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    name: str
    price: float  # float for JSON serialization
    category: str
    image_url: str = Field(..., serialization_alias="imageUrl")
    description: str
    details: List[str]
