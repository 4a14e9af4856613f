from pydantic import BaseModel, EmailStr, Field, AliasChoices, ConfigDict, StrictInt
from pydantic.alias_generators import to_camel
from typing import List


class CartLineUpsert(BaseModel):
    user_id: int = Field(..., validation_alias=AliasChoices("userId", "user_id"))
    product_id: int = Field(..., validation_alias=AliasChoices("productId", "product_id"))
    # Strict: "3", 2.5 and true are rejected rather than coerced
    qty: StrictInt = Field(..., ge=0)


class CheckoutRequest(BaseModel):
    user_id: int = Field(..., validation_alias=AliasChoices("userId", "user_id"))
    name: str = Field(..., min_length=1)
    email: EmailStr


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CartItem(CamelModel):
    product_id: int
    name: str
    price: float
    qty: int
    image_url: str
    line_total: float


class CartView(CamelModel):
    items: List[CartItem] = []
    subtotal: float
    shipping: float
    tax: float
    grand_total: float


class Customer(CamelModel):
    name: str
    email: str
    user_id: int


class Receipt(CamelModel):
    order_id: str
    timestamp: str
    customer: Customer
    total_paid: float
    items: List[CartItem]
