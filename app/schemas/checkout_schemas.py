# app/schemas/checkout_schemas.py
from pydantic import BaseModel, ConfigDict
from typing import List
from datetime import datetime


class CartItem(BaseModel):
    product_id: int
    quantity: int       # checked by the checkout pipeline, not here

class CartCheckoutPayload(BaseModel):
    items: List[CartItem]

class CheckoutResponse(BaseModel):
    order_id: int
    total_price: float


class OrderItemRead(BaseModel):
    product_id: int
    quantity: int
    price: float          # unit price when the order was placed
    line_total: float     # quantity * price

class OrderRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    status: str
    total: float
    address: str
    created_at: datetime

class OrderDetail(OrderRead):
    items: List[OrderItemRead]
