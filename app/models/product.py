from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime
from decimal import Decimal


class Product(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    description: str = ""
    image: str = ""

    price: Decimal = Field(default=0, max_digits=10, decimal_places=2)
    quantity: int = 0  # units available for sale

    created_at: datetime = Field(default_factory=datetime.utcnow)

    @property
    def in_stock(self) -> bool:
        return self.quantity > 0
