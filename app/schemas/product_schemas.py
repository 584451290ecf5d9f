from pydantic import BaseModel, ConfigDict
from datetime import datetime
from decimal import Decimal


class ProductCreate(BaseModel):
    name: str = ""
    description: str = ""
    image: str = ""
    price: Decimal = Decimal("0")
    quantity: int = 0


class ProductRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str
    image: str
    price: float
    quantity: int
    created_at: datetime
