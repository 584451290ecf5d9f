from sqlmodel import SQLModel, Field, Relationship
from typing import List, Optional, TYPE_CHECKING
from datetime import datetime
from decimal import Decimal

if TYPE_CHECKING:
    from app.models.order_item import OrderItem

# shipping is not computed yet, every order carries this address
PLACEHOLDER_ADDRESS = "address"


class Order(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", index=True)

    total: Decimal = Field(max_digits=10, decimal_places=2)
    status: str = Field(default="pending")
    address: str = Field(default=PLACEHOLDER_ADDRESS)

    created_at: datetime = Field(default_factory=datetime.utcnow)

    items: List["OrderItem"] = Relationship(back_populates="order")
