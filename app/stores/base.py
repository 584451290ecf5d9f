"""
Capability sets the routes and the checkout pipeline depend on.

The SQL implementations in this package are bound to a single request
session and never commit; whoever owns the session decides when the unit of
work ends. Tests substitute in-memory fakes with the same methods.
"""
from typing import Iterable, List, Optional, Protocol

from app.models.order import Order
from app.models.order_item import OrderItem
from app.models.product import Product
from app.models.user import User


class StoreError(Exception):
    """Any failure raised by a store operation."""


class RecordNotFound(StoreError):
    pass


class ProductStore(Protocol):
    def get_products(self) -> List[Product]: ...

    def get_product(self, product_id: int) -> Optional[Product]: ...

    def get_products_by_id(self, product_ids: Iterable[int]) -> List[Product]: ...

    def create_product(self, product: Product) -> Product: ...

    def update_product(self, product: Product) -> None: ...

    def decrement_stock(self, product_id: int, quantity: int) -> bool:
        """Take ``quantity`` units off the shelf only if that many are left.

        Returns False, leaving the row untouched, when stock is short.
        """
        ...


class OrderStore(Protocol):
    def create_order(self, order: Order) -> int: ...

    def create_order_item(self, item: OrderItem) -> None: ...

    def get_orders_for_user(self, user_id: int) -> List[Order]: ...

    def get_order_items(self, order_id: int) -> List[OrderItem]: ...


class UserStore(Protocol):
    def get_user_by_email(self, email: str) -> Optional[User]: ...

    def get_user_by_id(self, user_id: int) -> Optional[User]: ...

    def create_user(self, user: User) -> User: ...
