"""In-memory stand-ins for the SQL stores."""
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from app.models.order import Order
from app.models.order_item import OrderItem
from app.models.product import Product
from app.stores.base import RecordNotFound, StoreError


def make_product(id, price, quantity, name=None):
    return Product(id=id, name=name or f"Product {id}", price=Decimal(price), quantity=quantity)


def _snapshot(product: Product) -> Product:
    return Product(
        id=product.id,
        name=product.name,
        description=product.description,
        image=product.image,
        price=product.price,
        quantity=product.quantity,
    )


class FakeProductStore:
    def __init__(self, products: Iterable[Product] = ()):
        self.products: Dict[int, Product] = {p.id: p for p in products}
        self.fetches: List[set] = []

    def get_products(self) -> List[Product]:
        return [_snapshot(p) for p in self.products.values()]

    def get_product(self, product_id: int) -> Optional[Product]:
        product = self.products.get(product_id)
        return _snapshot(product) if product else None

    def get_products_by_id(self, product_ids) -> List[Product]:
        ids = set(product_ids)
        self.fetches.append(ids)
        return [_snapshot(self.products[i]) for i in ids if i in self.products]

    def create_product(self, product: Product) -> Product:
        product.id = max(self.products, default=0) + 1
        self.products[product.id] = product
        return product

    def update_product(self, product: Product) -> None:
        if product.id not in self.products:
            raise RecordNotFound(f"Product {product.id} not found")
        self.products[product.id] = _snapshot(product)

    def decrement_stock(self, product_id: int, quantity: int) -> bool:
        product = self.products.get(product_id)
        if product is None or product.quantity < quantity:
            return False
        product.quantity -= quantity
        return True


class FakeOrderStore:
    def __init__(self):
        self.orders: Dict[int, Order] = {}
        self.items: List[OrderItem] = []

    def create_order(self, order: Order) -> int:
        order.id = len(self.orders) + 1
        self.orders[order.id] = order
        return order.id

    def create_order_item(self, item: OrderItem) -> None:
        if item.order_id not in self.orders:
            raise StoreError(f"Order {item.order_id} does not exist")
        self.items.append(item)

    def get_orders_for_user(self, user_id: int) -> List[Order]:
        return [o for o in self.orders.values() if o.user_id == user_id]

    def get_order_items(self, order_id: int) -> List[OrderItem]:
        return [i for i in self.items if i.order_id == order_id]


class BrokenProductStore(FakeProductStore):
    """Fails every read, as an unreachable database would."""

    def get_products_by_id(self, product_ids) -> List[Product]:
        raise StoreError("connection refused")


class BrokenOrderStore(FakeOrderStore):
    def __init__(self, fail_on_item: bool = False):
        super().__init__()
        self.fail_on_item = fail_on_item

    def create_order(self, order: Order) -> int:
        if not self.fail_on_item:
            raise StoreError("insert into order failed")
        return super().create_order(order)

    def create_order_item(self, item: OrderItem) -> None:
        raise StoreError("insert into orderitem failed")
