"""
Checkout pipeline: cart lines in, persisted order out.

    get_cart_items_id  ->  ProductStore.get_products_by_id  ->  evaluate_cart
        ->  CheckoutService.commit_order

The first three steps only read. ``commit_order`` writes stock, the order
header and its items through the stores, which share the caller's session;
the caller commits or rolls back that session as a whole.
"""
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Iterable, List, Sequence, Tuple

from app.constants.order_status import PENDING
from app.models.order import Order, PLACEHOLDER_ADDRESS
from app.models.order_item import OrderItem
from app.models.product import Product
from app.schemas.checkout_schemas import CartItem
from app.services.exceptions import (
    EmptyCart,
    InsufficientStock,
    InvalidQuantity,
    PersistenceFailure,
    ProductUnavailable,
)
from app.stores.base import OrderStore, ProductStore, StoreError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckoutResult:
    order_id: int
    total_price: Decimal


def get_cart_items_id(items: Sequence[CartItem]) -> List[int]:
    """Product ids of the cart in order, duplicates kept.

    Raises InvalidQuantity on the first line that does not order at least one unit.
    """
    product_ids = []
    for item in items:
        if item.quantity <= 0:
            raise InvalidQuantity(item.product_id)
        product_ids.append(item.product_id)
    return product_ids


def check_if_cart_is_in_stock(items: Sequence[CartItem], products: Dict[int, Product]):
    if len(items) == 0:
        raise EmptyCart()

    for item in items:
        product = products.get(item.product_id)
        if product is None:
            raise ProductUnavailable(item.product_id)

        if product.quantity < item.quantity:
            raise InsufficientStock(product.id, product.name, item.quantity)


def calculate_total_price(items: Sequence[CartItem], products: Dict[int, Product]) -> Decimal:
    total = Decimal("0")
    for item in items:
        total += Decimal(str(products[item.product_id].price)) * item.quantity
    return total


def evaluate_cart(
    products: Iterable[Product], items: Sequence[CartItem]
) -> Tuple[Dict[int, Product], Decimal]:
    """Validate the cart against the fetched products and price it.

    Prices come from ``products`` as fetched, so the total is what the
    customer saw when the checkout started.
    """
    product_map = {product.id: product for product in products}

    check_if_cart_is_in_stock(items, product_map)

    return product_map, calculate_total_price(items, product_map)


class CheckoutService:
    def __init__(self, product_store: ProductStore, order_store: OrderStore):
        self.product_store = product_store
        self.order_store = order_store

    def checkout(self, items: Sequence[CartItem], user_id: int) -> CheckoutResult:
        logger.info(f"Checkout started for user {user_id} with {len(items)} line(s)")

        try:
            product_ids = get_cart_items_id(items)
            if not product_ids:
                raise EmptyCart()

            products = self._fetch_products(set(product_ids))
            product_map, total_price = evaluate_cart(products, items)
        except (InvalidQuantity, EmptyCart, ProductUnavailable, InsufficientStock) as e:
            logger.warning(f"Checkout rejected for user {user_id}: {e}")
            raise

        return self.commit_order(product_map, items, total_price, user_id)

    def commit_order(
        self,
        products: Dict[int, Product],
        items: Sequence[CartItem],
        total_price: Decimal,
        user_id: int,
    ) -> CheckoutResult:
        for item in items:
            try:
                decremented = self.product_store.decrement_stock(item.product_id, item.quantity)
            except StoreError as e:
                raise PersistenceFailure(f"Failed to update stock: {e}") from e

            if not decremented:
                # stock moved since evaluation, or the cart repeats this product
                product = products[item.product_id]
                logger.warning(
                    f"Stock for product {product.id} ran out during checkout of user {user_id}"
                )
                raise InsufficientStock(product.id, product.name, item.quantity)

        try:
            order_id = self.order_store.create_order(
                Order(
                    user_id=user_id,
                    total=total_price,
                    status=PENDING,
                    address=PLACEHOLDER_ADDRESS,
                )
            )

            for item in items:
                self.order_store.create_order_item(
                    OrderItem(
                        order_id=order_id,
                        product_id=item.product_id,
                        quantity=item.quantity,
                        price=products[item.product_id].price,
                    )
                )
        except StoreError as e:
            raise PersistenceFailure(f"Failed to create order: {e}") from e

        logger.info(f"Order {order_id} placed by user {user_id}, total {total_price}")
        return CheckoutResult(order_id=order_id, total_price=total_price)

    def _fetch_products(self, product_ids) -> List[Product]:
        try:
            return self.product_store.get_products_by_id(product_ids)
        except StoreError as e:
            raise PersistenceFailure(f"Failed to load products: {e}") from e
