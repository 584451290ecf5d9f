import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from app.models.order import Order
from app.models.order_item import OrderItem
from app.stores.base import StoreError

logger = logging.getLogger(__name__)


class SQLOrderStore:
    def __init__(self, session: Session):
        self.session = session

    def create_order(self, order: Order) -> int:
        try:
            self.session.add(order)
            self.session.flush()
        except SQLAlchemyError as e:
            raise StoreError(f"Could not create order: {e}") from e

        return order.id

    def create_order_item(self, item: OrderItem) -> None:
        try:
            self.session.add(item)
            self.session.flush()
        except SQLAlchemyError as e:
            raise StoreError(
                f"Could not add product {item.product_id} to order {item.order_id}: {e}"
            ) from e

    def get_orders_for_user(self, user_id: int) -> List[Order]:
        statement = (
            select(Order)
            .where(Order.user_id == user_id)
            .order_by(Order.created_at.desc(), Order.id.desc())
        )
        try:
            return list(self.session.exec(statement).all())
        except SQLAlchemyError as e:
            raise StoreError(f"Could not list orders for user {user_id}: {e}") from e

    def get_order_items(self, order_id: int) -> List[OrderItem]:
        statement = select(OrderItem).where(OrderItem.order_id == order_id).order_by(OrderItem.id)
        try:
            return list(self.session.exec(statement).all())
        except SQLAlchemyError as e:
            raise StoreError(f"Could not list items of order {order_id}: {e}") from e
