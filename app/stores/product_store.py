import logging
from typing import Iterable, List, Optional

from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from app.models.product import Product
from app.stores.base import RecordNotFound, StoreError

logger = logging.getLogger(__name__)


class SQLProductStore:
    def __init__(self, session: Session):
        self.session = session

    def get_products(self) -> List[Product]:
        try:
            return list(self.session.exec(select(Product).order_by(Product.id)).all())
        except SQLAlchemyError as e:
            raise StoreError(f"Could not list products: {e}") from e

    def get_product(self, product_id: int) -> Optional[Product]:
        try:
            return self.session.get(Product, product_id)
        except SQLAlchemyError as e:
            raise StoreError(f"Could not load product {product_id}: {e}") from e

    def get_products_by_id(self, product_ids: Iterable[int]) -> List[Product]:
        ids = list(product_ids)
        if not ids:
            return []

        try:
            return list(
                self.session.exec(select(Product).where(Product.id.in_(ids))).all()
            )
        except SQLAlchemyError as e:
            raise StoreError(f"Could not load products {ids}: {e}") from e

    def create_product(self, product: Product) -> Product:
        try:
            self.session.add(product)
            self.session.flush()
            self.session.refresh(product)
        except SQLAlchemyError as e:
            raise StoreError(f"Could not create product: {e}") from e

        logger.info(f"Created product {product.id} ({product.name})")
        return product

    def update_product(self, product: Product) -> None:
        try:
            existing = self.session.get(Product, product.id)
            if existing is None:
                raise RecordNotFound(f"Product {product.id} not found")

            existing.name = product.name
            existing.description = product.description
            existing.image = product.image
            existing.price = product.price
            existing.quantity = product.quantity
            self.session.add(existing)
            self.session.flush()
        except SQLAlchemyError as e:
            raise StoreError(f"Could not update product {product.id}: {e}") from e

    def decrement_stock(self, product_id: int, quantity: int) -> bool:
        # single conditional UPDATE so two checkouts cannot both take the last units
        statement = (
            update(Product)
            .where(Product.id == product_id, Product.quantity >= quantity)
            .values(quantity=Product.quantity - quantity)
            .execution_options(synchronize_session=False)
        )
        try:
            result = self.session.execute(statement)
        except SQLAlchemyError as e:
            raise StoreError(f"Could not update stock for product {product_id}: {e}") from e

        return result.rowcount == 1
