from decimal import Decimal

import pytest

from app.models.order import Order
from app.models.order_item import OrderItem
from app.models.product import Product
from app.stores.base import RecordNotFound
from app.stores.order_store import SQLOrderStore
from app.stores.product_store import SQLProductStore
from app.stores.user_store import SQLUserStore


def test_get_products_by_id_returns_existing_subset(session, products):
    store = SQLProductStore(session)

    found = store.get_products_by_id({products[0].id, 999})

    assert [p.id for p in found] == [products[0].id]


def test_get_products_by_id_with_no_ids(session, products):
    assert SQLProductStore(session).get_products_by_id([]) == []


def test_update_product(session, products):
    store = SQLProductStore(session)
    changed = Product(id=products[0].id, name="Renamed", price=Decimal("1.50"), quantity=3)

    store.update_product(changed)
    session.commit()
    session.expire_all()

    product = store.get_product(products[0].id)
    assert product.name == "Renamed"
    assert product.price == Decimal("1.50")
    assert product.quantity == 3


def test_update_missing_product(session):
    with pytest.raises(RecordNotFound):
        SQLProductStore(session).update_product(Product(id=404, name="Ghost", price=Decimal("1"), quantity=1))


def test_decrement_stock_is_conditional(session, products):
    store = SQLProductStore(session)
    product_id = products[0].id

    assert store.decrement_stock(product_id, 4) is True
    assert store.decrement_stock(product_id, 7) is False
    assert store.decrement_stock(product_id, 6) is True
    assert store.decrement_stock(product_id, 1) is False
    session.commit()
    session.expire_all()

    assert store.get_product(product_id).quantity == 0


def test_decrement_stock_of_missing_product(session):
    assert SQLProductStore(session).decrement_stock(404, 1) is False


def test_order_and_items(session, user, products):
    store = SQLOrderStore(session)

    order_id = store.create_order(Order(user_id=user.id, total=Decimal("19.98")))
    store.create_order_item(
        OrderItem(order_id=order_id, product_id=products[0].id, quantity=2, price=Decimal("9.99"))
    )
    session.commit()

    orders = store.get_orders_for_user(user.id)
    assert [o.id for o in orders] == [order_id]
    assert orders[0].status == "pending"

    items = store.get_order_items(order_id)
    assert [(i.product_id, i.quantity, i.price) for i in items] == [
        (products[0].id, 2, Decimal("9.99"))
    ]


def test_user_lookup(session, user):
    store = SQLUserStore(session)

    assert store.get_user_by_email(user.email).id == user.id
    assert store.get_user_by_id(user.id).email == user.email
    assert store.get_user_by_email("nobody@example.com") is None
