from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session
from app.database import get_session
from app.models.order import Order
from app.models.user import User
from app.schemas.checkout_schemas import OrderDetail, OrderItemRead, OrderRead
from app.stores.order_store import SQLOrderStore
from app.utils.token import get_current_user

router = APIRouter()


@router.get("", response_model=List[OrderRead])
def list_my_orders(
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user)
):
    return SQLOrderStore(session).get_orders_for_user(current_user.id)


@router.get("/{order_id}", response_model=OrderDetail)
def get_order(
    order_id: int,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user)
):
    order = session.get(Order, order_id)

    if not order or order.user_id != current_user.id:
        raise HTTPException(404, "Order not found")

    items = SQLOrderStore(session).get_order_items(order.id)

    return OrderDetail(
        id=order.id,
        status=order.status,
        total=order.total,
        address=order.address,
        created_at=order.created_at,
        items=[
            OrderItemRead(
                product_id=i.product_id,
                quantity=i.quantity,
                price=i.price,
                line_total=i.price * i.quantity,
            )
            for i in items
        ],
    )
