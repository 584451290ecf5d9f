import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session
from app.database import get_session
from app.models.user import User
from app.schemas.checkout_schemas import CartCheckoutPayload, CheckoutResponse
from app.services.checkout_service import CheckoutService
from app.services.exceptions import CheckoutError
from app.stores.order_store import SQLOrderStore
from app.stores.product_store import SQLProductStore
from app.utils.token import get_current_user

logger = logging.getLogger(__name__)

router = APIRouter()


def get_checkout_service(session: Session = Depends(get_session)) -> CheckoutService:
    return CheckoutService(SQLProductStore(session), SQLOrderStore(session))


@router.post("/checkout", response_model=CheckoutResponse)
def checkout(
    payload: CartCheckoutPayload,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
    service: CheckoutService = Depends(get_checkout_service),
):
    user_id = current_user.id

    # stock, order and items are committed together or not at all
    try:
        result = service.checkout(payload.items, user_id)
        session.commit()
    except CheckoutError as e:
        session.rollback()
        logger.info(f"Checkout for user {user_id} rolled back: {e}")
        raise HTTPException(e.status_code, str(e)) from e
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"Could not commit checkout for user {user_id}: {e}")
        raise HTTPException(500, "Failed to place order") from e

    return CheckoutResponse(order_id=result.order_id, total_price=result.total_price)
