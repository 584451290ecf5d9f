from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session
from app.database import get_session
from app.dependencies.admin import require_admin
from app.models.product import Product
from app.models.user import User
from app.schemas.product_schemas import ProductCreate, ProductRead
from app.stores.product_store import SQLProductStore

router = APIRouter()


def validate_product(payload: ProductCreate):
    if not payload.name.strip():
        raise HTTPException(400, "Product name is required")
    if payload.price <= 0:
        raise HTTPException(400, "Product price must be greater than zero")
    if payload.quantity < 0:
        raise HTTPException(400, "Product quantity cannot be negative")


@router.get("", response_model=List[ProductRead])
def list_products(session: Session = Depends(get_session)):
    return SQLProductStore(session).get_products()


@router.get("/{product_id}", response_model=ProductRead)
def get_product(product_id: int, session: Session = Depends(get_session)):
    product = SQLProductStore(session).get_product(product_id)
    if not product:
        raise HTTPException(404, "Product not found")
    return product


@router.post("", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
def create_product(
    payload: ProductCreate,
    session: Session = Depends(get_session),
    admin: User = Depends(require_admin),
):
    validate_product(payload)

    # id is always assigned by the database
    product = SQLProductStore(session).create_product(
        Product(
            name=payload.name.strip(),
            description=payload.description,
            image=payload.image,
            price=payload.price,
            quantity=payload.quantity,
        )
    )
    session.commit()
    session.refresh(product)
    return product
