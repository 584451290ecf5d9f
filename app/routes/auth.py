import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session
from app.database import get_session
from app.models.user import User
from app.schemas.user_schemas import UserRegister, UserLogin, Token, UserResponse
from app.stores.user_store import SQLUserStore
from app.utils.hash import hash_password, verify_password
from app.utils.token import JWTConfig, create_access_token, get_jwt_config

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register_user(payload: UserRegister, session: Session = Depends(get_session)):
    users = SQLUserStore(session)

    if users.get_user_by_email(payload.email):
        raise HTTPException(400, f"User with email {payload.email} already exists")

    user = users.create_user(
        User(
            first_name=payload.first_name,
            last_name=payload.last_name,
            email=payload.email,
            password=hash_password(payload.password),
        )
    )
    session.commit()
    logger.info(f"Registered user {user.id}")

    return UserResponse(
        message="Registration successful.",
        user_id=user.id,
        email=user.email,
        role=user.role,
    )


@router.post("/login", response_model=Token)
def login(
    payload: UserLogin,
    session: Session = Depends(get_session),
    config: JWTConfig = Depends(get_jwt_config),
):
    user = SQLUserStore(session).get_user_by_email(payload.email)

    if not user or not verify_password(payload.password, user.password):
        raise HTTPException(400, "Invalid email or password")

    token = create_access_token({"user_id": user.id}, config)
    return Token(access_token=token, token_type="bearer")
