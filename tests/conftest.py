import os

# must be set before app.config is imported
os.environ.setdefault("ENV", "test")
os.environ.setdefault("SQLITE_PATH", ":memory:")

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from app.database import get_session
from app.main import app
from app.models.product import Product
from app.models.user import User
from app.utils.hash import hash_password
from app.utils.token import JWTConfig, create_access_token, get_jwt_config

TEST_JWT_CONFIG = JWTConfig(secret_key="test-secret", algorithm="HS256", access_token_expire_minutes=60)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def jwt_config():
    return TEST_JWT_CONFIG


@pytest.fixture
def client(engine, jwt_config):
    def override_get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_jwt_config] = lambda: jwt_config

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture
def make_user(session):
    def _make_user(email="john@example.com", password="secret123", role="user", can_login=True):
        user = User(
            first_name="John",
            last_name="Doe",
            email=email,
            password=hash_password(password),
            role=role,
            can_login=can_login,
        )
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    return _make_user


@pytest.fixture
def user(make_user):
    return make_user()


@pytest.fixture
def admin(make_user):
    return make_user(email="admin@example.com", role="admin")


@pytest.fixture
def auth_headers(jwt_config):
    def _auth_headers(user):
        token = create_access_token({"user_id": user.id}, jwt_config)
        return {"Authorization": f"Bearer {token}"}

    return _auth_headers


@pytest.fixture
def products(session):
    """The two products most tests check out against."""
    items = [
        Product(name="Test Product 1", price=Decimal("9.99"), quantity=10),
        Product(name="Test Product 2", price=Decimal("19.99"), quantity=20),
    ]
    for product in items:
        session.add(product)
    session.commit()
    for product in items:
        session.refresh(product)
    return items
