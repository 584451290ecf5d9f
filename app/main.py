import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from app.config import settings
from app.database import create_db_and_tables
from app.logging_config import setup_logging
from app.routes import (
    auth,
    checkout,
    health,
    orders,
    products,
    users,
)
from app.stores.base import StoreError

API_PREFIX = "/api/v1"

setup_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Run DB creation ONLY in local
    if settings.env == "local":
        create_db_and_tables()
    logger.info(f"API starting (env={settings.env})")
    yield

app = FastAPI(title="E-commerce API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:5173",
        "http://localhost:3000",
        "http://127.0.0.1:5173",
        "http://127.0.0.1:8000",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    logger.error(f"Store failure on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"detail": "Internal storage error"})


app.include_router(auth.router, prefix=API_PREFIX, tags=["Authentication"])
app.include_router(users.router, prefix=f"{API_PREFIX}/users", tags=["Users"])
app.include_router(products.router, prefix=f"{API_PREFIX}/products", tags=["Products"])
app.include_router(checkout.router, prefix=f"{API_PREFIX}/cart", tags=["Checkout"])
app.include_router(orders.router, prefix=f"{API_PREFIX}/orders", tags=["Orders"])
app.include_router(health.router, prefix=API_PREFIX, tags=["Health"])


@app.get("/")
def root():
    return {
        "auth_endpoints": [
            f"{API_PREFIX}/register", f"{API_PREFIX}/login"
        ],
        "user_endpoints": [
            f"{API_PREFIX}/users/me"
        ],
        "product_endpoints": [
            f"{API_PREFIX}/products", f"{API_PREFIX}/products/{{product_id}}"
        ],
        "checkout_endpoints": [
            f"{API_PREFIX}/cart/checkout"
        ],
        "order_endpoints": [
            f"{API_PREFIX}/orders", f"{API_PREFIX}/orders/{{order_id}}"
        ],
    }
