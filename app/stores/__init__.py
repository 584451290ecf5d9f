from app.stores.base import (
    OrderStore,
    ProductStore,
    RecordNotFound,
    StoreError,
    UserStore,
)
from app.stores.order_store import SQLOrderStore
from app.stores.product_store import SQLProductStore
from app.stores.user_store import SQLUserStore
