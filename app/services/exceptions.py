"""Failures a checkout can end with.

Each carries the HTTP status the API answers with; the pipeline itself only
raises them and never formats a response.
"""


class CheckoutError(Exception):
    status_code = 400


class InvalidQuantity(CheckoutError):
    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(f"Invalid quantity for the product {product_id}")


class EmptyCart(CheckoutError):
    def __init__(self):
        super().__init__("Cart is empty")


class ProductUnavailable(CheckoutError):
    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(
            f"Product {product_id} is not available in the store, please refresh your cart"
        )


class InsufficientStock(CheckoutError):
    def __init__(self, product_id: int, name: str, requested: int):
        self.product_id = product_id
        self.requested = requested
        super().__init__(f"Product {name} is not available in the quantity requested")


class PersistenceFailure(CheckoutError):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
