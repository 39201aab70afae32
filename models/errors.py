# models/errors.py
# Errors raised by the cart and checkout when a guard fails.
# They subclass ValueError, so callers that only catch ValueError still work.


class CheckoutError(ValueError):
    pass


class ExpiredItem(CheckoutError):
    def __init__(self, item):
        self.item = item
        super().__init__(f"Product {item.name} has expired!")


class InsufficientStock(CheckoutError):
    def __init__(self, item, available: int, requested: int):
        self.item = item
        self.available = available
        self.requested = requested
        super().__init__(
            f"Insufficient stock for {item.name}. "
            f"Available: {available}, Requested: {requested}"
        )


class EmptyCart(CheckoutError):
    def __init__(self):
        super().__init__("Cart is empty!")


class InsufficientBalance(CheckoutError):
    def __init__(self, required: float, available: float):
        self.required = required
        self.available = available
        super().__init__(
            f"Customer's balance is insufficient. "
            f"Required: {required}, Available: {available}"
        )
