# services/pricing_service.py

from __future__ import annotations

from models.item import Item
from services.shipping_service import total_shippable_weight

DEFAULT_SHIPPING_FEE = 30.0


class PricingService:
    # Computes the money side of a checkout.
    # Shipping is a flat fee charged once whenever anything in the cart
    # has shipping weight; it does not grow with the weight.

    def __init__(self, shipping_fee: float = DEFAULT_SHIPPING_FEE):
        if shipping_fee < 0:
            raise ValueError("The shipping fee must not be negative.")
        self.shipping_fee = float(shipping_fee)

    def line_total(self, item: Item, qty: int) -> float:
        return item.price * qty

    def subtotal(self, reservations: dict[Item, int]) -> float:
        return sum(self.line_total(item, qty) for item, qty in reservations.items())

    def shipping(self, reservations: dict[Item, int]) -> float:
        if total_shippable_weight(reservations) > 0:
            return self.shipping_fee
        return 0.0
