# services/checkout_service.py

import logging
from datetime import date
from typing import Optional

from models.cart import Cart
from models.errors import EmptyCart, ExpiredItem, InsufficientBalance
from models.item import Customer
from models.order import CheckoutResult, Receipt, ReceiptLine
from services.pricing_service import PricingService
from services.shipping_service import ShippingService

logger = logging.getLogger("storefront.checkout")


class CheckoutService:
    def __init__(self, pricing: Optional[PricingService] = None,
                 shipping: Optional[ShippingService] = None):
        self.pricing = pricing or PricingService()
        self.shipping = shipping or ShippingService()

    def checkout(self, customer: Customer, cart: Cart, today: Optional[date] = None) -> CheckoutResult:
        # Every guard runs before anything is changed, so a failed checkout
        # leaves the customer, the cart and the stock exactly as they were.
        if cart.is_empty():
            logger.info("Checkout refused: cart is empty")
            raise EmptyCart()

        # time may have passed since the items were added
        for item in cart.reservations:
            if item.is_expired(today):
                logger.info(f"Checkout refused: {item.name} expired on {item.expiry_date}")
                raise ExpiredItem(item)

        subtotal = self.pricing.subtotal(cart.reservations)
        shipping = self.pricing.shipping(cart.reservations)
        amount = subtotal + shipping

        if customer.balance < amount:
            logger.info(
                f"Checkout refused: required={amount}, available={customer.balance}"
            )
            raise InsufficientBalance(amount, customer.balance)

        # Manifest first, then the receipt, then settle.
        manifest = self.shipping.build_manifest(cart.reservations)
        receipt = Receipt(
            items=[
                ReceiptLine(
                    name=item.name,
                    qty=qty,
                    unit_price=item.price,
                    subtotal=self.pricing.line_total(item, qty),
                )
                for item, qty in cart.lines()
            ],
            subtotal=subtotal,
            shipping=shipping,
            amount=amount,
        )

        balance_before = customer.balance
        customer.balance -= amount
        cart.clear()

        logger.info(
            f"Checkout success: subtotal={subtotal}, shipping={shipping}, "
            f"amount={amount}, balance_now={customer.balance}"
        )
        return CheckoutResult(
            manifest=manifest,
            receipt=receipt,
            balance_before=balance_before,
            balance_after=customer.balance,
        )


def checkout(customer: Customer, cart: Cart, today: Optional[date] = None) -> CheckoutResult:
    # Shortcut using the default flat shipping fee.
    return CheckoutService().checkout(customer, cart, today=today)
