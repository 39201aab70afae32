# models/cart.py
import logging
from datetime import date
from typing import Optional

from models.errors import ExpiredItem, InsufficientStock
from models.item import Item

logger = logging.getLogger("storefront.cart")


# Cart model holding reservations: item -> reserved quantity.
# Reserved quantities are taken out of the item's stock on add.
class Cart:
    def __init__(self):
        self.reservations: dict[Item, int] = {}

    def add(self, item: Item, quantity: int = 1, today: Optional[date] = None) -> None:
        if quantity <= 0:
            raise ValueError("The quantity must be a positive number.")
        if item.is_expired(today):
            logger.info(f"Rejected {item.name}: expired on {item.expiry_date}")
            raise ExpiredItem(item)
        if item.quantity < quantity:
            logger.info(
                f"Rejected {item.name}: available={item.quantity}, requested={quantity}"
            )
            raise InsufficientStock(item, item.quantity, quantity)

        self.reservations[item] = self.reservations.get(item, 0) + quantity
        item.quantity -= quantity
        logger.debug(f"Added {quantity}x {item.name} to cart")

    def is_empty(self) -> bool:
        return not self.reservations

    def lines(self) -> list[tuple[Item, int]]:
        return list(self.reservations.items())

    def clear(self):
        # stock is not restored, it was already taken at add time
        self.reservations.clear()
