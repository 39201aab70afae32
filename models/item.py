# models/item.py
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Optional

# Perishable goods stay sellable for this many days after construction.
DEFAULT_GRACE_DAYS = 7


# Item model representing a purchasable good.
# eq=False keeps identity hashing, so two items with equal fields
# are still separate cart reservations.
@dataclass(eq=False)
class Item:
    name: str
    price: float
    quantity: int
    perishable: bool = False
    weight: float = 0.0        # grams, 0 means nothing to ship
    requires_shipping: bool = False
    expiry_date: Optional[date] = None
    grace_days: int = field(default=DEFAULT_GRACE_DAYS, repr=False)

    def __post_init__(self):
        if self.price < 0:
            raise ValueError("The price must not be negative.")
        if self.quantity < 0:
            raise ValueError("The stock quantity must not be negative.")
        if self.weight < 0:
            raise ValueError("The weight must not be negative.")
        # an explicit expiry date is kept as given, even if already past
        if self.perishable and self.expiry_date is None:
            self.expiry_date = date.today() + timedelta(days=self.grace_days)

    def is_expired(self, today: Optional[date] = None) -> bool:
        if not self.perishable or self.expiry_date is None:
            return False
        today = today or date.today()
        return today > self.expiry_date

    @property
    def is_shippable(self) -> bool:
        return self.requires_shipping and self.weight > 0


@dataclass(eq=False)
class Customer:
    balance: float
    name: str = "Customer"

    def __post_init__(self):
        if self.balance < 0:
            raise ValueError("The opening balance must not be negative.")
