# models/order.py
from dataclasses import dataclass, field
# Value objects produced by a checkout: shipment manifest and receipt.


@dataclass
class ShipmentLine:
    name: str
    qty: int
    weight: float      # unit weight * qty, grams


@dataclass
class Manifest:
    lines: list[ShipmentLine] = field(default_factory=list)
    total_weight: float = 0.0

    @property
    def is_empty(self) -> bool:
        # nothing to ship, not an error
        return not self.lines

    @property
    def total_weight_kg(self) -> float:
        return round(self.total_weight / 1000, 1)


@dataclass
class ReceiptLine:
    name: str
    qty: int
    unit_price: float
    subtotal: float


@dataclass
class Receipt:
    items: list[ReceiptLine]
    subtotal: float
    shipping: float
    amount: float


@dataclass
class CheckoutResult:
    manifest: Manifest
    receipt: Receipt
    balance_before: float
    balance_after: float
