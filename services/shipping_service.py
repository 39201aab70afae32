# services/shipping_service.py
from models.item import Item
from models.order import Manifest, ShipmentLine


def shippable_lines(reservations: dict[Item, int]) -> list[tuple[Item, int]]:
    # Only physical goods with a real weight end up in a parcel.
    return [(item, qty) for item, qty in reservations.items() if item.is_shippable]


def total_shippable_weight(reservations: dict[Item, int]) -> float:
    return sum(item.weight * qty for item, qty in shippable_lines(reservations))


class ShippingService:
    # Builds the shipment manifest for the shippable part of a cart.
    # Reads the reservations only; the cart is never changed here.

    def build_manifest(self, reservations: dict[Item, int]) -> Manifest:
        lines: list[ShipmentLine] = []
        total = 0.0

        for item, qty in shippable_lines(reservations):
            line_weight = item.weight * qty
            total += line_weight
            lines.append(ShipmentLine(name=item.name, qty=qty, weight=line_weight))

        return Manifest(lines=lines, total_weight=total)
