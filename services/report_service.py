# services/report_service.py
from decimal import Decimal, ROUND_HALF_UP

from models.order import CheckoutResult, Manifest, Receipt
# report_service.py turns checkout results into console text.
# Amounts are shown as whole numbers with halves rounded up, line weights
# as whole grams and the parcel total in kilograms with one decimal.

SEPARATOR = "-----------------------"


def _whole(value: float) -> int:
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class ReportService:
    def format_manifest(self, manifest: Manifest) -> list[str]:
        if manifest.is_empty:
            return ["No items to ship"]
        lines = ["** Shipment notice **"]
        for line in manifest.lines:
            lines.append(f"{line.qty}x {line.name}\t{_whole(line.weight)}g")
        lines.append(f"Total package weight {manifest.total_weight_kg:.1f}kg")
        return lines

    def format_receipt(self, receipt: Receipt) -> list[str]:
        lines = ["** Checkout receipt **"]
        for it in receipt.items:
            lines.append(f"{it.qty}x {it.name}\t{_whole(it.subtotal)}")
        lines.append(SEPARATOR)
        lines.append(f"Subtotal\t{_whole(receipt.subtotal)}")
        lines.append(f"Shipping\t{_whole(receipt.shipping)}")
        lines.append(f"Amount\t\t{_whole(receipt.amount)}")
        return lines

    def format_result(self, result: CheckoutResult) -> str:
        # Same order as the checkout itself: parcel first, then the bill.
        lines = self.format_manifest(result.manifest)
        lines.append("")
        lines.extend(self.format_receipt(result.receipt))
        lines.append("")
        lines.append(f"Customer current balance after payment: {result.balance_after}")
        return "\n".join(lines)
