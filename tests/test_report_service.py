"""Unit tests for the console text rendering."""

from models.order import CheckoutResult, Manifest, Receipt, ReceiptLine, ShipmentLine
from services.report_service import ReportService


def make_result():
    manifest = Manifest(
        lines=[ShipmentLine("Cheese", 2, 800.0), ShipmentLine("TV", 1, 700.0)],
        total_weight=1500.0,
    )
    receipt = Receipt(
        items=[ReceiptLine("Cheese", 2, 100.0, 200.0), ReceiptLine("TV", 1, 200.0, 200.0)],
        subtotal=400.0,
        shipping=30.0,
        amount=430.0,
    )
    return CheckoutResult(manifest, receipt, balance_before=1000.0, balance_after=570.0)


class TestReportService:

    def test_manifest_text(self):
        lines = ReportService().format_manifest(make_result().manifest)
        assert lines == [
            "** Shipment notice **",
            "2x Cheese\t800g",
            "1x TV\t700g",
            "Total package weight 1.5kg",
        ]

    def test_empty_manifest_text(self):
        assert ReportService().format_manifest(Manifest()) == ["No items to ship"]

    def test_receipt_amounts_are_rounded(self):
        receipt = Receipt([ReceiptLine("Gum", 3, 0.33, 0.99)], 0.99, 0.0, 0.99)
        lines = ReportService().format_receipt(receipt)
        assert lines[1] == "3x Gum\t1"
        assert lines[-1] == "Amount\t\t1"

    def test_result_prints_manifest_before_receipt(self):
        text = ReportService().format_result(make_result())
        assert text.index("Shipment notice") < text.index("Checkout receipt")
        assert "Subtotal\t400" in text
        assert "Shipping\t30" in text
        assert text.endswith("Customer current balance after payment: 570.0")

    def test_halves_round_up(self):
        receipt = Receipt(
            [ReceiptLine("A", 5, 0.5, 2.5), ReceiptLine("B", 7, 0.5, 3.5)],
            6.0, 0.0, 6.0,
        )
        lines = ReportService().format_receipt(receipt)
        assert lines[1:3] == ["5x A\t3", "7x B\t4"]
