# main.py
# Console driver: runs the reference checkout scenarios one after another.
from datetime import date, timedelta

from models.cart import Cart
from models.errors import CheckoutError
from models.item import Customer, Item
from services.checkout_service import CheckoutService
from services.pricing_service import PricingService
from services.report_service import ReportService
from utils.config import load_settings
from utils.logger import setup_logger


class CheckoutDemo:
    def __init__(self, settings=None):
        self.settings = settings or load_settings()
        self.logger = setup_logger(self.settings.log_dir)
        self.checkout_service = CheckoutService(PricingService(self.settings.shipping_fee))
        self.report = ReportService()

    def item(self, name, price, quantity, perishable, weight, requires_shipping, expiry_date=None):
        return Item(name, price, quantity, perishable, weight, requires_shipping,
                    expiry_date=expiry_date, grace_days=self.settings.expiry_grace_days)

    def add(self, cart: Cart, item: Item, qty: int) -> bool:
        try:
            cart.add(item, qty)
        except CheckoutError as e:
            print(f"Error: {e}")
            return False
        print(f"Added {qty}x {item.name} to cart")
        return True

    def checkout(self, customer: Customer, cart: Cart) -> bool:
        try:
            result = self.checkout_service.checkout(customer, cart)
        except CheckoutError as e:
            self.logger.info(f"Driver: checkout failed: {e}")
            print(f"Error: {e}")
            return False
        print(self.report.format_result(result))
        print("Checkout completed successfully!")
        return True

    def run(self):
        print("=== E-COMMERCE SYSTEM TEST ===\n")

        print("TEST 1: Normal Checkout")
        customer = Customer(400.0)
        cart = Cart()
        cheese = self.item("Cheese", 100.0, 10, True, 400.0, True)
        biscuits = self.item("Biscuits", 150.0, 5, True, 300.0, True)
        tv = self.item("TV", 200.0, 3, False, 700.0, True)
        scratch_card = self.item("ScratchCard", 50.0, 10, False, 0.0, False)
        self.add(cart, cheese, 2)
        self.add(cart, biscuits, 1)
        self.add(cart, tv, 1)
        self.add(cart, scratch_card, 1)
        self.checkout(customer, cart)

        print("\nTEST 2: Empty Cart")
        self.checkout(customer, Cart())

        print("\nTEST 3: Insufficient Balance")
        poor_customer = Customer(50.0)
        expensive_cart = Cart()
        self.add(expensive_cart, tv, 1)
        self.checkout(poor_customer, expensive_cart)

        print("\nTEST 4: Insufficient Stock")
        # two TVs were already reserved by the failed checkouts above
        self.add(Cart(), tv, 5)

        print("\nTEST 5: Expired Product")
        expired_cheese = self.item("Expired Cheese", 100.0, 5, True, 400.0, True,
                                   expiry_date=date.today() - timedelta(days=1))
        self.add(Cart(), expired_cheese, 1)

        print("\nTEST 6: Digital Product Only")
        digital_customer = Customer(100.0)
        digital_cart = Cart()
        self.add(digital_cart, scratch_card, 2)
        self.checkout(digital_customer, digital_cart)


def main():
    CheckoutDemo().run()


if __name__ == "__main__":
    main()
