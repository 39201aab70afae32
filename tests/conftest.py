import pytest

from models.cart import Cart
from models.item import Customer, Item


@pytest.fixture
def catalog():
    """The reference catalog: two perishables, a TV and a digital card."""
    return {
        "cheese": Item("Cheese", 100.0, 10, True, 400.0, True),
        "biscuits": Item("Biscuits", 150.0, 5, True, 300.0, True),
        "tv": Item("TV", 200.0, 3, False, 700.0, True),
        "scratch_card": Item("ScratchCard", 50.0, 10, False, 0.0, False),
    }


@pytest.fixture
def full_cart(catalog):
    cart = Cart()
    cart.add(catalog["cheese"], 2)
    cart.add(catalog["biscuits"], 1)
    cart.add(catalog["tv"], 1)
    cart.add(catalog["scratch_card"], 1)
    return cart


@pytest.fixture
def rich_customer():
    return Customer(10000.0)
