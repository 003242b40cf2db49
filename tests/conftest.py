"""Pytest configuration and fixtures"""
import os
import pytest

from shopcart.cart import Cart
from shopcart.config import get_settings

# Set test environment variables
os.environ.setdefault("LOG_LEVEL", "INFO")


@pytest.fixture(autouse=True)
def reset_settings():
    """Drop cached settings so each test sees its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def cart():
    """Empty, open cart"""
    return Cart()


@pytest.fixture
def filled_cart():
    """Open cart holding Apple, Banana and Orange"""
    cart = Cart()
    cart.add_item("Apple", 1.50)
    cart.add_item("Banana", 2.00)
    cart.add_item("Orange", 1.75)
    return cart


@pytest.fixture
def checked_out_cart():
    """Checked-out cart holding a single Apple"""
    cart = Cart()
    cart.add_item("Apple", 1.50)
    cart.checkout()
    return cart
