from .product import Product
from .order import Order
