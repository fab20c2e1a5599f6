"""
Core module exports.
"""
from .enums import ProductStatus, OrderStatus, LOW_STOCK_THRESHOLD

from .exceptions import (
    BaseServiceError,
    NotFoundError,
    ProductNotFoundError,
    OrderNotFoundError,
    DataAccessError,
)
