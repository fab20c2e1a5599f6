"""
Shared enums and constants used across the application.
"""

from enum import Enum

# Products with fewer units than this are flagged as low-stock
LOW_STOCK_THRESHOLD = 20


class ProductStatus(str, Enum):
    """Product status values written alongside the stock level"""
    ACTIVE = "active"
    LOW_STOCK = "low-stock"


class OrderStatus(str, Enum):
    """Order statuses the API knows about. The store accepts any text."""
    PENDING = "pending"
