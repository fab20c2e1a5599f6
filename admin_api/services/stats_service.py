# admin_api/services/stats_service.py
"""
Dashboard statistics

Counts and inventory value computed by the store in a single read.
"""

from typing import Any, Dict

from admin_api.core.enums import LOW_STOCK_THRESHOLD, OrderStatus
from admin_api.database import Database

# SUM over zero products is NULL and is returned as such
STATS_SQL = """
    SELECT
        COUNT(*) AS total_products,
        SUM(price * stock) AS total_inventory_value,
        COUNT(CASE WHEN stock < :low_stock_threshold THEN 1 END) AS low_stock_items,
        (SELECT COUNT(*) FROM orders WHERE status = :pending_status) AS pending_orders
    FROM products
"""


class StatsService:
    def __init__(self, db: Database):
        self.db = db

    async def get_stats(self) -> Dict[str, Any]:
        rows = await self.db.execute(
            STATS_SQL,
            {
                "low_stock_threshold": LOW_STOCK_THRESHOLD,
                "pending_status": OrderStatus.PENDING.value,
            },
        )
        return rows[0]
