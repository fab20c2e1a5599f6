"""
Order listing and status changes. Orders are written by other systems; this
service never creates or deletes them.
"""

from typing import Any, Dict, List, Optional

from admin_api.core.exceptions import OrderNotFoundError
from admin_api.database import Database

# Newest first; orders sharing a date come back newest id first
LIST_ORDERS_SQL = "SELECT * FROM orders ORDER BY date DESC, id DESC"

UPDATE_ORDER_STATUS_SQL = """
    UPDATE orders
    SET status = :status
    WHERE id = :id
    RETURNING *
"""


class OrderService:
    def __init__(self, db: Database):
        self.db = db

    async def list_orders(self) -> List[Dict[str, Any]]:
        return await self.db.execute(LIST_ORDERS_SQL)

    async def update_order_status(self, order_id: int, status: Optional[str]) -> Dict[str, Any]:
        """
        Set the status of one order.

        Raises:
            OrderNotFoundError: If no order has this id
        """
        rows = await self.db.execute(UPDATE_ORDER_STATUS_SQL, {"id": order_id, "status": status})
        if not rows:
            raise OrderNotFoundError(f"Order with ID {order_id} not found")
        return rows[0]
