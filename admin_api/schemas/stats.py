from typing import Optional

from admin_api.schemas.base import BaseSchema


class StatsRead(BaseSchema):
    total_products: int
    # NULL when there are no products
    total_inventory_value: Optional[float] = None
    low_stock_items: int
    pending_orders: int
