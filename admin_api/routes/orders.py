"""Orders routes - listing and status updates."""
import logging

from fastapi import APIRouter, Depends, HTTPException

from admin_api.core.exceptions import DataAccessError, OrderNotFoundError
from admin_api.database import Database
from admin_api.dependencies import get_database
from admin_api.schemas.order import OrderStatusUpdate
from admin_api.services.order_service import OrderService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.get("")
async def list_orders(db: Database = Depends(get_database)):
    """All orders, newest first."""
    try:
        return await OrderService(db).list_orders()
    except DataAccessError as e:
        logger.error(f"Error fetching orders: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch orders")


@router.put("/{order_id}")
async def update_order_status(
    order_id: int,
    status_data: OrderStatusUpdate,
    db: Database = Depends(get_database)
):
    try:
        return await OrderService(db).update_order_status(order_id, status_data.status)
    except OrderNotFoundError:
        raise HTTPException(status_code=404, detail="Order not found")
    except DataAccessError as e:
        logger.error(f"Error updating order {order_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to update order")
