from typing import Optional

from admin_api.schemas.base import BaseSchema


class OrderStatusUpdate(BaseSchema):
    status: Optional[str] = None
