# admin_api/models/order.py
from sqlalchemy import Column, Integer, Numeric, String, text, TIMESTAMP

from admin_api.core.enums import OrderStatus
from admin_api.database import Base


class Order(Base):
    """Orders are created elsewhere; the API only lists them and changes status"""
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True)
    customer_name = Column(String)
    total = Column(Numeric(10, 2))
    status = Column(String(20), nullable=False, server_default=OrderStatus.PENDING.value)
    date = Column(
        TIMESTAMP(timezone=False),
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False
    )
