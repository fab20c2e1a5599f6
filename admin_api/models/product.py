"""
Shape of the products table the API reads and writes.

The handlers talk to the table with plain SQL; this model is what the
create-tables command and the integration tests use to build it.
"""

from sqlalchemy import Column, Integer, Numeric, String, text, TIMESTAMP

from admin_api.core.enums import ProductStatus
from admin_api.database import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    stock = Column(Integer, nullable=False)
    category = Column(String)
    status = Column(String(20), nullable=False, server_default=ProductStatus.ACTIVE.value)

    created_at = Column(
        TIMESTAMP(timezone=False),
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False
    )
    updated_at = Column(
        TIMESTAMP(timezone=False),
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False
    )
