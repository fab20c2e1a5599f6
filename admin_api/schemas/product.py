"""
Request bodies for the product endpoints.

Every field is optional on purpose: a missing value goes to the store as NULL
and the store decides whether that is acceptable.
"""

from decimal import Decimal
from typing import Optional

from admin_api.schemas.base import BaseSchema


class ProductBase(BaseSchema):
    name: Optional[str] = None
    price: Optional[Decimal] = None
    stock: Optional[int] = None
    category: Optional[str] = None


class ProductCreate(ProductBase):
    pass


class ProductUpdate(ProductBase):
    """Full replacement of the editable fields (PUT)"""
    pass


class ProductRestock(BaseSchema):
    # Negative values take stock away
    quantity: Optional[int] = None
