"""
Purpose: CRUD and restocking for the products table.

Every method issues exactly one statement through the Database and returns the
affected row(s) as plain dicts. Missing rows on update, delete and restock
raise ProductNotFoundError; anything the store rejects comes back as
DataAccessError from the Database layer.

The low-stock rule lives here: create and update write the status derived from
the stock they write. Restock only adjusts the stock column and leaves status
as it was.
"""

from typing import Any, Dict, List, Optional

from admin_api.core.enums import LOW_STOCK_THRESHOLD, ProductStatus
from admin_api.core.exceptions import ProductNotFoundError
from admin_api.database import Database
from admin_api.schemas.product import ProductCreate, ProductUpdate

LIST_PRODUCTS_SQL = "SELECT * FROM products ORDER BY id ASC"

INSERT_PRODUCT_SQL = """
    INSERT INTO products (name, price, stock, category, status)
    VALUES (:name, :price, :stock, :category, :status)
    RETURNING *
"""

UPDATE_PRODUCT_SQL = """
    UPDATE products
    SET name = :name, price = :price, stock = :stock, category = :category,
        status = :status, updated_at = CURRENT_TIMESTAMP
    WHERE id = :id
    RETURNING *
"""

DELETE_PRODUCT_SQL = "DELETE FROM products WHERE id = :id RETURNING *"

# Increment happens in the store so concurrent restocks never lose an update
RESTOCK_PRODUCT_SQL = """
    UPDATE products
    SET stock = stock + :quantity
    WHERE id = :id
    RETURNING *
"""


def status_for_stock(stock: Optional[int]) -> ProductStatus:
    """Low-stock below the threshold, active otherwise (including unknown stock)."""
    if stock is not None and stock < LOW_STOCK_THRESHOLD:
        return ProductStatus.LOW_STOCK
    return ProductStatus.ACTIVE


class ProductService:
    def __init__(self, db: Database):
        self.db = db

    async def list_products(self) -> List[Dict[str, Any]]:
        return await self.db.execute(LIST_PRODUCTS_SQL)

    async def create_product(self, product_data: ProductCreate) -> Dict[str, Any]:
        """
        Insert a product with its status derived from stock.

        Returns:
            The created row, including the store-assigned id
        """
        params = product_data.to_params()
        params["status"] = status_for_stock(product_data.stock).value
        rows = await self.db.execute(INSERT_PRODUCT_SQL, params)
        return rows[0]

    async def update_product(self, product_id: int, product_data: ProductUpdate) -> Dict[str, Any]:
        """
        Replace name, price, stock and category, recompute status and touch updated_at.

        Raises:
            ProductNotFoundError: If no product has this id
        """
        params = product_data.to_params()
        params["status"] = status_for_stock(product_data.stock).value
        params["id"] = product_id
        rows = await self.db.execute(UPDATE_PRODUCT_SQL, params)
        if not rows:
            raise ProductNotFoundError(f"Product with ID {product_id} not found")
        return rows[0]

    async def delete_product(self, product_id: int) -> Dict[str, Any]:
        """Delete a product and return the row as it was before deletion."""
        rows = await self.db.execute(DELETE_PRODUCT_SQL, {"id": product_id})
        if not rows:
            raise ProductNotFoundError(f"Product with ID {product_id} not found")
        return rows[0]

    async def restock(self, product_id: int, quantity: Optional[int]) -> Dict[str, Any]:
        rows = await self.db.execute(
            RESTOCK_PRODUCT_SQL,
            {"id": product_id, "quantity": quantity},
        )
        if not rows:
            raise ProductNotFoundError(f"Product with ID {product_id} not found")
        return rows[0]
