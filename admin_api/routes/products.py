"""
API routes for product management.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException

from admin_api.core.exceptions import DataAccessError, ProductNotFoundError
from admin_api.database import Database
from admin_api.dependencies import get_database
from admin_api.schemas.product import ProductCreate, ProductRestock, ProductUpdate
from admin_api.services.product_service import ProductService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("")
async def list_products(db: Database = Depends(get_database)):
    try:
        return await ProductService(db).list_products()
    except DataAccessError as e:
        logger.error(f"Error fetching products: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch products")


@router.post("", status_code=201)
async def create_product(
    product_data: ProductCreate,
    db: Database = Depends(get_database)
):
    """
    Create a new product. Status is derived from the stock level.
    """
    try:
        return await ProductService(db).create_product(product_data)
    except DataAccessError as e:
        logger.error(f"Error creating product: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to create product")


@router.put("/{product_id}")
async def update_product(
    product_id: int,
    product_data: ProductUpdate,
    db: Database = Depends(get_database)
):
    """
    Replace a product's fields and recompute its status.
    """
    try:
        return await ProductService(db).update_product(product_id, product_data)
    except ProductNotFoundError:
        raise HTTPException(status_code=404, detail="Product not found")
    except DataAccessError as e:
        logger.error(f"Error updating product {product_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to update product")


@router.delete("/{product_id}")
async def delete_product(
    product_id: int,
    db: Database = Depends(get_database)
):
    try:
        product = await ProductService(db).delete_product(product_id)
    except ProductNotFoundError:
        raise HTTPException(status_code=404, detail="Product not found")
    except DataAccessError as e:
        logger.error(f"Error deleting product {product_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to delete product")
    return {"message": "Product deleted", "product": product}


@router.patch("/{product_id}/restock")
async def restock_product(
    product_id: int,
    restock_data: ProductRestock,
    db: Database = Depends(get_database)
):
    """
    Add (or with a negative quantity, remove) stock. Status is left untouched.
    """
    try:
        return await ProductService(db).restock(product_id, restock_data.quantity)
    except ProductNotFoundError:
        raise HTTPException(status_code=404, detail="Product not found")
    except DataAccessError as e:
        logger.error(f"Error restocking product {product_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to restock product")
