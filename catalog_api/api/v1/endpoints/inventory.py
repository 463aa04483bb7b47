from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from catalog_api.db.session import get_db
from catalog_api.models.product import Product as ProductModel
from catalog_api.models.variant import ProductVariant as VariantModel
from catalog_api.schemas.common import BulkResponse, DataResponse
from catalog_api.schemas.inventory import InventoryUpdate, ProductInventoryBulkUpdate, VariantInventoryBulkUpdate
from catalog_api.schemas.product import Product, ProductVariantWithProduct
from catalog_api.services.inventory import adjust_inventory, bulk_adjust_inventory

router = APIRouter()

BULK_COMPLETED = "Bulk inventory update completed"

# Bulk routes are declared first so "bulk" is never matched as an id

@router.patch("/inventory/products/bulk", response_model=BulkResponse)
def bulk_update_product_inventory(payload: ProductInventoryBulkUpdate, db: Session = Depends(get_db)):
    """
    Apply each item independently. Failed items are reported in the results
    and do not undo the items that succeeded.
    """
    results = bulk_adjust_inventory(db, ProductModel, payload.products)
    return {"success": True, "message": BULK_COMPLETED, "results": results}

@router.patch("/inventory/variants/bulk", response_model=BulkResponse)
def bulk_update_variant_inventory(payload: VariantInventoryBulkUpdate, db: Session = Depends(get_db)):
    results = bulk_adjust_inventory(db, VariantModel, payload.variants)
    return {"success": True, "message": BULK_COMPLETED, "results": results}

@router.patch("/products/{product_id}/inventory", response_model=DataResponse[Product])
@router.patch("/inventory/products/{product_id}", response_model=DataResponse[Product])
def update_product_inventory(product_id: int, payload: InventoryUpdate, db: Session = Depends(get_db)):
    product = adjust_inventory(db, ProductModel, product_id, payload.operation, payload.quantity)
    return {
        "success": True,
        "message": "Product inventory updated successfully",
        "data": Product.model_validate(product),
    }

@router.patch("/variants/{variant_id}/inventory", response_model=DataResponse[ProductVariantWithProduct])
@router.patch("/inventory/variants/{variant_id}", response_model=DataResponse[ProductVariantWithProduct])
def update_variant_inventory(variant_id: int, payload: InventoryUpdate, db: Session = Depends(get_db)):
    """Decrements honour the variant's inventory policy and tracking flag."""
    variant = adjust_inventory(db, VariantModel, variant_id, payload.operation, payload.quantity)
    return {
        "success": True,
        "message": "Variant inventory updated successfully",
        "data": ProductVariantWithProduct.model_validate(variant),
    }
