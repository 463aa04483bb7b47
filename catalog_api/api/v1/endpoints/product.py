import logging
from typing import Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session, selectinload
from catalog_api.api import deps
from catalog_api.core.exceptions import OperationFailedError
from catalog_api.db.session import get_db
from catalog_api.models.product import Product as ProductModel
from catalog_api.schemas.common import CollectionResponse, DataResponse, MessageResponse, PageResponse
from catalog_api.schemas.product import Product, ProductCreate, ProductUpdate
from catalog_api.schemas.variant import ProductVariant
from catalog_api.services.listing import ProductSortField, SortOrder, apply_sort, filter_products, paginate
from catalog_api.services.validation import ensure_unique_sku

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("", response_model=PageResponse[Product])
def get_products(
    db: Session = Depends(get_db),
    status: Optional[str] = None,
    vendor: Optional[str] = None,
    product_type: Optional[str] = None,
    in_stock: Optional[bool] = None,
    search: Optional[str] = None,
    sort_by: ProductSortField = "created_at",
    sort_order: SortOrder = "desc",
    per_page: Optional[int] = None,
    page: Optional[int] = None,
):
    """List products with their variants, filtered, sorted and paginated."""
    query = db.query(ProductModel).options(selectinload(ProductModel.variants))
    query = filter_products(
        query,
        status=status,
        vendor=vendor,
        product_type=product_type,
        in_stock=in_stock,
        search=search,
    )
    query = apply_sort(query, ProductModel, sort_by, sort_order)
    products, pagination = paginate(query, page, per_page)
    return {
        "success": True,
        "data": [Product.model_validate(product) for product in products],
        "pagination": pagination,
    }

@router.post("", response_model=DataResponse[Product], status_code=201)
def create_product(product: ProductCreate, db: Session = Depends(get_db)):
    ensure_unique_sku(db, ProductModel, product.sku)

    try:
        db_product = ProductModel(**product.model_dump())
        db.add(db_product)
        db.commit()
        db.refresh(db_product)
    except Exception as e:
        db.rollback()
        logger.exception("Failed to create product %s", product.sku)
        raise OperationFailedError("Failed to create product", str(e))

    logger.info("Created product %s (%s)", db_product.id, db_product.sku)
    return {
        "success": True,
        "message": "Product created successfully",
        "data": Product.model_validate(db_product),
    }

@router.get("/{product_id}", response_model=DataResponse[Product])
def get_product(db_product: ProductModel = Depends(deps.get_product_or_404)):
    """Get a product with its variants."""
    return {"success": True, "data": Product.model_validate(db_product)}

@router.api_route("/{product_id}", methods=["PUT", "PATCH"], response_model=DataResponse[Product])
def update_product(
    product: ProductUpdate,
    db_product: ProductModel = Depends(deps.get_product_or_404),
    db: Session = Depends(get_db),
):
    """Partial update: only the fields present in the body are written."""
    changes = product.model_dump(exclude_unset=True)
    if "sku" in changes:
        ensure_unique_sku(db, ProductModel, changes["sku"], ignore_id=db_product.id)

    try:
        for key, value in changes.items():
            setattr(db_product, key, value)
        db.commit()
        db.refresh(db_product)
    except Exception as e:
        db.rollback()
        logger.exception("Failed to update product %s", db_product.id)
        raise OperationFailedError("Failed to update product", str(e))

    return {
        "success": True,
        "message": "Product updated successfully",
        "data": Product.model_validate(db_product),
    }

@router.delete("/{product_id}", response_model=MessageResponse)
def delete_product(
    db_product: ProductModel = Depends(deps.get_product_or_404),
    db: Session = Depends(get_db),
):
    """Delete a product; its variants go with it."""
    product_id = db_product.id
    try:
        db.delete(db_product)
        db.commit()
    except Exception as e:
        db.rollback()
        logger.exception("Failed to delete product %s", product_id)
        raise OperationFailedError("Failed to delete product", str(e))

    logger.info("Deleted product %s", product_id)
    return {"success": True, "message": "Product deleted successfully"}

@router.get("/{product_id}/variants", response_model=CollectionResponse[ProductVariant])
def get_product_variants(db_product: ProductModel = Depends(deps.get_product_or_404)):
    """Variants of one product ordered by position."""
    variants = sorted(db_product.variants, key=lambda variant: (variant.position, variant.id))
    return {"success": True, "data": [ProductVariant.model_validate(variant) for variant in variants]}
