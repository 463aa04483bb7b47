import logging
from typing import Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session, selectinload
from catalog_api.api import deps
from catalog_api.core.exceptions import NotFoundError, OperationFailedError
from catalog_api.db.session import get_db
from catalog_api.models.product import Product as ProductModel
from catalog_api.models.variant import ProductVariant as VariantModel
from catalog_api.schemas.common import DataResponse, MessageResponse, PageResponse
from catalog_api.schemas.product import ProductVariantWithProduct
from catalog_api.schemas.variant import ProductVariantCreate, ProductVariantUpdate, VariantPositionsUpdate
from catalog_api.services.listing import SortOrder, VariantSortField, apply_sort, filter_variants, paginate
from catalog_api.services.positions import update_positions
from catalog_api.services.validation import ensure_exists, ensure_unique_sku

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("", response_model=PageResponse[ProductVariantWithProduct])
def get_variants(
    db: Session = Depends(get_db),
    product_id: Optional[int] = None,
    option1: Optional[str] = None,
    option2: Optional[str] = None,
    option3: Optional[str] = None,
    in_stock: Optional[bool] = None,
    search: Optional[str] = None,
    sort_by: VariantSortField = "position",
    sort_order: SortOrder = "asc",
    per_page: Optional[int] = None,
    page: Optional[int] = None,
):
    """List variants with their parent product, filtered, sorted and paginated."""
    query = db.query(VariantModel).options(selectinload(VariantModel.product))
    query = filter_variants(
        query,
        product_id=product_id,
        option1=option1,
        option2=option2,
        option3=option3,
        in_stock=in_stock,
        search=search,
    )
    query = apply_sort(query, VariantModel, sort_by, sort_order)
    variants, pagination = paginate(query, page, per_page)
    return {
        "success": True,
        "data": [ProductVariantWithProduct.model_validate(variant) for variant in variants],
        "pagination": pagination,
    }

@router.post("", response_model=DataResponse[ProductVariantWithProduct], status_code=201)
def create_variant(variant: ProductVariantCreate, db: Session = Depends(get_db)):
    """Create a variant under an existing product."""
    ensure_unique_sku(db, VariantModel, variant.sku)
    product = db.query(ProductModel).filter(ProductModel.id == variant.product_id).first()
    if not product:
        raise NotFoundError(ProductModel.not_found_message)

    try:
        db_variant = VariantModel(**variant.model_dump())
        db.add(db_variant)
        db.commit()
        db.refresh(db_variant)
    except Exception as e:
        db.rollback()
        logger.exception("Failed to create variant %s", variant.sku)
        raise OperationFailedError("Failed to create product variant", str(e))

    logger.info("Created variant %s (%s) for product %s", db_variant.id, db_variant.sku, product.id)
    return {
        "success": True,
        "message": "Product variant created successfully",
        "data": ProductVariantWithProduct.model_validate(db_variant),
    }

# Declared before /{variant_id} so "positions" is not parsed as an id
@router.patch("/positions", response_model=MessageResponse)
def update_variant_positions(payload: VariantPositionsUpdate, db: Session = Depends(get_db)):
    update_positions(db, payload.variants)
    return {"success": True, "message": "Variant positions updated successfully"}

@router.get("/{variant_id}", response_model=DataResponse[ProductVariantWithProduct])
def get_variant(db_variant: VariantModel = Depends(deps.get_variant_or_404)):
    """
    Get a specific variant by ID.
    """
    return {"success": True, "data": ProductVariantWithProduct.model_validate(db_variant)}

@router.api_route(
    "/{variant_id}", methods=["PUT", "PATCH"], response_model=DataResponse[ProductVariantWithProduct]
)
def update_variant(
    variant: ProductVariantUpdate,
    db_variant: VariantModel = Depends(deps.get_variant_or_404),
    db: Session = Depends(get_db),
):
    changes = variant.model_dump(exclude_unset=True)
    if "product_id" in changes:
        ensure_exists(db, ProductModel, changes["product_id"], "product_id")
    if "sku" in changes:
        ensure_unique_sku(db, VariantModel, changes["sku"], ignore_id=db_variant.id)

    try:
        for key, value in changes.items():
            setattr(db_variant, key, value)
        db.commit()
        db.refresh(db_variant)
    except Exception as e:
        db.rollback()
        logger.exception("Failed to update variant %s", db_variant.id)
        raise OperationFailedError("Failed to update product variant", str(e))

    return {
        "success": True,
        "message": "Product variant updated successfully",
        "data": ProductVariantWithProduct.model_validate(db_variant),
    }

@router.delete("/{variant_id}", response_model=MessageResponse)
def delete_variant(
    db_variant: VariantModel = Depends(deps.get_variant_or_404),
    db: Session = Depends(get_db),
):
    variant_id = db_variant.id
    try:
        db.delete(db_variant)
        db.commit()
    except Exception as e:
        db.rollback()
        logger.exception("Failed to delete variant %s", variant_id)
        raise OperationFailedError("Failed to delete product variant", str(e))

    logger.info("Deleted variant %s", variant_id)
    return {"success": True, "message": "Product variant deleted successfully"}
