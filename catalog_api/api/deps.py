from fastapi import Depends
from sqlalchemy.orm import Session, selectinload
from catalog_api.core.exceptions import NotFoundError
from catalog_api.db.session import get_db
from catalog_api.models.product import Product as ProductModel
from catalog_api.models.variant import ProductVariant as VariantModel

def get_product_or_404(product_id: int, db: Session = Depends(get_db)) -> ProductModel:
    product = (
        db.query(ProductModel)
        .options(selectinload(ProductModel.variants))
        .filter(ProductModel.id == product_id)
        .first()
    )
    if not product:
        raise NotFoundError(ProductModel.not_found_message)
    return product

def get_variant_or_404(variant_id: int, db: Session = Depends(get_db)) -> VariantModel:
    variant = (
        db.query(VariantModel)
        .options(selectinload(VariantModel.product))
        .filter(VariantModel.id == variant_id)
        .first()
    )
    if not variant:
        raise NotFoundError(VariantModel.not_found_message)
    return variant
