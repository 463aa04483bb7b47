"""
Filtering, sorting and pagination for the product and variant listings.

Filters are literal equality checks: a value outside an enum (for example
``status=unknown``) simply matches nothing. Sort fields are restricted to an
allow-list per resource, enforced by the ``Literal`` types below when the
endpoint parses its query string.
"""
import math
from typing import Any, List, Literal, Optional, Tuple, Type
from sqlalchemy import or_
from sqlalchemy.orm import Query
from catalog_api.core.config import settings
from catalog_api.models.product import Product
from catalog_api.models.variant import ProductVariant
from catalog_api.schemas.common import Pagination

SortOrder = Literal["asc", "desc"]

ProductSortField = Literal[
    "id", "name", "sku", "price", "compare_price", "inventory_quantity", "status",
    "vendor", "product_type", "weight", "created_at", "updated_at",
]

VariantSortField = Literal[
    "id", "product_id", "title", "sku", "price", "compare_price", "inventory_quantity",
    "option1", "option2", "option3", "weight", "position", "created_at", "updated_at",
]

def filter_products(
    query: Query,
    status: Optional[str] = None,
    vendor: Optional[str] = None,
    product_type: Optional[str] = None,
    in_stock: Optional[bool] = None,
    search: Optional[str] = None,
) -> Query:
    if status is not None:
        query = query.filter(Product.status == status)
    if vendor is not None:
        query = query.filter(Product.vendor == vendor)
    if product_type is not None:
        query = query.filter(Product.product_type == product_type)
    # Checks the product's own column, not total_inventory across variants
    if in_stock:
        query = query.filter(Product.inventory_quantity > 0)
    if search:
        query = query.filter(
            or_(
                Product.name.icontains(search, autoescape=True),
                Product.description.icontains(search, autoescape=True),
                Product.sku.icontains(search, autoescape=True),
            )
        )
    return query

def filter_variants(
    query: Query,
    product_id: Optional[int] = None,
    option1: Optional[str] = None,
    option2: Optional[str] = None,
    option3: Optional[str] = None,
    in_stock: Optional[bool] = None,
    search: Optional[str] = None,
) -> Query:
    if product_id is not None:
        query = query.filter(ProductVariant.product_id == product_id)
    if option1 is not None:
        query = query.filter(ProductVariant.option1 == option1)
    if option2 is not None:
        query = query.filter(ProductVariant.option2 == option2)
    if option3 is not None:
        query = query.filter(ProductVariant.option3 == option3)
    if in_stock:
        query = query.filter(ProductVariant.inventory_quantity > 0)
    if search:
        query = query.filter(
            or_(
                ProductVariant.title.icontains(search, autoescape=True),
                ProductVariant.sku.icontains(search, autoescape=True),
                ProductVariant.barcode.icontains(search, autoescape=True),
            )
        )
    return query

def apply_sort(query: Query, model: Type, sort_by: str, sort_order: SortOrder) -> Query:
    column = getattr(model, sort_by)
    ordering = column.desc() if sort_order == "desc" else column.asc()
    tiebreak = model.id.desc() if sort_order == "desc" else model.id.asc()
    return query.order_by(ordering, tiebreak)

def normalize_paging(page: Optional[int], per_page: Optional[int]) -> Tuple[int, int]:
    p = page if page and page > 0 else 1
    pp = per_page if per_page and per_page > 0 else settings.DEFAULT_PER_PAGE
    return p, min(pp, settings.MAX_PER_PAGE)

def paginate(query: Query, page: Optional[int], per_page: Optional[int]) -> Tuple[List[Any], Pagination]:
    page, per_page = normalize_paging(page, per_page)
    total = query.order_by(None).count()
    items = query.offset((page - 1) * per_page).limit(per_page).all()
    pagination = Pagination(
        current_page=page,
        per_page=per_page,
        total=total,
        last_page=max(1, math.ceil(total / per_page)),
    )
    return items, pagination
