from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field, ValidationInfo, constr, field_validator
from catalog_api.models.mixins import WeightUnit
from catalog_api.models.product import ProductStatus
from catalog_api.schemas.variant import ProductVariant
from catalog_api.schemas.validators import (
    MAX_PRICE,
    MAX_QUANTITY,
    MAX_WEIGHT,
    check_distinct,
    check_sku,
    reject_null,
)

class SeoMetadata(BaseModel):
    title: Optional[constr(max_length=255)] = None
    description: Optional[constr(max_length=500)] = None
    keywords: Optional[constr(max_length=255)] = None

class ProductBase(BaseModel):
    name: constr(strip_whitespace=True, min_length=2, max_length=255)
    description: Optional[constr(strip_whitespace=True, max_length=5000)] = None
    sku: constr(strip_whitespace=True, min_length=2, max_length=100)
    price: float = Field(..., ge=0, le=MAX_PRICE)
    compare_price: Optional[float] = Field(None, ge=0, le=MAX_PRICE)
    inventory_quantity: int = Field(0, ge=0, le=MAX_QUANTITY)
    track_inventory: bool = True
    status: ProductStatus = ProductStatus.ACTIVE
    vendor: Optional[constr(strip_whitespace=True, max_length=255)] = None
    product_type: Optional[constr(strip_whitespace=True, max_length=255)] = None
    tags: Optional[List[constr(max_length=50)]] = Field(None, max_length=20)
    images: Optional[List[constr(max_length=255)]] = Field(None, max_length=10)
    weight: Optional[float] = Field(None, ge=0, le=MAX_WEIGHT)
    weight_unit: WeightUnit = WeightUnit.KG
    requires_shipping: bool = True
    seo: Optional[SeoMetadata] = None

    model_config = {"use_enum_values": True}

class ProductCreate(ProductBase):
    @field_validator("sku")
    @classmethod
    def normalize_sku(cls, value: str) -> str:
        return check_sku(value).upper()

    @field_validator("compare_price")
    @classmethod
    def compare_price_above_price(cls, value: Optional[float], info: ValidationInfo) -> Optional[float]:
        price = info.data.get("price")
        if value is not None and price is not None and value <= price:
            raise ValueError("Compare price should be higher than the regular price to show savings.")
        return value

    @field_validator("tags")
    @classmethod
    def distinct_tags(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        return check_distinct(value)

class ProductUpdate(BaseModel):
    """All fields optional; only the fields sent are written."""
    name: Optional[constr(strip_whitespace=True, min_length=2, max_length=255)] = None
    description: Optional[constr(strip_whitespace=True, max_length=5000)] = None
    sku: Optional[constr(strip_whitespace=True, min_length=2, max_length=100)] = None
    price: Optional[float] = Field(None, ge=0, le=MAX_PRICE)
    compare_price: Optional[float] = Field(None, ge=0, le=MAX_PRICE)
    inventory_quantity: Optional[int] = Field(None, ge=0, le=MAX_QUANTITY)
    track_inventory: Optional[bool] = None
    status: Optional[ProductStatus] = None
    vendor: Optional[constr(strip_whitespace=True, max_length=255)] = None
    product_type: Optional[constr(strip_whitespace=True, max_length=255)] = None
    tags: Optional[List[constr(max_length=50)]] = Field(None, max_length=20)
    images: Optional[List[constr(max_length=255)]] = Field(None, max_length=10)
    weight: Optional[float] = Field(None, ge=0, le=MAX_WEIGHT)
    weight_unit: Optional[WeightUnit] = None
    requires_shipping: Optional[bool] = None
    seo: Optional[SeoMetadata] = None

    model_config = {"use_enum_values": True}

    @field_validator("sku")
    @classmethod
    def valid_sku(cls, value: Optional[str]) -> Optional[str]:
        return check_sku(reject_null(value))

    @field_validator("tags")
    @classmethod
    def distinct_tags(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        return check_distinct(value)

    @field_validator(
        "name", "price", "inventory_quantity", "track_inventory", "status",
        "weight_unit", "requires_shipping",
    )
    @classmethod
    def fields_not_null(cls, value):
        return reject_null(value)

class ProductSummary(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    sku: str
    price: float
    compare_price: Optional[float] = None
    inventory_quantity: int
    track_inventory: bool
    status: str
    vendor: Optional[str] = None
    product_type: Optional[str] = None
    tags: Optional[List[str]] = None
    images: Optional[List[str]] = None
    weight: Optional[float] = None
    weight_unit: str
    requires_shipping: bool
    seo: Optional[SeoMetadata] = None
    created_at: datetime
    updated_at: datetime

    is_on_sale: bool
    discount_percentage: Optional[float] = None
    formatted_price: str

    model_config = {"from_attributes": True}

class Product(ProductSummary):
    total_inventory: int
    variants: List[ProductVariant] = []

class ProductVariantWithProduct(ProductVariant):
    product: Optional[ProductSummary] = None
