from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field, constr, field_validator
from catalog_api.models.mixins import WeightUnit
from catalog_api.models.variant import InventoryPolicy
from catalog_api.schemas.validators import MAX_PRICE, MAX_QUANTITY, MAX_WEIGHT, reject_null

class ProductVariantCreate(BaseModel):
    product_id: int
    title: constr(strip_whitespace=True, min_length=1, max_length=255)
    sku: constr(strip_whitespace=True, min_length=1, max_length=255)
    price: float = Field(..., ge=0, le=MAX_PRICE)
    compare_price: Optional[float] = Field(None, ge=0, le=MAX_PRICE)
    inventory_quantity: int = Field(0, ge=0, le=MAX_QUANTITY)
    track_inventory: bool = True
    inventory_policy: InventoryPolicy = InventoryPolicy.DENY
    fulfillment_service: constr(max_length=255) = "manual"
    option1: Optional[constr(max_length=255)] = None
    option2: Optional[constr(max_length=255)] = None
    option3: Optional[constr(max_length=255)] = None
    weight: Optional[float] = Field(None, ge=0, le=MAX_WEIGHT)
    weight_unit: WeightUnit = WeightUnit.KG
    barcode: Optional[constr(max_length=255)] = None
    image: Optional[List[constr(max_length=255)]] = Field(None, max_length=5)
    requires_shipping: bool = True
    taxable: bool = True
    position: int = Field(1, ge=1)

    model_config = {"use_enum_values": True}

class ProductVariantUpdate(BaseModel):
    """All fields optional; only the fields sent are written."""
    product_id: Optional[int] = None
    title: Optional[constr(strip_whitespace=True, min_length=1, max_length=255)] = None
    sku: Optional[constr(strip_whitespace=True, min_length=1, max_length=255)] = None
    price: Optional[float] = Field(None, ge=0, le=MAX_PRICE)
    compare_price: Optional[float] = Field(None, ge=0, le=MAX_PRICE)
    inventory_quantity: Optional[int] = Field(None, ge=0, le=MAX_QUANTITY)
    track_inventory: Optional[bool] = None
    inventory_policy: Optional[InventoryPolicy] = None
    fulfillment_service: Optional[constr(max_length=255)] = None
    option1: Optional[constr(max_length=255)] = None
    option2: Optional[constr(max_length=255)] = None
    option3: Optional[constr(max_length=255)] = None
    weight: Optional[float] = Field(None, ge=0, le=MAX_WEIGHT)
    weight_unit: Optional[WeightUnit] = None
    barcode: Optional[constr(max_length=255)] = None
    image: Optional[List[constr(max_length=255)]] = Field(None, max_length=5)
    requires_shipping: Optional[bool] = None
    taxable: Optional[bool] = None
    position: Optional[int] = Field(None, ge=1)

    model_config = {"use_enum_values": True}

    @field_validator(
        "product_id", "title", "sku", "price", "inventory_quantity", "track_inventory",
        "inventory_policy", "fulfillment_service", "weight_unit", "requires_shipping",
        "taxable", "position",
    )
    @classmethod
    def fields_not_null(cls, value):
        return reject_null(value)

class ProductVariant(BaseModel):
    id: int
    product_id: int
    title: str
    sku: str
    price: float
    compare_price: Optional[float] = None
    inventory_quantity: int
    track_inventory: bool
    inventory_policy: str
    fulfillment_service: str
    option1: Optional[str] = None
    option2: Optional[str] = None
    option3: Optional[str] = None
    weight: Optional[float] = None
    weight_unit: str
    barcode: Optional[str] = None
    image: Optional[List[str]] = None
    requires_shipping: bool
    taxable: bool
    position: int
    created_at: datetime
    updated_at: datetime

    is_on_sale: bool
    discount_percentage: Optional[float] = None
    formatted_price: str
    options: List[str] = []
    display_title: str

    model_config = {"from_attributes": True}

class VariantPosition(BaseModel):
    id: int
    position: int = Field(..., ge=1)

class VariantPositionsUpdate(BaseModel):
    variants: List[VariantPosition] = Field(..., min_length=1)
