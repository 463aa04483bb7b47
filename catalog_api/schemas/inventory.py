from typing import List
from pydantic import BaseModel, Field
from catalog_api.models.inventory import InventoryOperation
from catalog_api.schemas.validators import MAX_QUANTITY

class InventoryUpdate(BaseModel):
    quantity: int = Field(..., ge=0, le=MAX_QUANTITY)
    operation: InventoryOperation

class InventoryItem(InventoryUpdate):
    id: int

class ProductInventoryBulkUpdate(BaseModel):
    products: List[InventoryItem] = Field(..., min_length=1)

class VariantInventoryBulkUpdate(BaseModel):
    variants: List[InventoryItem] = Field(..., min_length=1)
