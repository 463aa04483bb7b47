from typing import Optional
from pydantic import BaseModel, Field, constr

class GenerateSkuRequest(BaseModel):
    prefix: constr(strip_whitespace=True, min_length=1, max_length=20) = "PRD"

class GenerateSkuResponse(BaseModel):
    success: bool = True
    sku: str

class GenerateBarcodeRequest(BaseModel):
    length: int = Field(13, ge=1, le=64)

class GenerateBarcodeResponse(BaseModel):
    success: bool = True
    barcode: str

class ConvertWeightRequest(BaseModel):
    weight: float = Field(..., ge=0)
    from_unit: str = Field(..., alias="from")
    to_unit: str = Field(..., alias="to")

class WeightValue(BaseModel):
    weight: float
    unit: str

class ConvertWeightResponse(BaseModel):
    success: bool = True
    original: WeightValue
    converted: WeightValue

class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
    database: str
    timestamp: str
    error: Optional[str] = None
