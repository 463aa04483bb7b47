import random
import time
from typing import Optional
from fastapi import APIRouter, HTTPException
from catalog_api.models.mixins import WeightUnit
from catalog_api.schemas.utils import (
    ConvertWeightRequest,
    ConvertWeightResponse,
    GenerateBarcodeRequest,
    GenerateBarcodeResponse,
    GenerateSkuRequest,
    GenerateSkuResponse,
)

router = APIRouter()

# Conversion rates to grams
GRAMS_PER_UNIT = {
    WeightUnit.G.value: 1,
    WeightUnit.KG.value: 1000,
    WeightUnit.LB.value: 453.592,
    WeightUnit.OZ.value: 28.3495,
}

def convert_weight(weight: float, from_unit: str, to_unit: str) -> float:
    if from_unit not in GRAMS_PER_UNIT or to_unit not in GRAMS_PER_UNIT:
        raise ValueError(f"Invalid weight unit: {from_unit} -> {to_unit}")
    grams = weight * GRAMS_PER_UNIT[from_unit]
    return round(grams / GRAMS_PER_UNIT[to_unit], 4)

@router.post("/generate-sku", response_model=GenerateSkuResponse)
async def generate_sku(payload: Optional[GenerateSkuRequest] = None):
    """SKU of the form PREFIX-<unix timestamp>-<3 random digits>."""
    prefix = payload.prefix if payload else GenerateSkuRequest().prefix
    suffix = str(random.randint(0, 999)).zfill(3)
    return {"success": True, "sku": f"{prefix}-{int(time.time())}-{suffix}".upper()}

@router.post("/generate-barcode", response_model=GenerateBarcodeResponse)
async def generate_barcode(payload: Optional[GenerateBarcodeRequest] = None):
    length = payload.length if payload else GenerateBarcodeRequest().length
    return {"success": True, "barcode": "".join(str(random.randint(0, 9)) for _ in range(length))}

@router.post("/convert-weight", response_model=ConvertWeightResponse)
async def convert_weight_units(payload: ConvertWeightRequest):
    try:
        converted = convert_weight(payload.weight, payload.from_unit, payload.to_unit)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid weight unit")
    return {
        "success": True,
        "original": {"weight": payload.weight, "unit": payload.from_unit},
        "converted": {"weight": converted, "unit": payload.to_unit},
    }
