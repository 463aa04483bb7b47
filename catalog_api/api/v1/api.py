from fastapi import APIRouter
from catalog_api.api.v1.endpoints import health, inventory, product, utils, variant

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])

api_router.include_router(product.router, prefix="/products", tags=["products"])

api_router.include_router(variant.router, prefix="/variants", tags=["variants"])

api_router.include_router(inventory.router, tags=["inventory"])

api_router.include_router(utils.router, prefix="/utils", tags=["utils"])
