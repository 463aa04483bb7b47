from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from catalog_api.core.config import settings
from catalog_api.core.logging import setup_logging
from catalog_api.api.errors import register_exception_handlers
from catalog_api.api.v1.api import api_router
from catalog_api.db.init_db import init_db

setup_logging(settings.LOG_LEVEL)

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Product catalog API with variants and inventory tracking",
    version=settings.VERSION,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include API router with prefix
app.include_router(api_router, prefix=settings.API_V1_STR)

# Create database tables
init_db()

@app.get("/")
def root():
    return {"message": f"Welcome to the {settings.PROJECT_NAME}"}
