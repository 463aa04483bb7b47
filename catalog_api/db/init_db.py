import logging
from catalog_api.db.session import engine, Base

# Imported for their side effect of registering tables on Base.metadata
from catalog_api.models.product import Product  # noqa: F401
from catalog_api.models.variant import ProductVariant  # noqa: F401

logger = logging.getLogger(__name__)

def init_db() -> None:
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ensured: %s", ", ".join(sorted(Base.metadata.tables)))
