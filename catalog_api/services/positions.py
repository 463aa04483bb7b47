import logging
from typing import Iterable
from sqlalchemy.orm import Session
from catalog_api.core.exceptions import OperationFailedError
from catalog_api.models.variant import ProductVariant
from catalog_api.schemas.variant import VariantPosition
from catalog_api.services.validation import ensure_all_exist

logger = logging.getLogger(__name__)

def update_positions(db: Session, positions: Iterable[VariantPosition]) -> int:
    """
    Overwrite the position of each listed variant.

    Positions are taken as given: duplicates and gaps within a product are
    allowed. Each row is committed on its own, so a failure part-way through
    keeps the rows already written.
    """
    positions = list(positions)
    ensure_all_exist(db, ProductVariant, [entry.id for entry in positions], "variants.{}.id")

    try:
        for entry in positions:
            db.query(ProductVariant).filter(ProductVariant.id == entry.id).update(
                {ProductVariant.position: entry.position}, synchronize_session=False
            )
            db.commit()
    except Exception as e:
        db.rollback()
        logger.exception("Variant position update failed")
        raise OperationFailedError("Failed to update positions", str(e))

    logger.info("Updated positions for %d variants", len(positions))
    return len(positions)
