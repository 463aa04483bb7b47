"""
Inventory adjustments for products and variants.

Every adjustment is a single UPDATE. A decrement carries the model's
``can_decrement`` predicate in its WHERE clause, so the eligibility check and
the write cannot interleave with another request; zero affected rows means
the stock was insufficient, or for set and increment that the row is gone.
Batches apply and commit items one at a time and never roll back earlier
items.
"""
import logging
from typing import Iterable, Type
from sqlalchemy.orm import Session
from catalog_api.core.exceptions import (
    CatalogError,
    InsufficientInventoryError,
    NotFoundError,
    OperationFailedError,
)
from catalog_api.models.inventory import InventoryOperation
from catalog_api.schemas.common import BulkResults
from catalog_api.schemas.inventory import InventoryItem

logger = logging.getLogger(__name__)

INVENTORY_FAILED = "Failed to update inventory"

def adjust_inventory(
    db: Session,
    model: Type,
    target_id: int,
    operation: InventoryOperation,
    quantity: int,
):
    """Apply ``operation`` to one row and return it reloaded."""
    try:
        target = db.query(model).filter(model.id == target_id).first()
        if not target:
            raise NotFoundError(model.not_found_message)

        criteria = [model.id == target_id]
        if operation == InventoryOperation.DECREMENT:
            criteria.append(model.can_decrement(quantity))

        updated = (
            db.query(model)
            .filter(*criteria)
            .update(model.inventory_delta(operation, quantity), synchronize_session=False)
        )
        if not updated:
            db.rollback()
            if operation != InventoryOperation.DECREMENT:
                # Row deleted between the lookup and the update
                raise NotFoundError(model.not_found_message)
            logger.warning(
                "Rejected %s decrement of %s for id %s: insufficient inventory",
                model.inventory_label, quantity, target_id,
            )
            raise InsufficientInventoryError()
        db.commit()
        db.refresh(target)
    except CatalogError:
        raise
    except Exception as e:
        db.rollback()
        logger.exception("Inventory update failed for %s id %s", model.inventory_label, target_id)
        raise OperationFailedError(INVENTORY_FAILED, str(e))

    logger.info(
        "%s id %s inventory %s %s -> %s",
        model.inventory_label, target_id, operation.value, quantity, target.inventory_quantity,
    )
    return target

def bulk_adjust_inventory(db: Session, model: Type, items: Iterable[InventoryItem]) -> BulkResults:
    results = BulkResults()
    for item in items:
        try:
            adjust_inventory(db, model, item.id, item.operation, item.quantity)
        except CatalogError as e:
            detail = getattr(e, "error", None) or e.message
            results.failed += 1
            results.errors.append(f"{model.inventory_label} ID {item.id}: {detail}")
            logger.warning("Bulk inventory item failed: %s ID %s: %s", model.inventory_label, item.id, detail)
        except Exception as e:
            db.rollback()
            results.failed += 1
            results.errors.append(f"{model.inventory_label} ID {item.id}: {e}")
            logger.exception("Bulk inventory item failed: %s ID %s", model.inventory_label, item.id)
        else:
            results.successful += 1
    return results
