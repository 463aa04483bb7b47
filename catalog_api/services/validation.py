"""
Checks against stored rows that run before any write.

Schema-level rules live on the Pydantic models; these cover what a schema
cannot know, such as whether a SKU is taken or an id exists.
"""
from typing import Iterable, Optional, Type
from sqlalchemy.orm import Session
from catalog_api.core.exceptions import ValidationFailedError

SKU_TAKEN = "This SKU already exists. Please choose a different one."

def ensure_unique_sku(db: Session, model: Type, sku: str, ignore_id: Optional[int] = None) -> None:
    query = db.query(model.id).filter(model.sku == sku)
    if ignore_id is not None:
        query = query.filter(model.id != ignore_id)
    if query.first() is not None:
        raise ValidationFailedError({"sku": [SKU_TAKEN]})

def ensure_exists(db: Session, model: Type, object_id: int, field: str) -> None:
    if db.query(model.id).filter(model.id == object_id).first() is None:
        raise ValidationFailedError({field: [f"The selected {field.replace('_', ' ')} is invalid."]})

def ensure_all_exist(db: Session, model: Type, object_ids: Iterable[int], field_template: str) -> None:
    """``field_template`` is formatted with each list index, e.g. ``variants.{}.id``."""
    object_ids = list(object_ids)
    found = {row.id for row in db.query(model.id).filter(model.id.in_(object_ids))}
    errors = {
        field_template.format(index): ["The selected id is invalid."]
        for index, object_id in enumerate(object_ids)
        if object_id not in found
    }
    if errors:
        raise ValidationFailedError(errors)
