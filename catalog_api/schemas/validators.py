import re
from typing import Any, List, Optional

SKU_PATTERN = re.compile(r"^[A-Za-z0-9\-_]+$")
MAX_PRICE = 999999.99
MAX_QUANTITY = 999999
MAX_WEIGHT = 999999

def check_sku(value: Optional[str]) -> Optional[str]:
    if value is not None and not SKU_PATTERN.match(value):
        raise ValueError("SKU can only contain letters, numbers, hyphens, and underscores.")
    return value

def check_distinct(value: Optional[List[str]]) -> Optional[List[str]]:
    if value is not None and len(set(value)) != len(value):
        raise ValueError("Duplicate tags are not allowed.")
    return value

def reject_null(value: Any) -> Any:
    """For partial updates: a field may be omitted but not cleared."""
    if value is None:
        raise ValueError("This field may not be null.")
    return value
