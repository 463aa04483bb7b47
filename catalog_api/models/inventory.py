import enum
from sqlalchemy import Boolean, Column, Integer
from sqlalchemy.ext.hybrid import hybrid_method

class InventoryOperation(str, enum.Enum):
    SET = "set"
    INCREMENT = "increment"
    DECREMENT = "decrement"

class InventoryTracked:
    """
    Inventory columns and the rules the adjustment service relies on.

    ``can_decrement`` works both on a loaded row and on the mapped class, where
    it produces the SQL predicate for a conditional decrement. Models override
    it when their eligibility rule is more than a plain quantity comparison.
    """

    not_found_message = "Resource not found"
    inventory_label = "Item"

    inventory_quantity = Column(Integer, nullable=False, default=0)
    track_inventory = Column(Boolean, nullable=False, default=True)

    def current_quantity(self) -> int:
        return self.inventory_quantity or 0

    @hybrid_method
    def can_decrement(self, quantity: int) -> bool:
        return self.current_quantity() >= quantity

    @can_decrement.expression
    def can_decrement(cls, quantity: int):
        return cls.inventory_quantity >= quantity

    @classmethod
    def inventory_delta(cls, operation: InventoryOperation, quantity: int) -> dict:
        """Column values for an UPDATE applying ``operation`` to the stored quantity."""
        if operation == InventoryOperation.SET:
            return {cls.inventory_quantity: quantity}
        if operation == InventoryOperation.INCREMENT:
            return {cls.inventory_quantity: cls.inventory_quantity + quantity}
        if operation == InventoryOperation.DECREMENT:
            return {cls.inventory_quantity: cls.inventory_quantity - quantity}
        raise ValueError(f"Unknown inventory operation: {operation}")
