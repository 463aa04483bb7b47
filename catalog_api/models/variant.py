import enum
from typing import List
from sqlalchemy import Boolean, Column, ForeignKey, Index, Integer, JSON, Numeric, String, or_
from sqlalchemy.ext.hybrid import hybrid_method
from sqlalchemy.orm import relationship
from catalog_api.db.session import Base
from catalog_api.models.inventory import InventoryTracked
from catalog_api.models.mixins import PricedMixin, TimestampMixin, WeightUnit

class InventoryPolicy(str, enum.Enum):
    DENY = "deny"
    CONTINUE = "continue"

class ProductVariant(InventoryTracked, PricedMixin, TimestampMixin, Base):
    __tablename__ = "product_variants"

    not_found_message = "Product variant not found"
    inventory_label = "Variant"

    id = Column(Integer, primary_key=True, index=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False)
    title = Column(String(255), nullable=False)
    sku = Column(String(255), unique=True, nullable=False)
    inventory_policy = Column(String(20), nullable=False, default=InventoryPolicy.DENY.value)
    fulfillment_service = Column(String(255), nullable=False, default="manual")
    option1 = Column(String(255))
    option2 = Column(String(255))
    option3 = Column(String(255))
    weight = Column(Numeric(8, 2, asdecimal=False))
    weight_unit = Column(String(10), nullable=False, default=WeightUnit.KG.value)
    barcode = Column(String(255))
    image = Column(JSON)
    requires_shipping = Column(Boolean, nullable=False, default=True)
    taxable = Column(Boolean, nullable=False, default=True)
    position = Column(Integer, nullable=False, default=1)

    product = relationship("Product", back_populates="variants")

    __table_args__ = (
        Index("ix_product_variants_product_id_position", "product_id", "position"),
        Index("ix_product_variants_sku", "sku"),
    )

    @property
    def options(self) -> List[str]:
        return [value for value in (self.option1, self.option2, self.option3) if value]

    @property
    def display_title(self) -> str:
        return " / ".join(self.options) if self.options else self.title

    def is_in_stock(self) -> bool:
        return self.current_quantity() > 0

    @hybrid_method
    def can_fulfill(self, quantity: int = 1) -> bool:
        # track_inventory is None until the row is flushed; the column default is True
        if self.track_inventory is False:
            return True
        if self.inventory_policy == InventoryPolicy.CONTINUE.value:
            return True
        return self.current_quantity() >= quantity

    @can_fulfill.expression
    def can_fulfill(cls, quantity: int = 1):
        return or_(
            cls.track_inventory.is_(False),
            cls.inventory_policy == InventoryPolicy.CONTINUE.value,
            cls.inventory_quantity >= quantity,
        )

    @hybrid_method
    def can_decrement(self, quantity: int) -> bool:
        return self.can_fulfill(quantity)

    def decrement_inventory(self, quantity: int = 1) -> bool:
        if self.track_inventory is False:
            return True
        if self.can_fulfill(quantity):
            self.inventory_quantity = self.current_quantity() - quantity
            return True
        return False

    def increment_inventory(self, quantity: int = 1) -> None:
        if self.track_inventory is not False:
            self.inventory_quantity = self.current_quantity() + quantity
