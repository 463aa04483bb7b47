import enum
from sqlalchemy import Column, Index, Integer, JSON, Numeric, String, Boolean, Text
from sqlalchemy.orm import relationship
from catalog_api.db.session import Base
from catalog_api.models.inventory import InventoryTracked
from catalog_api.models.mixins import PricedMixin, TimestampMixin, WeightUnit

class ProductStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    ARCHIVED = "archived"

class Product(InventoryTracked, PricedMixin, TimestampMixin, Base):
    __tablename__ = "products"

    not_found_message = "Product not found"
    inventory_label = "Product"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text)
    sku = Column(String(100), unique=True, nullable=False)
    status = Column(String(20), nullable=False, default=ProductStatus.ACTIVE.value)
    vendor = Column(String(255))
    product_type = Column(String(255))
    tags = Column(JSON)
    images = Column(JSON)
    weight = Column(Numeric(8, 2, asdecimal=False))
    weight_unit = Column(String(10), nullable=False, default=WeightUnit.KG.value)
    requires_shipping = Column(Boolean, nullable=False, default=True)
    seo = Column(JSON)

    variants = relationship(
        "ProductVariant",
        back_populates="product",
        cascade="all, delete-orphan",
        order_by="ProductVariant.position",
    )

    __table_args__ = (
        Index("ix_products_status_created_at", "status", "created_at"),
        Index("ix_products_sku", "sku"),
    )

    def has_variants(self) -> bool:
        return len(self.variants) > 0

    @property
    def total_inventory(self) -> int:
        """Sum of variant stock when the product has variants, else its own stock."""
        if self.has_variants():
            return sum(variant.current_quantity() for variant in self.variants)
        return self.current_quantity()

    def is_in_stock(self) -> bool:
        return self.total_inventory > 0

    def decrement_inventory(self, quantity: int = 1) -> bool:
        if self.track_inventory is False:
            return True
        if self.can_decrement(quantity):
            self.inventory_quantity = self.current_quantity() - quantity
            return True
        return False
