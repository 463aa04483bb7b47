from datetime import datetime
import enum
from typing import Optional
from sqlalchemy import Column, DateTime, Numeric

class WeightUnit(str, enum.Enum):
    KG = "kg"
    G = "g"
    LB = "lb"
    OZ = "oz"

class TimestampMixin:
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

class PricedMixin:
    """Price columns plus the sale figures derived from them."""

    price = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    compare_price = Column(Numeric(10, 2, asdecimal=False), nullable=True)

    @property
    def is_on_sale(self) -> bool:
        return bool(self.compare_price) and self.compare_price > self.price

    @property
    def discount_percentage(self) -> Optional[float]:
        if not self.is_on_sale:
            return None
        return round((self.compare_price - self.price) / self.compare_price * 100, 2)

    @property
    def formatted_price(self) -> str:
        return f"{float(self.price or 0):,.2f}"
