"""Asset model."""

import enum
import uuid

from sqlalchemy import CheckConstraint, Column, Date, DateTime, Enum, Float, ForeignKey, String, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.models import Base


class AssetType(str, enum.Enum):
    STOCK = "stock"
    ETF = "etf"
    CRYPTO = "crypto"
    REAL_ESTATE = "real_estate"
    SAVINGS = "savings"


class Asset(Base):
    __tablename__ = "assets"
    __table_args__ = (
        CheckConstraint("quantity >= 0", name="ck_assets_quantity_non_negative"),
        CheckConstraint("buy_price >= 0", name="ck_assets_buy_price_non_negative"),
        CheckConstraint("current_price >= 0", name="ck_assets_current_price_non_negative"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    portfolio_id = Column(Uuid, ForeignKey("portfolios.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    ticker = Column(String(20), nullable=False, index=True)
    type = Column(Enum(AssetType, values_callable=lambda e: [m.value for m in e]), nullable=False)
    quantity = Column(Float, default=0.0, nullable=False)
    buy_price = Column(Float, default=0.0, nullable=False)
    current_price = Column(Float, default=0.0, nullable=False)
    currency = Column(String(10), default="EUR", nullable=False)
    category = Column(String(100), nullable=True)
    buy_date = Column(Date, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    portfolio = relationship("Portfolio", back_populates="assets", lazy="joined")

    @property
    def total_value(self) -> float:
        return self.quantity * self.current_price

    @property
    def total_cost(self) -> float:
        return self.quantity * self.buy_price
