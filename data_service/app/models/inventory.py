# app/models/inventory.py
from sqlalchemy import Column, DateTime, ForeignKey, Integer
from sqlalchemy.orm import relationship
from shared.core.database import Base


class Inventory(Base):
    __tablename__ = "inventory"

    id = Column(Integer, primary_key=True, autoincrement=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="SET NULL"), nullable=True)
    quantity = Column(Integer, nullable=True)
    min_stock = Column(Integer, nullable=True)
    # set by the data services on every write
    updated_at = Column(DateTime, nullable=True)

    product = relationship("Product", back_populates="inventories", lazy="joined")
