# app/Catalog/model/product.py
import uuid

from sqlalchemy import Column, String, Text, Numeric, Boolean, DateTime, func
from .database import Base


def _new_id() -> str:
    return str(uuid.uuid4())


class Product(Base):
    __tablename__ = "products"

    id = Column(String(36), primary_key=True, default=_new_id)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    on_promotion = Column(Boolean, nullable=False, default=False)
    image = Column(String(1024), nullable=False, default="")  # Локатор: путь в public/ или URL блоба
    created_at = Column(DateTime(timezone=True), server_default=func.now())
