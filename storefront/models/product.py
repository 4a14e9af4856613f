from sqlalchemy import Column, String, Integer, Numeric, Text, DateTime, JSON, CheckConstraint
from sqlalchemy.orm import relationship
from datetime import datetime
from storefront.database import Base


class Product(Base):
    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_products_price_non_negative"),
    )

    # Caller-supplied, never generated
    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(255), nullable=False, index=True)
    price = Column(Numeric(10, 2), nullable=False)
    category = Column(String(100), nullable=False, index=True)
    image_url = Column(String(1024), nullable=False)
    description = Column(Text, nullable=False)
    details = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    cart_lines = relationship("CartLine", back_populates="product")
