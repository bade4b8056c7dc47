from sqlalchemy import Column, Integer, String, Text, Numeric, ForeignKey, JSON
from sqlalchemy.orm import relationship
from database import Base
from models.audit_mixin import TimestampMixin


class Product(Base, TimestampMixin):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    images = Column(JSON, nullable=False, default=list)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False, index=True)
    stock = Column(Integer, nullable=False, default=0)
    price = Column(Numeric(14, 2), nullable=False)

    # Relationships
    category = relationship("Category", back_populates="products")
    comments = relationship("Comment", back_populates="product", cascade="all, delete-orphan", order_by="Comment.id")
    transactions = relationship("Transaction", back_populates="product")
