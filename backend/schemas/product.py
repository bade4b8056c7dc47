from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime
from decimal import Decimal
from schemas.category import Category
from schemas.comment import Comment


class ProductBase(BaseModel):
    title: str = Field(..., min_length=5, max_length=100)
    description: Optional[str] = None
    images: List[str] = []
    category: int  # category id
    stock: int = Field(0, ge=0)
    price: Decimal = Field(..., ge=0)


class ProductCreate(ProductBase):
    pass


class ProductUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=5, max_length=100)
    description: Optional[str] = None
    images: Optional[List[str]] = None
    category: Optional[int] = None
    stock: Optional[int] = Field(None, ge=0)
    price: Optional[Decimal] = Field(None, ge=0)


class Product(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    images: List[str] = []
    category_id: int
    category: Optional[Category] = None
    stock: int
    price: Decimal
    comments: List[Comment] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
