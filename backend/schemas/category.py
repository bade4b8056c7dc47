from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=3)
    image: str = Field(..., min_length=1)


class Category(BaseModel):
    id: int
    name: str
    image: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
