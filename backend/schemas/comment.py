from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional


class CommentCreate(BaseModel):
    product_id: int
    message: str = Field(..., min_length=1)


class Comment(BaseModel):
    id: int
    product_id: int
    name: str
    message: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
