from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime
from models.account import VALID_ACCOUNT_TYPES


class AccountBase(BaseModel):
    name: str = Field(..., min_length=3)
    account_code: Optional[int] = None
    account_type: int  # 1..8, 4 = revenue, 5 = expense

    @field_validator('account_type')
    @classmethod
    def validate_account_type(cls, v):
        if v not in VALID_ACCOUNT_TYPES:
            raise ValueError(f"account_type must be one of {VALID_ACCOUNT_TYPES}")
        return v


class AccountCreate(AccountBase):
    pass


class AccountUpdate(AccountBase):
    pass


class Account(AccountBase):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

