from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import date, datetime
from decimal import Decimal
from schemas.balance import AccountSummary
from exceptions import InputError
from utils.dates import parse_date


class JournalDetailCreate(BaseModel):
    account: int  # account id
    debit: Decimal = Field(..., ge=0, decimal_places=2)
    credit: Decimal = Field(..., ge=0, decimal_places=2)
    note: Optional[str] = None


class JournalDetail(BaseModel):
    id: int
    account_id: int
    account: Optional[AccountSummary] = None
    debit: Decimal
    credit: Decimal
    note: Optional[str] = None

    class Config:
        from_attributes = True


class JournalBase(BaseModel):
    name: str = Field(..., min_length=3)
    image: Optional[str] = None
    data_change: bool = False
    note: Optional[str] = None


class JournalCreate(JournalBase):
    journal_date: Optional[date] = None  # MM/DD/YYYY on the wire, today when omitted
    detail: List[JournalDetailCreate] = Field(..., min_length=1)

    @field_validator('journal_date', mode='before')
    @classmethod
    def parse_journal_date(cls, v):
        if v is None or isinstance(v, date):
            return v
        if not isinstance(v, str):
            raise ValueError("journal_date must be a string in MM/DD/YYYY format")
        try:
            return parse_date(v)
        except InputError as e:
            raise ValueError(e.message)


class JournalUpdate(JournalCreate):
    pass


class Journal(JournalBase):
    id: int
    journal_date: date
    details: List[JournalDetail] = Field([], serialization_alias="detail")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
