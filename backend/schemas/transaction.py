from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from decimal import Decimal
from models.transaction import TransactionStatus, TransactionType


class TransactionCreate(BaseModel):
    status: TransactionStatus = TransactionStatus.UNPAID
    product: int  # product id
    user: Optional[int] = None  # defaults to the caller
    payment_document: Optional[str] = None
    quantity: int = Field(..., ge=1)
    transaction_type: TransactionType


class TransactionUpdate(BaseModel):
    status: Optional[TransactionStatus] = None
    product: Optional[int] = None
    user: Optional[int] = None
    payment_document: Optional[str] = None
    quantity: Optional[int] = Field(None, ge=1)
    transaction_type: Optional[TransactionType] = None


class TransactionProduct(BaseModel):
    id: int
    title: str
    price: Decimal
    stock: int

    class Config:
        from_attributes = True


class TransactionUser(BaseModel):
    id: int
    username: str
    email: str

    class Config:
        from_attributes = True


class Transaction(BaseModel):
    id: int
    status: TransactionStatus
    product_id: int
    product: Optional[TransactionProduct] = None
    user_id: int
    user: Optional[TransactionUser] = None
    payment_document: Optional[str] = None
    quantity: int
    transaction_type: TransactionType
    subtotal: Decimal
    ppn: Decimal
    grandtotal: Decimal
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class TransactionListItem(Transaction):
    # Rupiah strings for display, e.g. "Rp 2.220,00"
    subtotal_formatted: str
    ppn_formatted: str
    grandtotal_formatted: str
