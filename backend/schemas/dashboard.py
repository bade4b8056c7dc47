from pydantic import BaseModel, Field
from decimal import Decimal


class StatusSummary(BaseModel):
    unpaid: int = 0
    paid: int = 0
    processing: int = 0
    shipped: int = 0
    done: int = 0


class MonthlyTransactions(BaseModel):
    year: int
    month: int
    total_transactions: int = Field(0, serialization_alias="totalTransactions")
    total_amount: Decimal = Field(Decimal(0), serialization_alias="totalAmount")
