from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import date
from decimal import Decimal


class AccountSummary(BaseModel):
    id: int
    name: str
    account_code: Optional[int] = None
    account_type: int

    class Config:
        from_attributes = True


# Trial balance
class DailyTotals(BaseModel):
    journal_date: date
    total_debit: Decimal = Field(serialization_alias="totalDebit")
    total_credit: Decimal = Field(serialization_alias="totalCredit")


class AccountBalance(AccountSummary):
    total_debit: Decimal = Field(Decimal(0), serialization_alias="totalDebit")
    total_credit: Decimal = Field(Decimal(0), serialization_alias="totalCredit")
    total: Decimal = Decimal(0)
    journal_summary: Optional[List[DailyTotals]] = None


class TrialBalance(BaseModel):
    start_date: Optional[date] = Field(None, serialization_alias="startDate")
    end_date: Optional[date] = Field(None, serialization_alias="endDate")
    rows: List[AccountBalance]
    total_debit: Decimal = Field(serialization_alias="totalDebit")
    total_credit: Decimal = Field(serialization_alias="totalCredit")


# Income statement (pendapatan-beban)
class IncomeStatement(BaseModel):
    start_date: Optional[date] = Field(None, serialization_alias="startDate")
    end_date: Optional[date] = Field(None, serialization_alias="endDate")
    revenue: List[AccountBalance]
    expense: List[AccountBalance]
    total_revenue: Decimal = Field(serialization_alias="totalRevenue")
    total_expense: Decimal = Field(serialization_alias="totalExpense")
    net_income: Decimal = Field(serialization_alias="netIncome")


# General ledger (buku besar)
class LedgerEntry(BaseModel):
    journal_id: int = Field(serialization_alias="journalId")
    journal_name: str = Field(serialization_alias="journalName")
    journal_date: date = Field(serialization_alias="journalDate")
    note: Optional[str] = None
    debit: Decimal
    credit: Decimal
    saldo_debit: Decimal = Field(serialization_alias="saldoDebit")
    saldo_kredit: Decimal = Field(serialization_alias="saldoKredit")
    total: Decimal


class AccountLedger(BaseModel):
    account: AccountSummary
    entries: List[LedgerEntry]
    total_debit: Decimal = Field(serialization_alias="totalDebit")
    total_credit: Decimal = Field(serialization_alias="totalCredit")
    total: Decimal


class GeneralLedger(BaseModel):
    start_date: Optional[date] = Field(None, serialization_alias="startDate")
    end_date: Optional[date] = Field(None, serialization_alias="endDate")
    accounts: List[AccountLedger]
