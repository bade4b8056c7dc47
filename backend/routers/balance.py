from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from database import get_db
from models.users import User
from schemas.balance import AccountBalance, GeneralLedger, IncomeStatement, TrialBalance
from schemas.response import ApiResponse, success
from crud import balance as crud_balance
from utils.auth_utils import get_current_user
from utils.dates import DateRange, get_date_range
import exports

router = APIRouter(
    prefix="/balance",
    tags=["Balance"],
)


@router.get("/calculate-totals", response_model=ApiResponse[List[AccountBalance]])
def calculate_totals(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user)
):
    return success(crud_balance.calculate_totals(db))


@router.get("/total-balance", response_model=ApiResponse[TrialBalance])
def get_total_balance(
    date_range: Optional[DateRange] = Depends(get_date_range),
    by_date: bool = Query(False, alias="byDate"),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user)
):
    """Trial balance (neraca saldo): debit, credit and net total for every account."""
    return success(crud_balance.get_trial_balance(db, date_range, by_date=by_date))


@router.get("/pendapatan-beban", response_model=ApiResponse[IncomeStatement])
def get_income_statement(
    date_range: Optional[DateRange] = Depends(get_date_range),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user)
):
    """Income statement: revenue (type 4) and expense (type 5) accounts with net income."""
    return success(crud_balance.get_income_statement(db, date_range))


@router.get("/general-ledger", response_model=ApiResponse[GeneralLedger])
def get_general_ledger(
    date_range: Optional[DateRange] = Depends(get_date_range),
    account_id: Optional[int] = Query(None, alias="accountId"),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user)
):
    return success(crud_balance.get_general_ledger(db, date_range, account_id=account_id))


@router.get("/export-total-balance")
def export_total_balance(
    date_range: Optional[DateRange] = Depends(get_date_range),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user)
):
    report = crud_balance.get_trial_balance(db, date_range)
    return exports.excel_response(exports.trial_balance_workbook(report), "trial_balance.xlsx")


@router.get("/export-pendapatan-beban")
def export_income_statement(
    date_range: Optional[DateRange] = Depends(get_date_range),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user)
):
    report = crud_balance.get_income_statement(db, date_range)
    return exports.excel_response(exports.income_statement_workbook(report), "income_statement.xlsx")


@router.get("/export-general-ledger")
def export_general_ledger(
    date_range: Optional[DateRange] = Depends(get_date_range),
    account_id: Optional[int] = Query(None, alias="accountId"),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user)
):
    report = crud_balance.get_general_ledger(db, date_range, account_id=account_id)
    return exports.excel_response(exports.general_ledger_workbook(report), "general_ledger.xlsx")
