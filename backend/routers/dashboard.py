from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from database import get_db
from models.users import User
from schemas.dashboard import StatusSummary, MonthlyTransactions
from schemas.response import ApiResponse, success
from crud import dashboard as crud_dashboard
from utils.auth_utils import get_current_user

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/summary", response_model=ApiResponse[StatusSummary])
def get_summary(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return success(crud_dashboard.get_status_summary(db))


@router.get("/total-transactions-per-month", response_model=ApiResponse[List[MonthlyTransactions]])
def get_total_transactions_per_month(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return success(crud_dashboard.get_monthly_transactions(db))
