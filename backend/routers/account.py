from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List, Optional
import logging
from database import get_db
from models.users import User, ROLE_ADMIN
from schemas.account import Account, AccountCreate, AccountUpdate
from schemas.balance import GeneralLedger
from schemas.response import ApiResponse, Message, success
from crud import account as crud_account
from crud import balance as crud_balance
from utils.auth_utils import get_current_user, require_role, get_user_identifier
from utils.dates import DateRange, get_date_range

router = APIRouter(
    prefix="/accounts",
    tags=["Accounts"],
)
logger = logging.getLogger(__name__)


@router.post("", response_model=ApiResponse[Account], status_code=status.HTTP_201_CREATED)
def create_account(
    account: AccountCreate,
    db: Session = Depends(get_db),
    user: User = Depends(require_role([ROLE_ADMIN]))
):
    db_account = crud_account.create_account(db, account)
    logger.info(f"Account {db_account.account_code} '{db_account.name}' (ID: {db_account.id}) created by {get_user_identifier(user)}")
    return success(db_account, code=status.HTTP_201_CREATED)


@router.get("/list", response_model=ApiResponse[List[Account]])
def get_accounts(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user)
):
    return success(crud_account.get_accounts(db))


@router.get("/accounts-with-journals", response_model=ApiResponse[GeneralLedger])
def get_accounts_with_journals(
    date_range: Optional[DateRange] = Depends(get_date_range),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user)
):
    """
    Every account with its postings in date order and the running debit/credit balance (buku besar).
    """
    return success(crud_balance.get_general_ledger(db, date_range))


@router.get("/{account_id}", response_model=ApiResponse[Account])
def get_account(
    account_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user)
):
    return success(crud_account.get_account(db, account_id))


@router.put("/{account_id}", response_model=ApiResponse[Account])
def update_account(
    account_id: int,
    account_update: AccountUpdate,
    db: Session = Depends(get_db),
    user: User = Depends(require_role([ROLE_ADMIN]))
):
    db_account = crud_account.update_account(db, account_id, account_update)
    logger.info(f"Account ID {account_id} updated by {get_user_identifier(user)}")
    return success(db_account)


@router.delete("/{account_id}", response_model=ApiResponse[Message])
def delete_account(
    account_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(require_role([ROLE_ADMIN]))
):
    crud_account.delete_account(db, account_id)
    logger.info(f"Account ID {account_id} deleted by {get_user_identifier(user)}")
    return success({"message": "Account deleted successfully"})
