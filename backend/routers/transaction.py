from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
import logging
from database import get_db
from models.users import User
from schemas.transaction import Transaction, TransactionCreate, TransactionUpdate, TransactionListItem
from schemas.response import ApiResponse, Message, success
from crud import transaction as crud_transaction
from utils.auth_utils import get_current_user, get_user_identifier
from utils.formatting import format_rupiah

router = APIRouter(prefix="/transactions", tags=["Transactions"])
logger = logging.getLogger(__name__)


@router.post("/create", response_model=ApiResponse[Transaction], status_code=status.HTTP_201_CREATED)
def create_transaction(
    transaction: TransactionCreate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user)
):
    """Create an order, charge 11% PPN on the subtotal and take the quantity out of stock."""
    db_transaction = crud_transaction.create_transaction(db, transaction, user)
    return success(db_transaction, code=status.HTTP_201_CREATED)


@router.get("/list", response_model=ApiResponse[List[TransactionListItem]])
def get_transactions(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    items = []
    for t in crud_transaction.get_transactions(db):
        data = Transaction.model_validate(t).model_dump()
        items.append(TransactionListItem(
            **data,
            subtotal_formatted=format_rupiah(t.subtotal),
            ppn_formatted=format_rupiah(t.ppn),
            grandtotal_formatted=format_rupiah(t.grandtotal),
        ))
    return success(items)


@router.get("/user/{user_id}", response_model=ApiResponse[List[Transaction]])
def get_user_transactions(user_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return success(crud_transaction.get_transactions(db, user_id=user_id))


@router.get("/{transaction_id}", response_model=ApiResponse[Transaction])
def get_transaction(transaction_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return success(crud_transaction.get_transaction(db, transaction_id))


@router.put("/update/{transaction_id}", response_model=ApiResponse[Transaction])
def update_transaction(
    transaction_id: int,
    transaction_update: TransactionUpdate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user)
):
    db_transaction = crud_transaction.update_transaction(db, transaction_id, transaction_update, user)
    logger.info(f"Transaction ID {transaction_id} updated by {get_user_identifier(user)}")
    return success(db_transaction)


@router.delete("/delete/{transaction_id}", response_model=ApiResponse[Message])
def delete_transaction(transaction_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    crud_transaction.delete_transaction(db, transaction_id)
    logger.info(f"Transaction ID {transaction_id} deleted by {get_user_identifier(user)}")
    return success({"message": "Transaction deleted successfully"})
