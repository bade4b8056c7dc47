from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List, Optional
import logging
from database import get_db
from models.users import User, ROLE_ADMIN
from schemas.journal import Journal, JournalCreate, JournalUpdate
from schemas.response import ApiResponse, Message, success
from crud import journal as crud_journal
from utils.auth_utils import get_current_user, require_role, get_user_identifier
from utils.dates import DateRange, get_date_range
import exports

router = APIRouter(
    prefix="/journals",
    tags=["Journals"],
)
logger = logging.getLogger(__name__)


@router.post("", response_model=ApiResponse[Journal], status_code=status.HTTP_201_CREATED)
def create_journal(
    entry: JournalCreate,
    db: Session = Depends(get_db),
    user: User = Depends(require_role([ROLE_ADMIN]))
):
    """
    Create a journal with its debit/credit detail lines. Balance between debit and
    credit is not enforced.
    """
    db_journal = crud_journal.create_journal(db, entry)
    logger.info(f"Journal '{db_journal.name}' (ID: {db_journal.id}) created by {get_user_identifier(user)}")
    return success(crud_journal.get_journal(db, db_journal.id), code=status.HTTP_201_CREATED)


@router.get("/list", response_model=ApiResponse[List[Journal]])
def get_journals(
    date_range: Optional[DateRange] = Depends(get_date_range),
    skip: int = 0,
    limit: Optional[int] = None,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user)
):
    return success(crud_journal.get_journals(db, date_range, skip=skip, limit=limit))


@router.get("/export")
def export_general_journal(
    date_range: Optional[DateRange] = Depends(get_date_range),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user)
):
    journals = list(reversed(crud_journal.get_journals(db, date_range)))
    buffer = exports.general_journal_workbook(journals, date_range)
    return exports.excel_response(buffer, "general_journal.xlsx")


@router.delete("/delete-all-journals", response_model=ApiResponse[Message])
def delete_all_journals(
    db: Session = Depends(get_db),
    user: User = Depends(require_role([ROLE_ADMIN]))
):
    deleted = crud_journal.delete_all_journals(db)
    logger.warning(f"{deleted} journals deleted by {get_user_identifier(user)}")
    return success({"message": f"{deleted} journals deleted successfully"})


@router.get("/{journal_id}", response_model=ApiResponse[Journal])
def get_journal(
    journal_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user)
):
    return success(crud_journal.get_journal(db, journal_id))


@router.put("/{journal_id}", response_model=ApiResponse[Journal])
def update_journal(
    journal_id: int,
    entry: JournalUpdate,
    db: Session = Depends(get_db),
    user: User = Depends(require_role([ROLE_ADMIN]))
):
    crud_journal.update_journal(db, journal_id, entry)
    logger.info(f"Journal ID {journal_id} updated by {get_user_identifier(user)}")
    return success(crud_journal.get_journal(db, journal_id))


@router.delete("/{journal_id}", response_model=ApiResponse[Message])
def delete_journal(
    journal_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(require_role([ROLE_ADMIN]))
):
    crud_journal.delete_journal(db, journal_id)
    logger.info(f"Journal ID {journal_id} deleted by {get_user_identifier(user)}")
    return success({"message": "Journal deleted successfully"})
