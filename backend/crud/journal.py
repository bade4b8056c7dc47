from sqlalchemy.orm import Session, selectinload
from typing import Optional
from decimal import Decimal
import logging
from datetime import date
from models.account import Account
from models.journal import Journal
from models.journal_detail import JournalDetail
from schemas.journal import JournalCreate, JournalUpdate
from exceptions import NotFoundError
from utils.dates import DateRange

logger = logging.getLogger(__name__)


def _check_accounts_exist(db: Session, entry: JournalCreate) -> None:
    account_ids = {d.account for d in entry.detail}
    found = {row.id for row in db.query(Account.id).filter(Account.id.in_(account_ids)).all()}
    missing = sorted(account_ids - found)
    if missing:
        raise NotFoundError(f"Account not found: {', '.join(str(m) for m in missing)}", details={"accounts": missing})


def _warn_if_unbalanced(entry: JournalCreate) -> None:
    # Balance is left to the caller; surface it in the logs only
    total_debit = sum((d.debit for d in entry.detail), Decimal(0))
    total_credit = sum((d.credit for d in entry.detail), Decimal(0))
    if total_debit != total_credit:
        logger.warning(f"Journal '{entry.name}' is unbalanced: debit {total_debit} != credit {total_credit}")


def _build_details(entry: JournalCreate):
    return [
        JournalDetail(account_id=d.account, debit=d.debit, credit=d.credit, note=d.note)
        for d in entry.detail
    ]


def _journal_query(db: Session):
    return db.query(Journal).options(
        selectinload(Journal.details).selectinload(JournalDetail.account)
    )


def create_journal(db: Session, entry: JournalCreate) -> Journal:
    """
    Creates a new journal and its detail lines.
    """
    _check_accounts_exist(db, entry)
    _warn_if_unbalanced(entry)

    db_journal = Journal(
        name=entry.name,
        image=entry.image,
        journal_date=entry.journal_date or date.today(),
        data_change=entry.data_change,
        note=entry.note,
        details=_build_details(entry),
    )
    db.add(db_journal)
    db.commit()
    db.refresh(db_journal)
    return db_journal


def get_journal(db: Session, journal_id: int) -> Journal:
    db_journal = _journal_query(db).filter(Journal.id == journal_id).first()
    if not db_journal:
        raise NotFoundError("Journal not found")
    return db_journal


def get_journals(
    db: Session,
    date_range: Optional[DateRange] = None,
    skip: int = 0,
    limit: Optional[int] = None,
):
    """
    Retrieves journals, newest first, with optional inclusive date filtering.
    """
    query = _journal_query(db)
    if date_range:
        query = query.filter(Journal.journal_date >= date_range.start, Journal.journal_date <= date_range.end)

    query = query.order_by(Journal.journal_date.desc(), Journal.id.desc()).offset(skip)
    if limit is not None:
        query = query.limit(limit)
    return query.all()


def update_journal(db: Session, journal_id: int, entry: JournalUpdate) -> Journal:
    """
    Replaces the journal's fields and its whole detail list.
    """
    db_journal = get_journal(db, journal_id)
    _check_accounts_exist(db, entry)
    _warn_if_unbalanced(entry)

    db_journal.name = entry.name
    db_journal.image = entry.image
    db_journal.journal_date = entry.journal_date or db_journal.journal_date
    db_journal.data_change = entry.data_change
    db_journal.note = entry.note
    db_journal.details = _build_details(entry)

    db.commit()
    db.refresh(db_journal)
    return db_journal


def delete_journal(db: Session, journal_id: int) -> None:
    db_journal = get_journal(db, journal_id)
    db.delete(db_journal)
    db.commit()


def delete_all_journals(db: Session) -> int:
    # Bulk delete skips ORM cascades, so remove the details explicitly first
    db.query(JournalDetail).delete(synchronize_session=False)
    deleted = db.query(Journal).delete(synchronize_session=False)
    db.commit()
    return deleted
