"""
Loads accounts and journal postings from the database and hands them to the
pure aggregation functions in ``utils.ledger``.
"""
from sqlalchemy.orm import Session
from typing import List, Optional
from models.account import Account, REVENUE_ACCOUNT_TYPE, EXPENSE_ACCOUNT_TYPE
from models.journal import Journal
from models.journal_detail import JournalDetail
from schemas.balance import AccountBalance, GeneralLedger, IncomeStatement, TrialBalance
from exceptions import NotFoundError
from utils import ledger
from utils.dates import DateRange


def load_accounts(db: Session, account_types=None, account_id: Optional[int] = None) -> List[ledger.LedgerAccount]:
    query = db.query(Account)
    if account_types:
        query = query.filter(Account.account_type.in_(account_types))
    if account_id is not None:
        query = query.filter(Account.id == account_id)
    return [
        ledger.LedgerAccount(id=a.id, name=a.name, account_code=a.account_code, account_type=a.account_type)
        for a in query.all()
    ]


def load_postings(db: Session, date_range: Optional[DateRange] = None, account_ids=None) -> List[ledger.Posting]:
    """Flatten journal details into postings; the date filter is pushed down to the query."""
    query = db.query(
        JournalDetail.id,
        JournalDetail.account_id,
        JournalDetail.debit,
        JournalDetail.credit,
        JournalDetail.note,
        Journal.id.label("journal_id"),
        Journal.name.label("journal_name"),
        Journal.journal_date,
    ).join(Journal, JournalDetail.journal_id == Journal.id)

    if date_range:
        query = query.filter(Journal.journal_date >= date_range.start, Journal.journal_date <= date_range.end)
    if account_ids is not None:
        query = query.filter(JournalDetail.account_id.in_(account_ids))

    return [
        ledger.Posting(
            account_id=row.account_id,
            journal_id=row.journal_id,
            journal_name=row.journal_name,
            journal_date=row.journal_date,
            debit=row.debit,
            credit=row.credit,
            note=row.note,
            line_no=row.id,
        )
        for row in query.all()
    ]


def calculate_totals(db: Session) -> List[AccountBalance]:
    """Per-account debit/credit totals over every journal ever posted."""
    return ledger.aggregate_balances(load_accounts(db), load_postings(db))


def get_trial_balance(db: Session, date_range: Optional[DateRange] = None, by_date: bool = False) -> TrialBalance:
    return ledger.trial_balance(load_accounts(db), load_postings(db, date_range), date_range, by_date=by_date)


def get_income_statement(db: Session, date_range: Optional[DateRange] = None) -> IncomeStatement:
    accounts = load_accounts(db, account_types=[REVENUE_ACCOUNT_TYPE, EXPENSE_ACCOUNT_TYPE])
    postings = load_postings(db, date_range, account_ids=[a.id for a in accounts])
    return ledger.income_statement(accounts, postings, date_range)


def get_general_ledger(db: Session, date_range: Optional[DateRange] = None, account_id: Optional[int] = None) -> GeneralLedger:
    accounts = load_accounts(db, account_id=account_id)
    if account_id is not None and not accounts:
        raise NotFoundError(f"Account with id {account_id} not found")

    account_ids = [account_id] if account_id is not None else None
    postings = load_postings(db, date_range, account_ids=account_ids)
    return GeneralLedger(
        start_date=date_range.start if date_range else None,
        end_date=date_range.end if date_range else None,
        accounts=ledger.general_ledger(accounts, postings, date_range),
    )
