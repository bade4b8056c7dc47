"""
Double-entry aggregation over flattened journal postings.

Everything here works on plain ``LedgerAccount``/``Posting`` values so that the
grouping, the income/expense split and the running balances do not depend on the
database. ``crud/balance.py`` is responsible for loading those values.

All amounts are ``Decimal``; ``total`` is always ``debit - credit``.
"""
from collections import defaultdict
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Sequence

from models.account import EXPENSE_ACCOUNT_TYPE, REVENUE_ACCOUNT_TYPE
from schemas.balance import (
    AccountBalance,
    AccountLedger,
    AccountSummary,
    DailyTotals,
    IncomeStatement,
    LedgerEntry,
    TrialBalance,
)
from utils.dates import DateRange

ZERO = Decimal(0)


@dataclass(frozen=True)
class LedgerAccount:
    id: int
    name: str
    account_code: Optional[int]
    account_type: int

    def summary(self) -> AccountSummary:
        return AccountSummary(
            id=self.id,
            name=self.name,
            account_code=self.account_code,
            account_type=self.account_type,
        )


@dataclass(frozen=True)
class Posting:
    """One detail line of a journal, flattened with its journal's date."""
    account_id: int
    journal_id: int
    journal_name: str
    journal_date: date
    debit: Decimal
    credit: Decimal
    note: Optional[str] = None
    line_no: int = 0


def sort_accounts(accounts: Iterable[LedgerAccount]) -> List[LedgerAccount]:
    # accounts without a code go last
    return sorted(accounts, key=lambda a: (a.account_code is None, a.account_code or 0, a.id))


def postings_in_range(postings: Iterable[Posting], date_range: Optional[DateRange]) -> List[Posting]:
    if date_range is None:
        return list(postings)
    return [p for p in postings if date_range.contains(p.journal_date)]


def aggregate_balances(
    accounts: Sequence[LedgerAccount],
    postings: Iterable[Posting],
    date_range: Optional[DateRange] = None,
    by_date: bool = False,
) -> List[AccountBalance]:
    """
    One row per account with total debit, total credit and ``total = debit - credit``.

    Accounts without postings in range get zero sums. Postings that point at an
    account not in ``accounts`` are ignored. With ``by_date`` each row also carries
    the sums grouped by journal date, ascending.
    """
    totals: Dict[int, List[Decimal]] = defaultdict(lambda: [ZERO, ZERO])
    daily: Dict[int, Dict[date, List[Decimal]]] = defaultdict(lambda: defaultdict(lambda: [ZERO, ZERO]))

    for posting in postings_in_range(postings, date_range):
        running = totals[posting.account_id]
        running[0] += posting.debit
        running[1] += posting.credit
        if by_date:
            day = daily[posting.account_id][posting.journal_date]
            day[0] += posting.debit
            day[1] += posting.credit

    rows = []
    for account in sort_accounts(accounts):
        debit, credit = totals.get(account.id, (ZERO, ZERO))
        row = AccountBalance(
            id=account.id,
            name=account.name,
            account_code=account.account_code,
            account_type=account.account_type,
            total_debit=debit,
            total_credit=credit,
            total=debit - credit,
        )
        if by_date:
            row.journal_summary = [
                DailyTotals(journal_date=day, total_debit=sums[0], total_credit=sums[1])
                for day, sums in sorted(daily.get(account.id, {}).items())
            ]
        rows.append(row)
    return rows


def trial_balance(
    accounts: Sequence[LedgerAccount],
    postings: Iterable[Posting],
    date_range: Optional[DateRange] = None,
    by_date: bool = False,
) -> TrialBalance:
    rows = aggregate_balances(accounts, postings, date_range, by_date=by_date)
    return TrialBalance(
        start_date=date_range.start if date_range else None,
        end_date=date_range.end if date_range else None,
        rows=rows,
        total_debit=sum((r.total_debit for r in rows), ZERO),
        total_credit=sum((r.total_credit for r in rows), ZERO),
    )


def income_statement(
    accounts: Sequence[LedgerAccount],
    postings: Iterable[Posting],
    date_range: Optional[DateRange] = None,
) -> IncomeStatement:
    """Split revenue (type 4) and expense (type 5) accounts; ``net_income = revenue - expense``."""
    relevant = [a for a in accounts if a.account_type in (REVENUE_ACCOUNT_TYPE, EXPENSE_ACCOUNT_TYPE)]
    rows = aggregate_balances(relevant, postings, date_range)

    revenue = [r for r in rows if r.account_type == REVENUE_ACCOUNT_TYPE]
    expense = [r for r in rows if r.account_type == EXPENSE_ACCOUNT_TYPE]
    total_revenue = sum((r.total for r in revenue), ZERO)
    total_expense = sum((r.total for r in expense), ZERO)

    return IncomeStatement(
        start_date=date_range.start if date_range else None,
        end_date=date_range.end if date_range else None,
        revenue=revenue,
        expense=expense,
        total_revenue=total_revenue,
        total_expense=total_expense,
        net_income=total_revenue - total_expense,
    )


def general_ledger(
    accounts: Sequence[LedgerAccount],
    postings: Iterable[Posting],
    date_range: Optional[DateRange] = None,
) -> List[AccountLedger]:
    """
    Chronological postings per account with running balances.

    Entries are ordered by journal date, then journal id, then line order. The
    running ``saldo_debit``/``saldo_kredit`` restart at zero for every account.
    """
    by_account: Dict[int, List[Posting]] = defaultdict(list)
    for posting in postings_in_range(postings, date_range):
        by_account[posting.account_id].append(posting)

    ledgers = []
    for account in sort_accounts(accounts):
        saldo_debit = ZERO
        saldo_kredit = ZERO
        entries = []
        ordered = sorted(by_account.get(account.id, []), key=lambda p: (p.journal_date, p.journal_id, p.line_no))
        for posting in ordered:
            saldo_debit += posting.debit
            saldo_kredit += posting.credit
            entries.append(LedgerEntry(
                journal_id=posting.journal_id,
                journal_name=posting.journal_name,
                journal_date=posting.journal_date,
                note=posting.note,
                debit=posting.debit,
                credit=posting.credit,
                saldo_debit=saldo_debit,
                saldo_kredit=saldo_kredit,
                total=saldo_debit - saldo_kredit,
            ))
        ledgers.append(AccountLedger(
            account=account.summary(),
            entries=entries,
            total_debit=saldo_debit,
            total_credit=saldo_kredit,
            total=saldo_debit - saldo_kredit,
        ))
    return ledgers
