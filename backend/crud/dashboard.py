from sqlalchemy.orm import Session
from sqlalchemy import func
from datetime import datetime
from decimal import Decimal
import pytz
from models.audit_mixin import APP_TIMEZONE
from models.transaction import Transaction, TransactionStatus
from schemas.dashboard import StatusSummary, MonthlyTransactions


def get_status_summary(db: Session) -> StatusSummary:
    counts = db.query(Transaction.status, func.count(Transaction.id)).group_by(Transaction.status).all()
    return StatusSummary(**{status.value: count for status, count in counts})


def to_app_timezone(value: datetime) -> datetime:
    """Express a stored timestamp in APP_TIMEZONE.

    SQLite drops the offset and hands back the wall time it was written with, which
    is already APP_TIMEZONE; aware values (PostgreSQL) are converted.
    """
    tz = pytz.timezone(APP_TIMEZONE)
    if value.tzinfo is None:
        return tz.localize(value)
    return value.astimezone(tz)


def get_monthly_transactions(db: Session, year: int = None):
    """Count and grand total of completed transactions for each month of ``year`` in APP_TIMEZONE."""
    tz = pytz.timezone(APP_TIMEZONE)
    year = year or datetime.now(tz).year
    months = [MonthlyTransactions(year=year, month=m) for m in range(1, 13)]

    completed = db.query(Transaction.created_at, Transaction.grandtotal).filter(
        Transaction.status == TransactionStatus.DONE,
        Transaction.created_at >= tz.localize(datetime(year, 1, 1)),
        Transaction.created_at < tz.localize(datetime(year + 1, 1, 1)),
    ).all()

    for created_at, grandtotal in completed:
        local = to_app_timezone(created_at)
        if local.year != year:
            continue
        bucket = months[local.month - 1]
        bucket.total_transactions += 1
        bucket.total_amount += Decimal(grandtotal)

    return months
