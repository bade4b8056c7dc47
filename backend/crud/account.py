from sqlalchemy.orm import Session
import logging
from models.account import Account
from models.journal_detail import JournalDetail
from schemas.account import AccountCreate, AccountUpdate
from exceptions import ConflictError, NotFoundError

logger = logging.getLogger(__name__)


def get_account(db: Session, account_id: int) -> Account:
    account = db.query(Account).filter(Account.id == account_id).first()
    if not account:
        raise NotFoundError(f"Account with id {account_id} not found")
    return account


def get_account_by_code(db: Session, account_code: int):
    return db.query(Account).filter(Account.account_code == account_code).first()


def get_accounts(db: Session):
    return db.query(Account).order_by(Account.created_at.desc(), Account.id.desc()).all()


def _ensure_code_is_free(db: Session, account_code, account_id=None):
    if account_code is None:
        return
    existing = get_account_by_code(db, account_code)
    if existing and existing.id != account_id:
        logger.warning(f"Rejected duplicate account code {account_code}")
        raise ConflictError(f"Account with code {account_code} already exists")


def is_account_in_use(db: Session, account_id: int) -> bool:
    return db.query(JournalDetail.id).filter(JournalDetail.account_id == account_id).first() is not None


def create_account(db: Session, account: AccountCreate) -> Account:
    _ensure_code_is_free(db, account.account_code)

    db_account = Account(**account.model_dump())
    db.add(db_account)
    db.commit()
    db.refresh(db_account)
    return db_account


def update_account(db: Session, account_id: int, account_update: AccountUpdate) -> Account:
    db_account = get_account(db, account_id)
    update_data = account_update.model_dump(exclude_unset=True)

    if 'account_code' in update_data:
        _ensure_code_is_free(db, update_data['account_code'], account_id=account_id)

    # Postings already classified under this type would silently move between reports
    if 'account_type' in update_data and update_data['account_type'] != db_account.account_type:
        if is_account_in_use(db, account_id):
            raise ConflictError("Cannot change account type for an account that is in use by journal entries.")

    for key, value in update_data.items():
        setattr(db_account, key, value)

    db.commit()
    db.refresh(db_account)
    return db_account


def delete_account(db: Session, account_id: int) -> None:
    db_account = get_account(db, account_id)

    if is_account_in_use(db, account_id):
        logger.warning(f"Rejected delete of account {account_id}: referenced by journal details")
        raise ConflictError("Cannot delete account because it is referenced by journal details.")

    db.delete(db_account)
    db.commit()
