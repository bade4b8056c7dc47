from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from database import Base
from models.audit_mixin import TimestampMixin

# Account types run 1..8; only revenue and expense carry meaning in the reports.
VALID_ACCOUNT_TYPES = [1, 2, 3, 4, 5, 6, 7, 8]
REVENUE_ACCOUNT_TYPE = 4
EXPENSE_ACCOUNT_TYPE = 5


class Account(Base, TimestampMixin):
    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    account_code = Column(Integer, unique=True, nullable=True, index=True)
    account_type = Column(Integer, nullable=False)

    details = relationship("JournalDetail", back_populates="account")

    def __repr__(self):
        return f"<Account(id={self.id}, code={self.account_code}, name={self.name}, type={self.account_type})>"
