from sqlalchemy import Column, Integer, Numeric, ForeignKey, CheckConstraint, Text
from sqlalchemy.orm import relationship
from database import Base


class JournalDetail(Base):
    __tablename__ = "journal_details"

    id = Column(Integer, primary_key=True, index=True)
    journal_id = Column(Integer, ForeignKey("journals.id", ondelete="CASCADE"), nullable=False, index=True)
    account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False, index=True)
    debit = Column(Numeric(14, 2), CheckConstraint('debit >= 0'), nullable=False, default=0)
    credit = Column(Numeric(14, 2), CheckConstraint('credit >= 0'), nullable=False, default=0)
    note = Column(Text, nullable=True)

    # Relationships
    journal = relationship("Journal", back_populates="details")
    account = relationship("Account", back_populates="details")
