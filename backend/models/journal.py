from sqlalchemy import Column, Integer, String, Date, Boolean, Text
from sqlalchemy.orm import relationship
from database import Base
from models.audit_mixin import TimestampMixin


class Journal(Base, TimestampMixin):
    __tablename__ = "journals"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    image = Column(String, nullable=True)
    journal_date = Column(Date, nullable=False, index=True)
    data_change = Column(Boolean, default=False, nullable=False)
    note = Column(Text, nullable=True)

    # Details are owned by the journal and go away with it
    details = relationship(
        "JournalDetail",
        back_populates="journal",
        cascade="all, delete-orphan",
        order_by="JournalDetail.id",
    )
