from sqlalchemy import Column, Integer, String, Numeric, ForeignKey, Enum
from sqlalchemy.orm import relationship
from database import Base
import enum
from models.audit_mixin import TimestampMixin


class TransactionStatus(enum.Enum):
    UNPAID = "unpaid"
    PAID = "paid"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DONE = "done"


class TransactionType(enum.Enum):
    ONLINE = "online"
    OFFLINE = "offline"


class Transaction(Base, TimestampMixin):
    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, index=True)
    status = Column(Enum(TransactionStatus), default=TransactionStatus.UNPAID, nullable=False)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    payment_document = Column(String, nullable=True)
    quantity = Column(Integer, nullable=False)
    transaction_type = Column(Enum(TransactionType), nullable=False)
    subtotal = Column(Numeric(14, 2), nullable=False)
    ppn = Column(Numeric(14, 2), nullable=False)
    grandtotal = Column(Numeric(14, 2), nullable=False)

    # Relationships
    product = relationship("Product", back_populates="transactions")
    user = relationship("User")
