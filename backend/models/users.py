from database import Base
from sqlalchemy import Column, Integer, String
from models.audit_mixin import TimestampMixin

ROLE_ADMIN = "admin"
ROLE_USER = "user"
VALID_ROLES = [ROLE_ADMIN, ROLE_USER]


class User(Base, TimestampMixin):
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(255), unique=True, index=True, nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    address = Column(String, nullable=True)
    role = Column(String(50), nullable=False, default=ROLE_USER)

    def __repr__(self):
        return f"<User(id={self.id}, username={self.username}, role={self.role})>"
