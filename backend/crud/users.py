from sqlalchemy.orm import Session
from sqlalchemy import or_
import logging
from models.users import User, ROLE_ADMIN, ROLE_USER
from models.transaction import Transaction
from schemas.users import UserCreate, LoginRequest, UserRoleUpdate
from exceptions import AuthenticationError, ConflictError, NotFoundError
from utils.auth_utils import hash_password, verify_password, create_access_token

logger = logging.getLogger(__name__)


def get_user(db: Session, user_id: int) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFoundError("User not found")
    return user


def get_users(db: Session):
    return db.query(User).order_by(User.created_at.desc(), User.id.desc()).all()


def register_user(db: Session, data: UserCreate, role: str = ROLE_USER) -> User:
    existing = db.query(User).filter(or_(User.email == data.email, User.username == data.username)).first()
    if existing:
        raise ConflictError("Email has been used" if existing.email == data.email else "Username has been used")

    user = User(
        username=data.username,
        email=data.email,
        address=data.address,
        role=role,
        hashed_password=hash_password(data.password),
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info(f"User {user.username} (ID: {user.id}) registered with role {user.role}")
    return user


def authenticate(db: Session, credentials: LoginRequest):
    """Return ``(user, token)`` for valid credentials."""
    user = db.query(User).filter(User.email == credentials.email).first()
    if not user or not verify_password(credentials.password, user.hashed_password):
        logger.warning(f"Failed login attempt for {credentials.email}")
        raise AuthenticationError("Authentication failed. Please ensure your email and password are correct.")
    return user, create_access_token(user)


def delete_user(db: Session, user_id: int) -> None:
    user = get_user(db, user_id)
    in_use = db.query(Transaction.id).filter(Transaction.user_id == user_id).first()
    if in_use:
        raise ConflictError("Cannot delete user because it is referenced by transactions.")
    db.delete(user)
    db.commit()
    logger.info(f"User {user.username} (ID: {user_id}) deleted")


def update_user_role(db: Session, user_id: int, data: UserRoleUpdate) -> User:
    user = get_user(db, user_id)
    user.role = data.role
    db.commit()
    db.refresh(user)
    logger.info(f"User {user.username} (ID: {user_id}) is now {user.role}")
    return user


def ensure_admin(db: Session, username: str, email: str, password: str) -> User:
    """Create the bootstrap admin unless a user with that email already exists."""
    existing = db.query(User).filter(User.email == email).first()
    if existing:
        return existing
    return register_user(db, UserCreate(username=username, email=email, password=password), role=ROLE_ADMIN)
