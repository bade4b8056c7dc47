from sqlalchemy.orm import Session, selectinload
from sqlalchemy.exc import SQLAlchemyError
from decimal import Decimal
import logging
from models.product import Product
from models.transaction import Transaction
from models.users import User, ROLE_ADMIN
from schemas.transaction import TransactionCreate, TransactionUpdate
from exceptions import InsufficientStockError, NotFoundError, PermissionDeniedError
from utils.formatting import quantize_money

logger = logging.getLogger(__name__)

# PPN (value-added tax) charged on every order
PPN_RATE = Decimal("0.11")


def compute_totals(price, quantity: int):
    """Return ``(subtotal, ppn, grandtotal)`` for ``quantity`` units at ``price``."""
    subtotal = quantize_money(Decimal(price) * quantity)
    ppn = quantize_money(subtotal * PPN_RATE)
    return subtotal, ppn, subtotal + ppn


def _transaction_query(db: Session):
    return db.query(Transaction).options(
        selectinload(Transaction.product),
        selectinload(Transaction.user),
    )


def _check_owner_override(caller: User, user_id) -> None:
    # only admins may book or move orders on behalf of someone else
    if user_id is not None and user_id != caller.id and caller.role != ROLE_ADMIN:
        raise PermissionDeniedError("Only admins can place orders for another user")


def _get_user(db: Session, user_id: int) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFoundError("User not found")
    return user


def get_transaction(db: Session, transaction_id: int) -> Transaction:
    transaction = _transaction_query(db).filter(Transaction.id == transaction_id).first()
    if not transaction:
        raise NotFoundError("Transaction not found")
    return transaction


def get_transactions(db: Session, user_id: int = None):
    query = _transaction_query(db)
    if user_id is not None:
        query = query.filter(Transaction.user_id == user_id)
    return query.order_by(Transaction.created_at.desc(), Transaction.id.desc()).all()


def create_transaction(db: Session, data: TransactionCreate, user: User) -> Transaction:
    """
    Creates an order and takes its quantity out of the product's stock.

    The product row is locked for the duration of the database transaction, and the
    order insert and the stock decrement are committed together, so two concurrent
    orders cannot both pass the stock check on the same units.
    """
    _check_owner_override(user, data.user)

    product = db.query(Product).filter(Product.id == data.product).with_for_update().first()
    if not product:
        db.rollback()
        raise NotFoundError("Product not found")

    owner = _get_user(db, data.user) if data.user is not None else user

    if product.stock < data.quantity:
        available = product.stock
        db.rollback()
        logger.warning(f"Insufficient stock for product {data.product}. Available: {available}, Requested: {data.quantity}")
        raise InsufficientStockError(available, data.quantity)

    subtotal, ppn, grandtotal = compute_totals(product.price, data.quantity)
    db_transaction = Transaction(
        status=data.status,
        product_id=product.id,
        user_id=owner.id,
        payment_document=data.payment_document,
        quantity=data.quantity,
        transaction_type=data.transaction_type,
        subtotal=subtotal,
        ppn=ppn,
        grandtotal=grandtotal,
    )
    product.stock -= data.quantity
    db.add(db_transaction)
    db.add(product)

    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Failed to persist transaction for product {product.id}")
        raise

    logger.info(f"Transaction (ID: {db_transaction.id}) created for product {product.id}, quantity {data.quantity} by user {user.username}")
    return get_transaction(db, db_transaction.id)


def update_transaction(db: Session, transaction_id: int, data: TransactionUpdate, user: User) -> Transaction:
    """
    Merges the given fields into the order. When the product or the quantity changes,
    subtotal, ppn and grandtotal are recomputed. Stock is not re-adjusted.
    """
    _check_owner_override(user, data.user)
    db_transaction = get_transaction(db, transaction_id)
    update_data = data.model_dump(exclude_unset=True)

    product_id = update_data.pop('product', None)
    user_id = update_data.pop('user', None)

    product = db_transaction.product
    if product_id is not None:
        product = db.query(Product).filter(Product.id == product_id).first()
        if not product:
            raise NotFoundError("Product not found")
        db_transaction.product = product

    if user_id is not None:
        db_transaction.user = _get_user(db, user_id)

    for key, value in update_data.items():
        if value is not None:
            setattr(db_transaction, key, value)

    if product_id is not None or update_data.get('quantity') is not None:
        subtotal, ppn, grandtotal = compute_totals(product.price, db_transaction.quantity)
        db_transaction.subtotal = subtotal
        db_transaction.ppn = ppn
        db_transaction.grandtotal = grandtotal

    db.commit()
    return get_transaction(db, transaction_id)


def delete_transaction(db: Session, transaction_id: int) -> None:
    db_transaction = get_transaction(db, transaction_id)
    db.delete(db_transaction)
    db.commit()
