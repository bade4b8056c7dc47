from sqlalchemy.orm import Session, selectinload
import logging
from models.product import Product
from models.transaction import Transaction
from schemas.product import ProductCreate, ProductUpdate
from crud.category import get_category
from exceptions import ConflictError, NotFoundError

logger = logging.getLogger(__name__)


def _product_query(db: Session):
    return db.query(Product).options(
        selectinload(Product.category),
        selectinload(Product.comments),
    )


def get_product(db: Session, product_id: int) -> Product:
    product = _product_query(db).filter(Product.id == product_id).first()
    if not product:
        raise NotFoundError("Product not found")
    return product


def get_products(db: Session):
    return _product_query(db).order_by(Product.created_at.desc(), Product.id.desc()).all()


def create_product(db: Session, product: ProductCreate) -> Product:
    get_category(db, product.category)

    data = product.model_dump()
    data['category_id'] = data.pop('category')
    db_product = Product(**data)
    db.add(db_product)
    db.commit()
    db.refresh(db_product)
    return db_product


def update_product(db: Session, product_id: int, product_update: ProductUpdate) -> Product:
    db_product = get_product(db, product_id)
    update_data = product_update.model_dump(exclude_unset=True)

    if 'category' in update_data:
        category_id = update_data.pop('category')
        if category_id is not None:
            get_category(db, category_id)
            update_data['category_id'] = category_id

    for key, value in update_data.items():
        if value is not None:
            setattr(db_product, key, value)

    db.commit()
    db.refresh(db_product)
    return db_product


def delete_product(db: Session, product_id: int) -> None:
    db_product = get_product(db, product_id)
    if db.query(Transaction.id).filter(Transaction.product_id == product_id).first():
        logger.warning(f"Rejected delete of product {product_id}: referenced by transactions")
        raise ConflictError("Cannot delete product because it is referenced by transactions.")
    db.delete(db_product)
    db.commit()
