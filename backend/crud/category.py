from sqlalchemy.orm import Session
import logging
from models.category import Category
from models.product import Product
from schemas.category import CategoryCreate
from exceptions import ConflictError, NotFoundError

logger = logging.getLogger(__name__)


def get_category(db: Session, category_id: int) -> Category:
    category = db.query(Category).filter(Category.id == category_id).first()
    if not category:
        raise NotFoundError("Category not found")
    return category


def get_categories(db: Session):
    return db.query(Category).order_by(Category.created_at.desc(), Category.id.desc()).all()


def create_category(db: Session, category: CategoryCreate) -> Category:
    db_category = Category(**category.model_dump())
    db.add(db_category)
    db.commit()
    db.refresh(db_category)
    return db_category


def delete_category(db: Session, category_id: int) -> None:
    db_category = get_category(db, category_id)
    if db.query(Product.id).filter(Product.category_id == category_id).first():
        logger.warning(f"Rejected delete of category {category_id}: referenced by products")
        raise ConflictError("Cannot delete category because it is referenced by products.")
    db.delete(db_category)
    db.commit()
