from sqlalchemy.orm import Session
from models.comment import Comment
from models.product import Product
from models.users import User
from schemas.comment import CommentCreate
from exceptions import NotFoundError


def create_comment(db: Session, comment: CommentCreate, user: User) -> Comment:
    product = db.query(Product).filter(Product.id == comment.product_id).first()
    if not product:
        raise NotFoundError("Product not found")

    db_comment = Comment(product_id=product.id, name=user.username, message=comment.message)
    db.add(db_comment)
    db.commit()
    db.refresh(db_comment)
    return db_comment
