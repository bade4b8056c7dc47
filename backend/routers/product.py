from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
import logging
from database import get_db
from models.users import User, ROLE_ADMIN
from schemas.product import Product, ProductCreate, ProductUpdate
from schemas.response import ApiResponse, Message, success
from crud import product as crud_product
from utils.auth_utils import get_current_user, require_role, get_user_identifier

router = APIRouter(prefix="/products", tags=["Products"])
logger = logging.getLogger(__name__)


@router.post("", response_model=ApiResponse[Product], status_code=status.HTTP_201_CREATED)
def create_product(
    product: ProductCreate,
    db: Session = Depends(get_db),
    user: User = Depends(require_role([ROLE_ADMIN]))
):
    db_product = crud_product.create_product(db, product)
    logger.info(f"Product '{db_product.title}' (ID: {db_product.id}) created by {get_user_identifier(user)}")
    return success(crud_product.get_product(db, db_product.id), code=status.HTTP_201_CREATED)


@router.get("/list", response_model=ApiResponse[List[Product]])
def get_products(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return success(crud_product.get_products(db))


@router.get("/{product_id}", response_model=ApiResponse[Product])
def get_product(product_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return success(crud_product.get_product(db, product_id))


@router.put("/{product_id}", response_model=ApiResponse[Product])
def update_product(
    product_id: int,
    product_update: ProductUpdate,
    db: Session = Depends(get_db),
    user: User = Depends(require_role([ROLE_ADMIN]))
):
    crud_product.update_product(db, product_id, product_update)
    logger.info(f"Product ID {product_id} updated by {get_user_identifier(user)}")
    return success(crud_product.get_product(db, product_id))


@router.delete("/{product_id}", response_model=ApiResponse[Message])
def delete_product(
    product_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(require_role([ROLE_ADMIN]))
):
    crud_product.delete_product(db, product_id)
    logger.info(f"Product ID {product_id} deleted by {get_user_identifier(user)}")
    return success({"message": "Product deleted successfully"})
