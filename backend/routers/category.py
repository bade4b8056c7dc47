from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
import logging
from database import get_db
from models.users import User, ROLE_ADMIN
from schemas.category import Category, CategoryCreate
from schemas.response import ApiResponse, Message, success
from crud import category as crud_category
from utils.auth_utils import get_current_user, require_role, get_user_identifier

router = APIRouter(prefix="/categories", tags=["Categories"])
logger = logging.getLogger(__name__)


@router.post("", response_model=ApiResponse[Category], status_code=status.HTTP_201_CREATED)
def create_category(
    category: CategoryCreate,
    db: Session = Depends(get_db),
    user: User = Depends(require_role([ROLE_ADMIN]))
):
    db_category = crud_category.create_category(db, category)
    logger.info(f"Category '{db_category.name}' (ID: {db_category.id}) created by {get_user_identifier(user)}")
    return success(db_category, code=status.HTTP_201_CREATED)


@router.get("/list", response_model=ApiResponse[List[Category]])
def get_categories(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return success(crud_category.get_categories(db))


@router.delete("/{category_id}", response_model=ApiResponse[Message])
def delete_category(
    category_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(require_role([ROLE_ADMIN]))
):
    crud_category.delete_category(db, category_id)
    logger.info(f"Category ID {category_id} deleted by {get_user_identifier(user)}")
    return success({"message": "Category deleted successfully"})
