from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from database import get_db
from models.users import User
from schemas.comment import Comment, CommentCreate
from schemas.response import ApiResponse, success
from crud import comment as crud_comment
from utils.auth_utils import get_current_user

router = APIRouter(prefix="/comments", tags=["Comments"])


@router.post("", response_model=ApiResponse[Comment], status_code=status.HTTP_201_CREATED)
def create_comment(
    comment: CommentCreate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user)
):
    """Add a comment to a product, signed with the caller's username."""
    return success(crud_comment.create_comment(db, comment, user), code=status.HTTP_201_CREATED)
