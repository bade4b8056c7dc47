from typing import Annotated, List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from starlette import status
from database import get_db
from models.users import User, ROLE_ADMIN
from schemas.users import UserCreate, LoginRequest, UserRoleUpdate, User as UserSchema, LoginResponse
from schemas.response import ApiResponse, Message, success
from crud import users as crud_users
from utils.auth_utils import get_current_user, require_role

router = APIRouter(prefix="/users", tags=["users"])

db_dependency = Annotated[Session, Depends(get_db)]


@router.post("/register", response_model=ApiResponse[UserSchema], status_code=status.HTTP_201_CREATED)
def register_user(user: UserCreate, db: db_dependency):
    """Public sign-up. New accounts always get the plain user role."""
    new_user = crud_users.register_user(db, user)
    return success(new_user, code=status.HTTP_201_CREATED)


@router.post("/login", response_model=ApiResponse[LoginResponse])
def login(credentials: LoginRequest, db: db_dependency):
    user, token = crud_users.authenticate(db, credentials)
    data = UserSchema.model_validate(user).model_dump()
    return success(LoginResponse(**data, token=token))


@router.get("/list", response_model=ApiResponse[List[UserSchema]])
def list_users(db: db_dependency, user: User = Depends(require_role([ROLE_ADMIN]))):
    return success(crud_users.get_users(db))


@router.get("/{user_id}", response_model=ApiResponse[UserSchema])
def get_user(user_id: int, db: db_dependency, user: User = Depends(get_current_user)):
    return success(crud_users.get_user(db, user_id))


@router.put("/{user_id}/role", response_model=ApiResponse[UserSchema])
def update_user_role(
    user_id: int,
    role_update: UserRoleUpdate,
    db: db_dependency,
    user: User = Depends(require_role([ROLE_ADMIN]))
):
    return success(crud_users.update_user_role(db, user_id, role_update))


@router.delete("/delete/{user_id}", response_model=ApiResponse[Message])
def delete_user(user_id: int, db: db_dependency, user: User = Depends(require_role([ROLE_ADMIN]))):
    crud_users.delete_user(db, user_id)
    return success({"message": "User deleted successfully"})
