from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional
from models.users import VALID_ROLES


class UserCreate(BaseModel):
    username: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=8, max_length=72)
    email: EmailStr
    address: Optional[str] = None


# Granting roles is an admin operation; self-registration always yields a plain user
class UserRoleUpdate(BaseModel):
    role: str = Field(..., max_length=255)

    @field_validator('role')
    @classmethod
    def validate_role(cls, v):
        if v not in VALID_ROLES:
            raise ValueError(f"role must be one of {VALID_ROLES}")
        return v


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=8)


class User(BaseModel):
    id: int
    username: str
    email: str
    address: Optional[str] = None
    role: str

    class Config:
        from_attributes = True


class LoginResponse(User):
    token: str
    token_type: str = "bearer"
