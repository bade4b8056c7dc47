from pydantic import BaseModel
from typing import Generic, TypeVar

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Envelope shared by every JSON endpoint: ``{code, status, data}``."""
    code: int = 200
    status: str = "success"
    data: T


class Message(BaseModel):
    message: str


def success(data, code: int = 200) -> dict:
    return {"code": code, "status": "success", "data": data}
