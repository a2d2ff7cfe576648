from typing import Optional
from pydantic import BaseModel, Field
from junkcrm.models.user import UserRole


# Properties to receive via API on registration
class UserRegister(BaseModel):
    username: str = Field(min_length=3)
    password: str = Field(min_length=6)
    role: Optional[UserRole] = None


class UserLogin(BaseModel):
    username: str = Field(min_length=3)
    password: str = Field(min_length=6)


# Returned from a successful login
class LoginResponse(BaseModel):
    id: str
    username: str
    role: UserRole
    access_token: str
    token_type: str = "bearer"
