from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional


class RegisterRequest(BaseModel):
    username: Optional[str] = None
    email: Optional[EmailStr] = None
    password: Optional[str] = None

    @field_validator("username", "email", "password", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        if isinstance(value, str) and value == "":
            return None
        return value

class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None

    @field_validator("email", "password", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        if isinstance(value, str) and value == "":
            return None
        return value

class UserOut(BaseModel):
    id: int
    username: str
    email: str
    is_admin: bool = Field(serialization_alias="isAdmin")

    class Config:
        from_attributes = True

class AuthResponse(BaseModel):
    message: str
    token: str
    user: UserOut
