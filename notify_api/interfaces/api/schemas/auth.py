"""Authentication related schemas."""

from pydantic import BaseModel, EmailStr, Field


class RegisterRequest(BaseModel):
    email: EmailStr = Field(..., description="Email address used to log in")
    username: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=6, description="Plain password, stored only as a hash")


class RegisterResponse(BaseModel):
    message: str
    id: int


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    message: str
    id: int
    is_admin: bool
    access_token: str = Field(
        ..., description="Same token as the session cookie, for clients without cookies"
    )
    token_type: str = "bearer"


class ProtectedResponse(BaseModel):
    message: str
    user_id: int
    is_admin: bool


class MessageResponse(BaseModel):
    message: str
