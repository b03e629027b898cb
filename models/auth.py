# models/auth.py

from typing import Optional

from pydantic import BaseModel


class LoginRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class AuthUser(BaseModel):
    id: str
    username: str
    role: str
    name: Optional[str] = None


class LoginResponse(BaseModel):
    token: str
    user: AuthUser
