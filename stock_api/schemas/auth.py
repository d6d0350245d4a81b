"""
Account Schemas: sign-up, sign-in and password change
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Credentials(BaseModel):
    email: str = Field(..., min_length=3, max_length=255)
    password: str
    password_confirmation: Optional[str] = None


class CredentialsIn(BaseModel):
    credentials: Credentials


class Passwords(BaseModel):
    old: str
    new: str


class PasswordsIn(BaseModel):
    passwords: Passwords


class UserOut(BaseModel):
    id: int
    email: str

    model_config = ConfigDict(from_attributes=True)


class SignedInUserOut(UserOut):
    token: str


class UserEnvelope(BaseModel):
    user: UserOut


class SignedInUserEnvelope(BaseModel):
    user: SignedInUserOut
