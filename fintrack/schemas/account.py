# -*- coding: utf-8 -*-
"""
Pydantic schemas for accounts, credentials and session claims.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.networks import validate_email


class SignupRequest(BaseModel):
    full_name: str = Field(..., alias="fullName", min_length=1, max_length=150)
    email: str
    password: str = Field(..., min_length=6)

    class Config:
        populate_by_name = True

    @field_validator("email")
    @classmethod
    def check_email_format(cls, value):
        # Format check only: the address is stored exactly as typed, since login matches it verbatim
        validate_email(value)
        return value


class LoginRequest(BaseModel):
    # Plain str: a malformed email is just another failed login (403), not a 422
    email: str
    password: str


class AccountRead(BaseModel):
    id: int
    email: str
    full_name: str = Field(..., alias="fullName")
    avatar: Optional[str] = None

    class Config:
        from_attributes = True
        populate_by_name = True


class AccountEnvelope(BaseModel):
    data: Optional[AccountRead] = None
    error: Optional[str] = None


class ProfileUpdate(BaseModel):
    full_name: str = Field(..., alias="fullName", min_length=1, max_length=150)

    class Config:
        populate_by_name = True


class PasswordChange(BaseModel):
    current_password: str = Field(..., alias="currentPassword")
    new_password: str = Field(..., alias="newPassword", min_length=6)

    class Config:
        populate_by_name = True


class AvatarUpdate(BaseModel):
    avatar: str = Field(..., max_length=500)


class SessionClaims(BaseModel):
    """Identity facts carried inside the signed session token."""
    account_id: int
    email: str
    full_name: str
    issued_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None
