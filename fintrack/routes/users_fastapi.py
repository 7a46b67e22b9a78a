# -*- coding: utf-8 -*-
"""
Profile endpoints for the signed-in account.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from fintrack import accounts
from fintrack.database import get_db
from fintrack.dependencies import get_current_account
from fintrack.models.account import Account
from fintrack.schemas.account import AccountRead, AvatarUpdate, PasswordChange, ProfileUpdate

router = APIRouter(
    prefix="/api/users/me",
    tags=["Users"]
)


@router.get("", response_model=AccountRead)
def read_me(current_account: Account = Depends(get_current_account)):
    return current_account


@router.put("", response_model=AccountRead)
def update_me(
    profile: ProfileUpdate,
    current_account: Account = Depends(get_current_account),
    db: Session = Depends(get_db)
):
    return accounts.update_profile(db, current_account.id, profile.full_name)


@router.put("/password", status_code=status.HTTP_204_NO_CONTENT)
def change_password(
    passwords: PasswordChange,
    current_account: Account = Depends(get_current_account),
    db: Session = Depends(get_db)
):
    """
    Replaces the password hash. A wrong current password answers 403.
    """
    accounts.change_password(db, current_account.id, passwords.current_password, passwords.new_password)
    return None


@router.put("/avatar", response_model=AccountRead)
def update_avatar(
    avatar: AvatarUpdate,
    current_account: Account = Depends(get_current_account),
    db: Session = Depends(get_db)
):
    return accounts.update_avatar(db, current_account.id, avatar.avatar)
