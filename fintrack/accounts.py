# -*- coding: utf-8 -*-
"""
Account registration and credential checks.
"""
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from fintrack.auth import dummy_verify_password, get_password_hash, verify_password
from fintrack.errors import DuplicateAccount, InvalidCredentials, NotFound
from fintrack.models.account import Account

logger = logging.getLogger(__name__)


def get_account_by_email(db: Session, email: str):
    # Exact match: "A@x.com" and "a@x.com" are different accounts
    return db.query(Account).filter(Account.email == email).first()


def get_account(db: Session, account_id: int) -> Account:
    account = db.query(Account).filter(Account.id == account_id).first()
    if account is None:
        raise NotFound("User not found")
    return account


def register(db: Session, email: str, password: str, full_name: str) -> Account:
    if get_account_by_email(db, email):
        logger.info("Signup rejected: email already registered")
        raise DuplicateAccount()

    account = Account(
        email=email,
        full_name=full_name,
        hashed_password=get_password_hash(password),
    )
    try:
        db.add(account)
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent signup for the same email
        db.rollback()
        raise DuplicateAccount()
    db.refresh(account)
    logger.info("Account %s created", account.id)
    return account


def authenticate(db: Session, email: str, password: str) -> Account:
    account = get_account_by_email(db, email)
    if account is None:
        dummy_verify_password()
        raise InvalidCredentials()
    if not verify_password(password, account.hashed_password):
        raise InvalidCredentials()
    return account


def change_password(db: Session, account_id: int, current_password: str, new_password: str):
    account = get_account(db, account_id)
    if not verify_password(current_password, account.hashed_password):
        raise InvalidCredentials("Current password is incorrect")
    account.hashed_password = get_password_hash(new_password)
    db.commit()


def update_profile(db: Session, account_id: int, full_name: str) -> Account:
    account = get_account(db, account_id)
    account.full_name = full_name
    db.commit()
    db.refresh(account)
    return account


def update_avatar(db: Session, account_id: int, avatar: str) -> Account:
    account = get_account(db, account_id)
    account.avatar = avatar
    db.commit()
    db.refresh(account)
    return account
