# -*- coding: utf-8 -*-
"""
Login, signup and logout endpoints. These are the only places a session
cookie is created or removed.
"""
import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fintrack import accounts
from fintrack import session as session_store
from fintrack.categories import seed_default_categories
from fintrack.database import get_db
from fintrack.schemas.account import AccountEnvelope, AccountRead, LoginRequest, SignupRequest

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["Authentication"]
)


def _envelope(account=None, error=None):
    data = AccountRead.model_validate(account).model_dump(by_alias=True) if account is not None else None
    return {"data": data, "error": error}


@router.post("/login", response_model=AccountEnvelope)
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    # InvalidCredentials propagates to the app handler (403)
    try:
        account = accounts.authenticate(db, credentials.email, credentials.password)
    except SQLAlchemyError:
        logger.exception("Error verifying credentials")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_envelope(error="An error occurred during login"),
        )

    response = JSONResponse(status_code=status.HTTP_200_OK, content=_envelope(account))
    session_store.create_session(response, account)
    return response


@router.post("/users", response_model=AccountEnvelope, status_code=status.HTTP_201_CREATED)
def signup(new_account: SignupRequest, db: Session = Depends(get_db)):
    # DuplicateAccount propagates to the app handler (409)
    try:
        account = accounts.register(db, new_account.email, new_account.password, new_account.full_name)
        seed_default_categories(db, account.id)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error creating user")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_envelope(error="An error occurred during sign up"),
        )

    response = JSONResponse(status_code=status.HTTP_201_CREATED, content=_envelope(account))
    session_store.create_session(response, account)
    return response


@router.post("/logout")
def logout():
    response = JSONResponse(status_code=status.HTTP_200_OK, content={"data": None, "error": None})
    session_store.destroy_session(response)
    return response
