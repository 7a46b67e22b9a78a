# -*- coding: utf-8 -*-
"""
FastAPI dependencies shared by the authenticated routers.
"""
from fastapi import Depends, HTTPException, Request, Response, status
from sqlalchemy.orm import Session

from fintrack import session as session_store
from fintrack.database import get_db
from fintrack.models.account import Account


def get_current_account(request: Request, response: Response, db: Session = Depends(get_db)) -> Account:
    """
    Resolve the signed-in account from the session cookie and slide the
    cookie's expiry. Anonymous or stale sessions get a 401.
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
    )
    claims = session_store.read_session(request)
    if claims is None:
        raise credentials_exception
    account = db.query(Account).filter(Account.id == claims.account_id).first()
    if account is None:
        raise credentials_exception
    session_store.refresh(request, response)
    return account
