# -*- coding: utf-8 -*-
"""
FastAPI routes for income and expense transactions.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from fintrack import queries
from fintrack.database import get_db
from fintrack.dependencies import get_current_account
from fintrack.errors import ValidationFailure
from fintrack.models.account import Account
from fintrack.models.category import Category
from fintrack.models.transaction import Transaction
from fintrack.schemas.transaction import TransactionCreate, TransactionRead

router = APIRouter(
    tags=["Transactions"],
    responses={404: {"description": "Transaction not found"}},
)


def _owned_category(db: Session, account_id: int, transaction: TransactionCreate) -> Category:
    category = db.query(Category).filter(
        Category.id == transaction.category_id,
        Category.account_id == account_id
    ).first()
    if category is None:
        raise ValidationFailure("Unknown category")
    # An income transaction may only use an income category, and vice versa
    if category.type != transaction.type:
        raise ValidationFailure(f"Category '{category.name}' is not an {transaction.type} category")
    return category


@router.post("", response_model=TransactionRead, status_code=status.HTTP_201_CREATED)
def create_transaction(
    transaction: TransactionCreate,
    current_account: Account = Depends(get_current_account),
    db: Session = Depends(get_db)
):
    _owned_category(db, current_account.id, transaction)

    db_transaction = Transaction(account_id=current_account.id, **transaction.model_dump())
    db.add(db_transaction)
    db.commit()
    db.refresh(db_transaction)
    return db_transaction


@router.get("", response_model=List[TransactionRead])
def read_transactions(
    type: Optional[str] = None,
    skip: int = 0,
    limit: int = 100,
    current_account: Account = Depends(get_current_account),
    db: Session = Depends(get_db)
):
    return queries.list_transactions(db, current_account.id, type, skip=skip, limit=limit)


@router.delete("/{transaction_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_transaction(
    transaction_id: int,
    current_account: Account = Depends(get_current_account),
    db: Session = Depends(get_db)
):
    db_transaction = db.query(Transaction).filter(
        Transaction.id == transaction_id,
        Transaction.account_id == current_account.id
    ).first()
    if db_transaction is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Transaction not found")
    db.delete(db_transaction)
    db.commit()
    return None
