# -*- coding: utf-8 -*-
"""
FastAPI routes for transaction categories.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from fintrack import queries
from fintrack.categories import random_color
from fintrack.database import get_db
from fintrack.dependencies import get_current_account
from fintrack.models.account import Account
from fintrack.models.category import Category
from fintrack.schemas.category import CategoryCreate, CategoryRead

router = APIRouter(
    tags=["Categories"],
    responses={404: {"description": "Category not found"}},
)


@router.post("", response_model=CategoryRead, status_code=status.HTTP_201_CREATED)
def create_category(
    category: CategoryCreate,
    current_account: Account = Depends(get_current_account),
    db: Session = Depends(get_db)
):
    db_category = Category(
        account_id=current_account.id,
        name=category.name,
        type=category.type,
        color=category.color or random_color(),
    )
    db.add(db_category)
    db.commit()
    db.refresh(db_category)
    return db_category


@router.get("", response_model=List[CategoryRead])
def read_categories(
    type: Optional[str] = None,
    current_account: Account = Depends(get_current_account),
    db: Session = Depends(get_db)
):
    """
    Lists the account's categories, optionally filtered by type.
    """
    return queries.list_categories(db, current_account.id, type)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(
    category_id: int,
    current_account: Account = Depends(get_current_account),
    db: Session = Depends(get_db)
):
    """
    Deletes a category together with its transactions.
    """
    db_category = db.query(Category).filter(
        Category.id == category_id,
        Category.account_id == current_account.id
    ).first()
    if db_category is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    db.delete(db_category)
    db.commit()
    return None
