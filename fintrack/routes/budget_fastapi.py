# -*- coding: utf-8 -*-
"""
FastAPI routes for the budget plan.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from fintrack import queries, reports
from fintrack.database import get_db
from fintrack.dependencies import get_current_account
from fintrack.models.account import Account
from fintrack.models.budget_item import BudgetItem
from fintrack.schemas.budget_item import (
    BudgetItemCreate,
    BudgetItemRead,
    BudgetItemUpdate,
    BudgetPriority,
    BudgetTotals,
)

router = APIRouter(
    tags=["Budget"],
    responses={404: {"description": "Budget item not found"}},
)


def _get_owned_item(db: Session, account_id: int, item_id: int) -> BudgetItem:
    db_item = db.query(BudgetItem).filter(
        BudgetItem.id == item_id,
        BudgetItem.account_id == account_id
    ).first()
    if db_item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Budget item not found")
    return db_item


# --- CRUD Endpoints ---

@router.post("", response_model=BudgetItemRead, status_code=status.HTTP_201_CREATED)
def create_budget_item(
    item: BudgetItemCreate,
    current_account: Account = Depends(get_current_account),
    db: Session = Depends(get_db)
):
    db_item = BudgetItem(account_id=current_account.id, **item.model_dump())
    db.add(db_item)
    db.commit()
    db.refresh(db_item)
    return db_item


@router.get("", response_model=List[BudgetItemRead])
def read_budget_items(
    priority: Optional[BudgetPriority] = None,
    current_account: Account = Depends(get_current_account),
    db: Session = Depends(get_db)
):
    """
    Lists budget items, newest first, optionally only one priority.
    """
    return queries.list_budget_items(db, current_account.id, priority)


@router.get("/totals", response_model=BudgetTotals)
def read_budget_totals(
    current_account: Account = Depends(get_current_account),
    db: Session = Depends(get_db)
):
    return BudgetTotals(
        total=reports.budget_total(db, current_account.id),
        most_crucial=reports.budget_total(db, current_account.id, "most-crucial"),
        less_crucial=reports.budget_total(db, current_account.id, "less-crucial"),
    )


@router.put("/{item_id}", response_model=BudgetItemRead)
def update_budget_item(
    item_id: int,
    item_update: BudgetItemUpdate,
    current_account: Account = Depends(get_current_account),
    db: Session = Depends(get_db)
):
    db_item = _get_owned_item(db, current_account.id, item_id)
    for key, value in item_update.model_dump(exclude_unset=True).items():
        setattr(db_item, key, value)
    db.commit()
    db.refresh(db_item)
    return db_item


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_budget_item(
    item_id: int,
    current_account: Account = Depends(get_current_account),
    db: Session = Depends(get_db)
):
    db_item = _get_owned_item(db, current_account.id, item_id)
    db.delete(db_item)
    db.commit()
    return None
