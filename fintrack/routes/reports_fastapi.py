# -*- coding: utf-8 -*-
"""
Aggregated figures for charts and summary cards.
"""
from typing import List, Literal

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from fintrack import reports
from fintrack.database import get_db
from fintrack.dependencies import get_current_account
from fintrack.models.account import Account
from fintrack.schemas.report import CategoryTotal, MonthlyComparison, MonthTotal, Totals

router = APIRouter(
    tags=["Reports"]
)


@router.get("/totals", response_model=Totals)
def get_totals(current_account: Account = Depends(get_current_account), db: Session = Depends(get_db)):
    income = reports.sum_by_type(db, current_account.id, "income")
    expense = reports.sum_by_type(db, current_account.id, "expense")
    return Totals(income=income, expense=expense, balance=income - expense)


@router.get("/by-category", response_model=List[CategoryTotal])
def get_by_category(
    type: Literal["income", "expense"] = "expense",
    current_account: Account = Depends(get_current_account),
    db: Session = Depends(get_db)
):
    return reports.group_by_category(db, current_account.id, type)


@router.get("/monthly", response_model=List[MonthTotal])
def get_monthly(
    type: Literal["income", "expense"] = "income",
    months: int = Query(6, ge=1, le=60),
    current_account: Account = Depends(get_current_account),
    db: Session = Depends(get_db)
):
    """
    Totals per calendar month, oldest first, ending with the current month.
    """
    return reports.monthly_series(db, current_account.id, type, months)


@router.get("/comparison", response_model=MonthlyComparison)
def get_comparison(
    months: int = Query(6, ge=1, le=60),
    current_account: Account = Depends(get_current_account),
    db: Session = Depends(get_db)
):
    return MonthlyComparison(
        income=reports.monthly_series(db, current_account.id, "income", months),
        expense=reports.monthly_series(db, current_account.id, "expense", months),
    )
