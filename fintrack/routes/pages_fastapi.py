# -*- coding: utf-8 -*-
"""
Page routes. Each returns the data its page renders; the route guard in
front of them decides who may reach them.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from fintrack import queries, reports
from fintrack.database import get_db
from fintrack.dependencies import get_current_account
from fintrack.models.account import Account
from fintrack.schemas.account import AccountRead
from fintrack.schemas.budget_item import BudgetItemRead
from fintrack.schemas.category import CategoryRead
from fintrack.schemas.transaction import TransactionRead

router = APIRouter(
    tags=["Pages"],
    include_in_schema=False
)


def _tracker_page(page, type_, account, db):
    transactions = queries.list_transactions(db, account.id, type_)
    categories = queries.list_categories(db, account.id, type_)
    return {
        "page": page,
        "total": reports.sum_by_type(db, account.id, type_),
        "transactions": [TransactionRead.model_validate(t) for t in transactions],
        "categories": [CategoryRead.model_validate(c) for c in categories],
        "by_category": reports.group_by_category(db, account.id, type_),
    }


@router.get("/")
def home():
    return {"page": "home"}


@router.get("/login")
def login_page():
    return {"page": "login"}


@router.get("/signup")
def signup_page():
    return {"page": "signup"}


@router.get("/dashboard")
def dashboard_page(current_account: Account = Depends(get_current_account), db: Session = Depends(get_db)):
    income = reports.sum_by_type(db, current_account.id, "income")
    expense = reports.sum_by_type(db, current_account.id, "expense")
    return {
        "page": "dashboard",
        "account": AccountRead.model_validate(current_account),
        "totals": {"income": income, "expense": expense, "balance": income - expense},
        "recent_transactions": [
            TransactionRead.model_validate(t) for t in reports.recent_transactions(db, current_account.id)
        ],
        "monthly": {
            "income": reports.monthly_series(db, current_account.id, "income"),
            "expense": reports.monthly_series(db, current_account.id, "expense"),
        },
        "expense_by_category": reports.group_by_category(db, current_account.id, "expense"),
    }


@router.get("/income")
def income_page(current_account: Account = Depends(get_current_account), db: Session = Depends(get_db)):
    return _tracker_page("income", "income", current_account, db)


@router.get("/expenses")
def expenses_page(current_account: Account = Depends(get_current_account), db: Session = Depends(get_db)):
    return _tracker_page("expenses", "expense", current_account, db)


@router.get("/budget")
def budget_page(current_account: Account = Depends(get_current_account), db: Session = Depends(get_db)):
    items = queries.list_budget_items(db, current_account.id)
    return {
        "page": "budget",
        "items": [BudgetItemRead.model_validate(i) for i in items],
        "totals": {
            "total": reports.budget_total(db, current_account.id),
            "most_crucial": reports.budget_total(db, current_account.id, "most-crucial"),
            "less_crucial": reports.budget_total(db, current_account.id, "less-crucial"),
        },
    }


@router.get("/reports")
def reports_page(current_account: Account = Depends(get_current_account), db: Session = Depends(get_db)):
    return {
        "page": "reports",
        "monthly": {
            "income": reports.monthly_series(db, current_account.id, "income"),
            "expense": reports.monthly_series(db, current_account.id, "expense"),
        },
        "income_by_category": reports.group_by_category(db, current_account.id, "income"),
        "expense_by_category": reports.group_by_category(db, current_account.id, "expense"),
    }


@router.get("/profile")
def profile_page(current_account: Account = Depends(get_current_account)):
    return {"page": "profile", "account": AccountRead.model_validate(current_account)}
