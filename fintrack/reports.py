# -*- coding: utf-8 -*-
"""
Per-account aggregation for the dashboard, income/expense pages and reports.

Read failures are logged and answered with an empty result (0, [] or a
zero-filled series) so a storage hiccup never reaches the UI as a crash.
"""
import logging
from collections import defaultdict
from datetime import date
from typing import Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fintrack import queries
from fintrack.models.budget_item import BudgetItem
from fintrack.models.category import Category
from fintrack.models.transaction import Transaction

logger = logging.getLogger(__name__)


def _shift_month(year: int, month: int, delta: int):
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def sum_by_type(db: Session, account_id: int, type_: str) -> float:
    try:
        total = db.query(func.sum(Transaction.amount)).filter(
            Transaction.account_id == account_id,
            Transaction.type == type_,
        ).scalar()
    except SQLAlchemyError:
        logger.exception("Error getting total %s for account %s", type_, account_id)
        return 0.0
    return total or 0.0


def balance(db: Session, account_id: int) -> float:
    return sum_by_type(db, account_id, "income") - sum_by_type(db, account_id, "expense")


def group_by_category(db: Session, account_id: int, type_: str):
    """
    Totals per category of `type_`, e.g.
    [{"name": "Food", "value": 350.0, "color": "#F44336"}, ...].
    Categories that sum to zero are left out.
    """
    total = func.sum(Transaction.amount)
    try:
        rows = (
            db.query(Category.name, Category.color, total)
            .join(Transaction, Transaction.category_id == Category.id)
            .filter(
                Category.account_id == account_id,
                Category.type == type_,
                Transaction.account_id == account_id,
                Transaction.type == type_,
            )
            .group_by(Category.id, Category.name, Category.color)
            .having(total > 0)
            .order_by(Category.name)
            .all()
        )
    except SQLAlchemyError:
        logger.exception("Error getting %s by category for account %s", type_, account_id)
        return []
    return [{"name": name, "value": value, "color": color} for name, color, value in rows]


def monthly_series(db: Session, account_id: int, type_: str, month_count: int = 6, today: Optional[date] = None):
    """
    One bucket per calendar month, the last `month_count` months ending with
    the current one, oldest first: [{"name": "May 2026", "amount": 0.0}, ...].
    """
    today = today or date.today()
    months = [_shift_month(today.year, today.month, -offset) for offset in range(month_count - 1, -1, -1)]
    if not months:
        return []

    first_year, first_month = months[0]
    end_year, end_month = _shift_month(today.year, today.month, 1)
    start, end = date(first_year, first_month, 1), date(end_year, end_month, 1)

    totals = defaultdict(float)
    try:
        rows = db.query(Transaction.date, Transaction.amount).filter(
            Transaction.account_id == account_id,
            Transaction.type == type_,
            Transaction.date >= start,
            Transaction.date < end,
        ).all()
        for tx_date, amount in rows:
            totals[(tx_date.year, tx_date.month)] += amount
    except SQLAlchemyError:
        logger.exception("Error getting monthly %s for account %s", type_, account_id)
        totals.clear()

    return [
        {"name": date(year, month, 1).strftime("%b %Y"), "amount": totals.get((year, month), 0.0)}
        for year, month in months
    ]


def recent_transactions(db: Session, account_id: int, limit: int = 5):
    return queries.list_transactions(db, account_id, limit=limit)


def budget_total(db: Session, account_id: int, priority: Optional[str] = None) -> float:
    try:
        query = db.query(func.sum(BudgetItem.amount)).filter(BudgetItem.account_id == account_id)
        if priority:
            query = query.filter(BudgetItem.priority == priority)
        total = query.scalar()
    except SQLAlchemyError:
        logger.exception("Error getting budget total for account %s", account_id)
        return 0.0
    return total or 0.0
