# -*- coding: utf-8 -*-
"""
Account-scoped list reads shared by the API and page routes.

Like the aggregates in reports.py, a storage failure is logged and answered
with an empty list.
"""
import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from fintrack.models.budget_item import BudgetItem
from fintrack.models.category import Category
from fintrack.models.transaction import Transaction

logger = logging.getLogger(__name__)


def list_transactions(db: Session, account_id: int, type_: Optional[str] = None, skip: int = 0, limit: Optional[int] = None):
    """Newest first."""
    try:
        query = db.query(Transaction).options(joinedload(Transaction.category)).filter(
            Transaction.account_id == account_id
        )
        if type_:
            query = query.filter(Transaction.type == type_)
        query = query.order_by(Transaction.date.desc(), Transaction.id.desc()).offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return query.all()
    except SQLAlchemyError:
        logger.exception("Error getting transactions for account %s", account_id)
        return []


def list_categories(db: Session, account_id: int, type_: Optional[str] = None):
    try:
        query = db.query(Category).filter(Category.account_id == account_id)
        if type_:
            query = query.filter(Category.type == type_)
        return query.order_by(Category.name).all()
    except SQLAlchemyError:
        logger.exception("Error getting categories for account %s", account_id)
        return []


def list_budget_items(db: Session, account_id: int, priority: Optional[str] = None):
    try:
        query = db.query(BudgetItem).filter(BudgetItem.account_id == account_id)
        if priority:
            query = query.filter(BudgetItem.priority == priority)
        return query.order_by(BudgetItem.created_at.desc(), BudgetItem.id.desc()).all()
    except SQLAlchemyError:
        logger.exception("Error getting budget items for account %s", account_id)
        return []
