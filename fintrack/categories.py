# -*- coding: utf-8 -*-
"""
Category palette and the starter set every new account receives.
"""
import random

from sqlalchemy.orm import Session

from fintrack.models.category import Category

PALETTE = [
    "#4CAF50", "#2196F3", "#9C27B0", "#FF9800", "#F44336",
    "#3F51B5", "#009688", "#FF5722", "#795548", "#E91E63",
    "#607D8B", "#673AB7", "#FFC107", "#00BCD4", "#8BC34A",
]

DEFAULT_CATEGORIES = [
    ("Salary", "income", "#4CAF50"),
    ("Freelance", "income", "#2196F3"),
    ("Investments", "income", "#9C27B0"),
    ("Other Income", "income", "#FF9800"),
    ("Food", "expense", "#F44336"),
    ("Transport", "expense", "#3F51B5"),
    ("Housing", "expense", "#009688"),
    ("Entertainment", "expense", "#FF5722"),
    ("Utilities", "expense", "#795548"),
    ("Shopping", "expense", "#E91E63"),
    ("Other Expense", "expense", "#607D8B"),
]


def random_color():
    return random.choice(PALETTE)


def seed_default_categories(db: Session, account_id: int) -> int:
    """Create the starter categories unless the account already has some. Returns how many were added."""
    if db.query(Category).filter(Category.account_id == account_id).first():
        return 0
    for name, type_, color in DEFAULT_CATEGORIES:
        db.add(Category(account_id=account_id, name=name, type=type_, color=color))
    db.commit()
    return len(DEFAULT_CATEGORIES)
