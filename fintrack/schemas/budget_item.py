# -*- coding: utf-8 -*-
"""
Pydantic schemas for budget plan items.
"""
from typing import Literal, Optional

from pydantic import BaseModel, Field

BudgetPriority = Literal["most-crucial", "less-crucial"]


class BudgetItemBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    amount: float = Field(..., gt=0)
    priority: BudgetPriority
    notes: Optional[str] = None


class BudgetItemCreate(BudgetItemBase):
    pass


class BudgetItemUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    amount: Optional[float] = Field(None, gt=0)
    priority: Optional[BudgetPriority] = None
    notes: Optional[str] = None


class BudgetItemRead(BudgetItemBase):
    id: int

    class Config:
        from_attributes = True


class BudgetTotals(BaseModel):
    total: float
    most_crucial: float
    less_crucial: float
