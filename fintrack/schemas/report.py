# -*- coding: utf-8 -*-
"""
Pydantic schemas for aggregated report data.
"""
from typing import List

from pydantic import BaseModel


class CategoryTotal(BaseModel):
    name: str
    value: float
    color: str


class MonthTotal(BaseModel):
    name: str  # e.g. "Mar 2026"
    amount: float


class Totals(BaseModel):
    income: float
    expense: float
    balance: float


class MonthlyComparison(BaseModel):
    income: List[MonthTotal]
    expense: List[MonthTotal]
