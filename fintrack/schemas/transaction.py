# -*- coding: utf-8 -*-
"""
Pydantic schemas for income/expense transactions.
"""
from datetime import date as date_type
from typing import Literal, Optional

from pydantic import BaseModel, Field

from fintrack.schemas.category import CategoryRead

TransactionType = Literal["income", "expense"]


class TransactionBase(BaseModel):
    type: TransactionType
    amount: float = Field(..., gt=0)
    description: str = Field(..., min_length=1, max_length=255)
    date: date_type
    time: Optional[str] = Field(None, pattern=r"^([01]\d|2[0-3]):[0-5]\d$")
    category_id: int


class TransactionCreate(TransactionBase):
    pass


class TransactionRead(TransactionBase):
    id: int
    category: Optional[CategoryRead] = None

    class Config:
        from_attributes = True
