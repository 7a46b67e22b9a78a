# -*- coding: utf-8 -*-
"""
Pydantic schemas for transaction categories.
"""
from typing import Literal, Optional

from pydantic import BaseModel, Field


class CategoryBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)
    type: Literal["income", "expense"]


class CategoryCreate(CategoryBase):
    # Picked from the palette when omitted
    color: Optional[str] = Field(None, pattern=r"^#[0-9A-Fa-f]{6}$")


class CategoryRead(CategoryBase):
    id: int
    color: str

    class Config:
        from_attributes = True
