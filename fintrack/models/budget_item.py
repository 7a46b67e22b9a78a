# -*- coding: utf-8 -*-
"""
SQLAlchemy model for a budget plan line item.
"""
from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import relationship

from fintrack.database import Base


class BudgetItem(Base):
    __tablename__ = "budget_items"

    id = Column(Integer, primary_key=True, index=True)
    account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    amount = Column(Float, nullable=False)
    priority = Column(String(20), nullable=False)  # 'most-crucial' or 'less-crucial'
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, server_default=func.now())

    account = relationship("Account", back_populates="budget_items")
