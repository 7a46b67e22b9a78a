# -*- coding: utf-8 -*-
"""
SQLAlchemy model for the Account entity.
"""
from sqlalchemy import Column, DateTime, Integer, String, func
from sqlalchemy.orm import relationship

from fintrack.database import Base


class Account(Base):
    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    full_name = Column(String(150), nullable=False)
    # Salted bcrypt hash only; never serialized
    hashed_password = Column(String(255), nullable=False)
    avatar = Column(String(500), nullable=True)
    created_at = Column(DateTime, server_default=func.now())

    categories = relationship("Category", back_populates="account", cascade="all, delete-orphan")
    transactions = relationship("Transaction", back_populates="account", cascade="all, delete-orphan")
    budget_items = relationship("BudgetItem", back_populates="account", cascade="all, delete-orphan")
