# -*- coding: utf-8 -*-
"""
SQLAlchemy model for the Category entity.
"""
from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from fintrack.database import Base


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False, index=True)
    # Not unique: (account, type, name) uniqueness is left to the UI
    name = Column(String(50), nullable=False)
    type = Column(String(20), nullable=False)  # 'income' or 'expense'
    color = Column(String(20), nullable=False)

    account = relationship("Account", back_populates="categories")
    transactions = relationship("Transaction", back_populates="category", cascade="all, delete-orphan")
