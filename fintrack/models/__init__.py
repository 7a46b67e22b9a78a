from fintrack.models.account import Account
from fintrack.models.category import Category
from fintrack.models.transaction import Transaction
from fintrack.models.budget_item import BudgetItem

__all__ = ["Account", "Category", "Transaction", "BudgetItem"]
