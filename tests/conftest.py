import os

# Must be in place before the application modules read their settings
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "development"

from datetime import date
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

import main
from fintrack.database import Base, SessionLocal, engine
from fintrack.models import Account, Category, Transaction


@pytest.fixture
def db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def client(db):
    with TestClient(main.app) as test_client:
        yield test_client


@pytest.fixture
def make_client(db):
    """Extra clients with their own cookie jars (one per signed-in user)."""
    clients = []

    def factory():
        test_client = TestClient(main.app)
        clients.append(test_client)
        return test_client

    yield factory
    for test_client in clients:
        test_client.close()


@pytest.fixture
def account_factory(db):
    def factory(email="owner@example.com", full_name="Owner"):
        account = Account(email=email, full_name=full_name, hashed_password="not-a-real-hash")
        db.add(account)
        db.commit()
        db.refresh(account)
        return account
    return factory


@pytest.fixture
def ledger(db):
    """Helpers that write categories and transactions straight to the database."""
    def add_category(account, name, type_, color="#000000"):
        category = Category(account_id=account.id, name=name, type=type_, color=color)
        db.add(category)
        db.commit()
        db.refresh(category)
        return category

    def add_transaction(account, category, amount, on=None, description="entry"):
        transaction = Transaction(
            account_id=account.id,
            category_id=category.id,
            type=category.type,
            amount=amount,
            description=description,
            date=on or date.today(),
        )
        db.add(transaction)
        db.commit()
        return transaction

    return SimpleNamespace(category=add_category, transaction=add_transaction)
