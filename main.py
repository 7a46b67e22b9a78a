# -*- coding: utf-8 -*-
"""
Main FastAPI application for the personal finance tracker.
"""

import logging
import os

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fintrack.auth import require_secret_key
from fintrack.config import settings
from fintrack.database import Base, engine
from fintrack.errors import FinanceTrackerError
from fintrack.guard import RouteGuardMiddleware
from fintrack import models  # noqa: F401  (registers the tables on Base)
from fintrack.routes import (auth_fastapi, budget_fastapi, categories_fastapi, pages_fastapi,
                             reports_fastapi, transactions_fastapi, users_fastapi)

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# No signing secret, no sessions: refuse to start
require_secret_key()

Base.metadata.create_all(bind=engine)

docs_url = "/docs" if not settings.is_production else None
redoc_url = "/redoc" if not settings.is_production else None

app = FastAPI(
    title="Personal Finance Tracker",
    description="Income, expenses, budget planning and reports",
    version="1.0.0",
    docs_url=docs_url,
    redoc_url=redoc_url,
    openapi_url="/openapi.json" if not settings.is_production else None
)

frontend_url = os.getenv("FRONTEND_URL", "http://localhost:3000")

origins = [
    frontend_url,
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

app.add_middleware(RouteGuardMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(FinanceTrackerError)
async def finance_tracker_error_handler(request: Request, exc: FinanceTrackerError):
    return JSONResponse(status_code=exc.status_code, content={"data": None, "error": exc.message})


# Routers
app.include_router(auth_fastapi.router)
app.include_router(users_fastapi.router)
app.include_router(categories_fastapi.router, prefix="/api/categories")
app.include_router(transactions_fastapi.router, prefix="/api/transactions")
app.include_router(budget_fastapi.router, prefix="/api/budget-items")
app.include_router(reports_fastapi.router, prefix="/api/reports")
app.include_router(pages_fastapi.router)

logger.info("Finance tracker started (environment=%s)", settings.ENVIRONMENT)
