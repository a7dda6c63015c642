"""
FastAPI application entry point for the EMR Service API.

This module configures and creates the FastAPI application with:
- Structured JSON Logging with request id propagation
- Dependency Injection: Services and repositories injected via Depends()
- Exception Handling: The domain error taxonomy mapped to JSON responses
- Lifespan Management: Database opened on startup, closed on shutdown

Architecture Overview:
    ┌─────────────────────────────────────────────────────────────┐
    │                     FastAPI Application                     │
    ├─────────────────────────────────────────────────────────────┤
    │  Routers (api/routers/)                                     │
    │    ├── health.py           - /health, /ready                │
    │    ├── patients.py         - Patient CRUD                   │
    │    ├── doctors.py          - Doctor CRUD                    │
    │    ├── procedures.py       - Procedure CRUD                 │
    │    └── patient_history.py  - Patient history CRUD           │
    ├─────────────────────────────────────────────────────────────┤
    │  Services (services/)          ← Injected via Depends()     │
    │    validation, reference checks, error translation          │
    ├─────────────────────────────────────────────────────────────┤
    │  Repositories (repositories/)  ← Injected into Services     │
    │    one CrudRepository subclass per table                    │
    ├─────────────────────────────────────────────────────────────┤
    │  Database (one SQLite connection) ← Injected into Repos     │
    └─────────────────────────────────────────────────────────────┘

Requests are served one at a time on the event loop; the shared connection is
never used by two requests at once.
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
import uvicorn

from core.config import API_HOST, API_PORT, API_RELOAD
from core.dependencies import get_database, reset_database
from core.exceptions import setup_exception_handlers
from core.logging_config import setup_logging
from core.middleware import LoggingMiddleware
from api.routers import (
    doctors_router,
    health_router,
    patient_history_router,
    patients_router,
    procedures_router,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup:
        - Configures structured JSON logging
        - Opens the database (creating the schema if needed)

    Shutdown:
        - Closes the database connection
    """
    setup_logging(level="INFO", json_format=True)

    logger = logging.getLogger(__name__)
    logger.info("Starting EMR Service API...")

    db = get_database()
    logger.info("Database ready", extra={"db_path": db.db_path})

    yield

    logger.info("EMR Service API shutting down...")
    reset_database()


app = FastAPI(
    title="EMR Service API",
    description="Patients, doctors, procedures and patient history for a small clinical practice.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

setup_exception_handlers(app)

app.add_middleware(LoggingMiddleware)

app.include_router(health_router)
app.include_router(patients_router)
app.include_router(doctors_router)
app.include_router(procedures_router)
app.include_router(patient_history_router)


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=API_HOST,
        port=API_PORT,
        reload=API_RELOAD
    )
