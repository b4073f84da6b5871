import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
#Handles Cross-Origin Resource Sharing
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import settings
from .logging_setup import configure_logging
#SQLAlchemy engine and table creation
from .database import init_db
from .exceptions import ConstraintViolation, RecordNotFound
from .middleware.request_logging import RequestLoggingMiddleware
#Routers - one per record type
from .routers import (
    patients_router, doctors_router, appointments_router,
    history_router, consultations_router,
)

configure_logging(settings)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create missing tables on startup."""
    init_db()
    logger.info("%s started (database: %s)", settings.app_name, settings.database_url.split("://")[0])
    yield
    logger.info("%s shutting down", settings.app_name)


# Initialize FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Clinic records: patients, doctors, appointments, clinical history and quick consultations",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS(Cross-Origin Resource Sharing)
#allows the frontend to access this API
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)


#Errors raised by the storage boundary
@app.exception_handler(RecordNotFound)
async def record_not_found_handler(request: Request, exc: RecordNotFound):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(ConstraintViolation)
async def constraint_violation_handler(request: Request, exc: ConstraintViolation):
    return JSONResponse(
        status_code=409,
        content={"detail": "Constraint violation", "table": exc.table, "error": exc.message},
    )


# Include routers
app.include_router(patients_router)
app.include_router(doctors_router)
app.include_router(appointments_router)
app.include_router(history_router)
app.include_router(consultations_router)


@app.get("/api/ping")
async def ping():
    return {"message": settings.ping_message}

@app.get("/health")
async def health_check():
    return {"status": "healthy"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
