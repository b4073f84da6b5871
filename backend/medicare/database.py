#Creates a connection engine to your database.
from sqlalchemy import create_engine
#Base class for SQLAlchemy ORM models.
from sqlalchemy.orm import declarative_base
#Factory for creating database sessions.
from sqlalchemy.orm import sessionmaker
#Configuration object containing the database URL
from .config import settings


def build_engine(database_url: str, echo: bool = False, **kwargs):
    """Create an engine, allowing SQLite connections to be shared across threads."""
    if database_url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    return create_engine(database_url, echo=echo, **kwargs)


# Create SQLAlchemy engine
engine = build_engine(settings.database_url, echo=settings.sql_echo)

# Create SessionLocal class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create Base class
Base = declarative_base()


def init_db(bind=None):
    """Create all record tables on the given engine (the configured one by default)."""
    # registers the record tables on Base.metadata
    from . import models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


# Dependency to get DB session
def get_db():
    #Creates a new database session.
    db = SessionLocal()
    try:
        #Makes it available to route functions.
        yield db
    finally:
        db.close() #Ensures the session is closed properly


        #This module provides the SQLAlchemy setup with a central engine, session factory, and declarative base. get_db gives each request its own session and always closes it.
