"""Medicare clinic records: SQLAlchemy record types and the FastAPI service around them."""

__version__ = "1.0.0"
