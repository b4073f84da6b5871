#Error kinds raised by the storage boundary.
#Input errors (missing fields, wrong types) are rejected earlier by the pydantic schemas.


class MedicareError(Exception):
    """Base class for storage-level failures."""


class ConstraintViolation(MedicareError):
    """A write was rejected by the database (unique, not-null or other integrity rule)."""

    def __init__(self, table: str, message: str):
        self.table = table
        self.message = message
        super().__init__(f"Constraint violation on {table}: {message}")


class RecordNotFound(MedicareError):
    """No record of the given type has this id."""

    def __init__(self, model_name: str, record_id):
        self.model_name = model_name
        self.record_id = record_id
        super().__init__(f"{model_name} not found")
