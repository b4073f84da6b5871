#Define table columns and types.
from sqlalchemy import Column, Integer, String, DateTime
from ..database import Base
from .lifecycle import RecordLifecycle

class Patient(RecordLifecycle, Base):
    __tablename__ = "patients"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    email = Column(String, unique=True, nullable=False)
    phone = Column(String, nullable=False)
    #kept as free text, e.g. "1985-03-15"
    date_of_birth = Column(String)
    gender = Column(String)
    address = Column(String)
    #Hospital medical record number, optional but unique when present
    medical_id = Column(String, unique=True)
    created_at = Column(DateTime, nullable=False)

    @property
    def display_name(self):
        return f"{self.first_name} {self.last_name}"

    def __repr__(self):
        return f"<Patient {self.id}: {self.first_name} {self.last_name}>"
