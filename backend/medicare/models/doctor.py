#Define table columns and types.
from sqlalchemy import Column, Integer, String, DateTime
from ..database import Base
from .lifecycle import RecordLifecycle

class Doctor(RecordLifecycle, Base):
    __tablename__ = "doctors"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    email = Column(String, unique=True, nullable=False)
    specialty = Column(String, nullable=False, index=True)
    phone = Column(String, nullable=False)
    license_number = Column(String, unique=True, nullable=False)
    years_of_experience = Column(Integer)
    created_at = Column(DateTime, nullable=False)

    @property
    def display_name(self):
        return f"Dr. {self.first_name} {self.last_name}"

    def __repr__(self):
        return f"<Doctor {self.id}: {self.first_name} {self.last_name} ({self.specialty})>"
