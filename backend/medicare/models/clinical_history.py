#Define table columns and types.
from sqlalchemy import Column, Integer, String, Text, DateTime
from ..database import Base
from .lifecycle import RecordLifecycle

class ClinicalHistory(RecordLifecycle, Base):
    __tablename__ = "clinical_history"

    id = Column(Integer, primary_key=True, autoincrement=True)
    patient_id = Column(Integer, nullable=False)
    patient_name = Column(String, nullable=False)
    #date of the visit, defaults to the creation instant
    date = Column(DateTime, nullable=False)
    diagnosis = Column(String, nullable=False)
    treatment = Column(Text, nullable=False)
    notes = Column(Text, nullable=False)
    doctor_name = Column(String, nullable=False)
    created_at = Column(DateTime, nullable=False)

    def on_create(self, now=None):
        created = super().on_create(now)
        if self.date is None:
            self.date = created
        return created
