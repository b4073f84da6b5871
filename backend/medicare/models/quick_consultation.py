#Define table columns and types.
from sqlalchemy import Column, Integer, String, Text, DateTime, Enum
#to define controlled value sets.
import enum
from ..database import Base
from .lifecycle import RecordLifecycle

class ConsultationStatus(enum.Enum):
    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"

class QuickConsultation(RecordLifecycle, Base):
    __tablename__ = "quick_consultations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    patient_id = Column(Integer, nullable=False)
    patient_name = Column(String, nullable=False)
    doctor_id = Column(Integer, nullable=False)
    doctor_name = Column(String, nullable=False)
    date = Column(DateTime, nullable=False)
    notes = Column(Text, nullable=False)
    status = Column(Enum(ConsultationStatus), nullable=False)
    created_at = Column(DateTime, nullable=False)

    def on_create(self, now=None):
        created = super().on_create(now)
        #same instant as created_at when the caller gave no date
        if self.date is None:
            self.date = created
        if self.status is None:
            self.status = ConsultationStatus.ACTIVE
        return created
