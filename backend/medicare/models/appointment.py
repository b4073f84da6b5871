#Define table columns and types.
from sqlalchemy import Column, Integer, String, Text, DateTime, Enum
#to define controlled value sets.
import enum
from ..database import Base
from .lifecycle import RecordLifecycle

#Stored by name, so the value matches the name
class AppointmentStatus(enum.Enum):
    SCHEDULED = "SCHEDULED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"

class Appointment(RecordLifecycle, Base):
    __tablename__ = "appointments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    #patient and doctor are referenced by id only, names are kept alongside
    patient_id = Column(Integer, nullable=False)
    doctor_id = Column(Integer, nullable=False)
    patient_name = Column(String, nullable=False)
    doctor_name = Column(String, nullable=False)
    date_time = Column(DateTime, nullable=False)
    reason = Column(String, nullable=False)
    status = Column(Enum(AppointmentStatus), nullable=False)
    notes = Column(Text)
    created_at = Column(DateTime, nullable=False)

    def on_create(self, now=None):
        created = super().on_create(now)
        if self.status is None:
            self.status = AppointmentStatus.SCHEDULED
        return created

    def __repr__(self):
        return f"<Appointment {self.id}: patient={self.patient_id} doctor={self.doctor_id} {self.status}>"
