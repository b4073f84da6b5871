from pydantic import BaseModel, field_validator
from typing import Optional, List
from datetime import datetime
from ..models.appointment import AppointmentStatus
from .common import require_text, optional_text, status_name, naive_local

#appointment creation contract
#names may be left out, they are then looked up from the patient and doctor records
class AppointmentCreate(BaseModel):
    patient_id: int
    doctor_id: int
    patient_name: Optional[str] = None
    doctor_name: Optional[str] = None
    date_time: datetime
    reason: str
    status: Optional[AppointmentStatus] = None
    notes: Optional[str] = None

    @field_validator('reason')
    @classmethod
    def validate_reason(cls, v):
        return require_text(v)

    @field_validator('patient_name', 'doctor_name', 'notes')
    @classmethod
    def validate_optional(cls, v):
        return optional_text(v)

    @field_validator('status', mode='before')
    @classmethod
    def normalize_status(cls, v):
        return status_name(v)

    @field_validator('date_time')
    @classmethod
    def validate_date_time(cls, v):
        return naive_local(v)

#status changes are stored as given, there is no transition check
class AppointmentUpdate(BaseModel):
    patient_id: Optional[int] = None
    doctor_id: Optional[int] = None
    patient_name: Optional[str] = None
    doctor_name: Optional[str] = None
    date_time: Optional[datetime] = None
    reason: Optional[str] = None
    status: Optional[AppointmentStatus] = None
    notes: Optional[str] = None

    @field_validator('patient_name', 'doctor_name', 'reason')
    @classmethod
    def validate_required(cls, v):
        return require_text(v) if v is not None else None

    @field_validator('notes')
    @classmethod
    def validate_optional(cls, v):
        return optional_text(v)

    @field_validator('status', mode='before')
    @classmethod
    def normalize_status(cls, v):
        return status_name(v)

    @field_validator('date_time')
    @classmethod
    def validate_date_time(cls, v):
        return naive_local(v)

class AppointmentResponse(BaseModel):
    id: int
    patient_id: int
    doctor_id: int
    patient_name: str
    doctor_name: str
    date_time: datetime
    reason: str
    status: AppointmentStatus
    notes: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True

class AppointmentListResponse(BaseModel):
    appointments: List[AppointmentResponse]
    count: int
