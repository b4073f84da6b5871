from pydantic import BaseModel, field_validator
from typing import Optional, List
from datetime import datetime
from ..models.quick_consultation import ConsultationStatus
from .common import require_text, optional_text, status_name, naive_local

class QuickConsultationCreate(BaseModel):
    patient_id: int
    doctor_id: int
    patient_name: Optional[str] = None
    doctor_name: Optional[str] = None
    date: Optional[datetime] = None
    notes: str
    status: Optional[ConsultationStatus] = None

    @field_validator('notes')
    @classmethod
    def validate_notes(cls, v):
        return require_text(v)

    @field_validator('patient_name', 'doctor_name')
    @classmethod
    def validate_optional(cls, v):
        return optional_text(v)

    @field_validator('status', mode='before')
    @classmethod
    def normalize_status(cls, v):
        return status_name(v)

    @field_validator('date')
    @classmethod
    def validate_date(cls, v):
        return naive_local(v)

class QuickConsultationUpdate(BaseModel):
    patient_id: Optional[int] = None
    doctor_id: Optional[int] = None
    patient_name: Optional[str] = None
    doctor_name: Optional[str] = None
    date: Optional[datetime] = None
    notes: Optional[str] = None
    status: Optional[ConsultationStatus] = None

    @field_validator('patient_name', 'doctor_name', 'notes')
    @classmethod
    def validate_required(cls, v):
        return require_text(v) if v is not None else None

    @field_validator('status', mode='before')
    @classmethod
    def normalize_status(cls, v):
        return status_name(v)

    @field_validator('date')
    @classmethod
    def validate_date(cls, v):
        return naive_local(v)

class QuickConsultationResponse(BaseModel):
    id: int
    patient_id: int
    patient_name: str
    doctor_id: int
    doctor_name: str
    date: datetime
    notes: str
    status: ConsultationStatus
    created_at: datetime

    class Config:
        from_attributes = True

class QuickConsultationListResponse(BaseModel):
    consultations: List[QuickConsultationResponse]
    count: int
