from pydantic import BaseModel, field_validator, model_validator
from typing import Optional, List
from datetime import datetime
from .common import require_text, optional_text, naive_local

#history entry input, date defaults to the creation instant
class ClinicalHistoryCreate(BaseModel):
    patient_id: int
    patient_name: Optional[str] = None
    doctor_id: Optional[int] = None
    doctor_name: Optional[str] = None
    date: Optional[datetime] = None
    diagnosis: str
    treatment: str
    notes: str

    @field_validator('diagnosis', 'treatment', 'notes')
    @classmethod
    def validate_required(cls, v):
        return require_text(v)

    @field_validator('patient_name', 'doctor_name')
    @classmethod
    def validate_optional(cls, v):
        return optional_text(v)

    @field_validator('date')
    @classmethod
    def validate_date(cls, v):
        return naive_local(v)

    @model_validator(mode='after')
    def check_doctor(self):
        #the doctor is named directly or looked up by id
        if not self.doctor_name and self.doctor_id is None:
            raise ValueError("doctor_name or doctor_id is required")
        return self

class ClinicalHistoryResponse(BaseModel):
    id: int
    patient_id: int
    patient_name: str
    date: datetime
    diagnosis: str
    treatment: str
    notes: str
    doctor_name: str
    created_at: datetime

    class Config:
        from_attributes = True

class ClinicalHistoryListResponse(BaseModel):
    history: List[ClinicalHistoryResponse]
    count: int
