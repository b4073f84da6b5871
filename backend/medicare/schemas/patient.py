from pydantic import BaseModel, EmailStr, field_validator
from typing import Optional, List
from datetime import datetime
from .common import require_text, optional_text

#shared patient data
class PatientBase(BaseModel):
    first_name: str
    last_name: str
    email: EmailStr
    phone: str
    date_of_birth: Optional[str] = None
    gender: Optional[str] = None
    address: Optional[str] = None
    medical_id: Optional[str] = None

#patient creation contract
class PatientCreate(PatientBase):
    @field_validator('first_name', 'last_name', 'phone')
    @classmethod
    def validate_required(cls, v):
        return require_text(v)

    @field_validator('date_of_birth', 'gender', 'address', 'medical_id')
    @classmethod
    def validate_optional(cls, v):
        return optional_text(v)

#safe partial updates, id and created_at are never accepted
class PatientUpdate(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    date_of_birth: Optional[str] = None
    gender: Optional[str] = None
    address: Optional[str] = None
    medical_id: Optional[str] = None

    @field_validator('first_name', 'last_name', 'phone')
    @classmethod
    def validate_required(cls, v):
        return require_text(v) if v is not None else None

    #blank clears the field, so cleared medical_ids never collide
    @field_validator('date_of_birth', 'gender', 'address', 'medical_id')
    @classmethod
    def validate_optional(cls, v):
        return optional_text(v)

#standard API output
class PatientResponse(PatientBase):
    #these Come from the database
    id: int
    email: str
    created_at: datetime

    class Config:
        from_attributes = True

class PatientListResponse(BaseModel):
    patients: List[PatientResponse]
    count: int
