from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional, List
from datetime import datetime
from .common import require_text

class DoctorBase(BaseModel):
    first_name: str
    last_name: str
    email: EmailStr
    specialty: str
    phone: str
    license_number: str
    years_of_experience: Optional[int] = Field(default=None, ge=0)

class DoctorCreate(DoctorBase):
    @field_validator('first_name', 'last_name', 'specialty', 'phone', 'license_number')
    @classmethod
    def validate_required(cls, v):
        return require_text(v)

class DoctorUpdate(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[EmailStr] = None
    specialty: Optional[str] = None
    phone: Optional[str] = None
    license_number: Optional[str] = None
    years_of_experience: Optional[int] = Field(default=None, ge=0)

    @field_validator('first_name', 'last_name', 'specialty', 'phone', 'license_number')
    @classmethod
    def validate_required(cls, v):
        return require_text(v) if v is not None else None

class DoctorResponse(DoctorBase):
    id: int
    email: str
    created_at: datetime

    class Config:
        from_attributes = True

class DoctorListResponse(BaseModel):
    doctors: List[DoctorResponse]
    count: int
