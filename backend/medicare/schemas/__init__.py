#request and response schemas for each record type
from .patient import PatientCreate, PatientUpdate, PatientResponse, PatientListResponse
from .doctor import DoctorCreate, DoctorUpdate, DoctorResponse, DoctorListResponse
from .appointment import AppointmentCreate, AppointmentUpdate, AppointmentResponse, AppointmentListResponse
from .clinical_history import ClinicalHistoryCreate, ClinicalHistoryResponse, ClinicalHistoryListResponse
from .quick_consultation import (
    QuickConsultationCreate, QuickConsultationUpdate,
    QuickConsultationResponse, QuickConsultationListResponse,
)

#defines what gets exported when someone imports from this module
__all__ = [
    "PatientCreate", "PatientUpdate", "PatientResponse", "PatientListResponse",
    "DoctorCreate", "DoctorUpdate", "DoctorResponse", "DoctorListResponse",
    "AppointmentCreate", "AppointmentUpdate", "AppointmentResponse", "AppointmentListResponse",
    "ClinicalHistoryCreate", "ClinicalHistoryResponse", "ClinicalHistoryListResponse",
    "QuickConsultationCreate", "QuickConsultationUpdate",
    "QuickConsultationResponse", "QuickConsultationListResponse",
]
