#used to control how models are exposed when the package is imported.
from .appointment import Appointment, AppointmentStatus
from .clinical_history import ClinicalHistory
from .doctor import Doctor
from .patient import Patient
from .quick_consultation import QuickConsultation, ConsultationStatus

RECORD_MODELS = (Appointment, ClinicalHistory, Doctor, Patient, QuickConsultation)

#all public models
__all__ = [
    "Appointment", "AppointmentStatus", "ClinicalHistory", "Doctor",
    "Patient", "QuickConsultation", "ConsultationStatus", "RECORD_MODELS",
]


#collects all record classes into a single public interface; importing this package registers every table on Base.metadata.
