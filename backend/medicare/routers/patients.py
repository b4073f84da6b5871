from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.patient import Patient
from ..schemas.patient import PatientCreate, PatientUpdate, PatientResponse, PatientListResponse
from ..services.records import save_new, get_record, list_records, count_records, update_record, delete_record

router = APIRouter(prefix="/api/patients", tags=["patients"])

#List patients
@router.get("", response_model=PatientListResponse)
async def get_patients(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: Session = Depends(get_db)
):
    """Get all patients."""
    patients = list_records(db, Patient, skip=skip, limit=limit)
    return PatientListResponse(
        patients=[PatientResponse.model_validate(p) for p in patients],
        count=count_records(db, Patient)
    )

#Create a new patient
#duplicate email / medical_id is rejected by the database (409)
@router.post("", response_model=PatientResponse, status_code=status.HTTP_201_CREATED)
async def create_patient(
    patient_data: PatientCreate,
    db: Session = Depends(get_db)
):
    """Register a new patient."""
    patient = Patient.create(**patient_data.model_dump())
    return save_new(db, patient)

#Get patient details
@router.get("/{patient_id}", response_model=PatientResponse)
async def get_patient(patient_id: int, db: Session = Depends(get_db)):
    return get_record(db, Patient, patient_id)

#Update patient info
@router.put("/{patient_id}", response_model=PatientResponse)
async def update_patient(
    patient_id: int,
    patient_update: PatientUpdate,
    db: Session = Depends(get_db)
):
    """Update patient information."""
    patient = get_record(db, Patient, patient_id)
    return update_record(db, patient, patient_update.model_dump(exclude_unset=True))

#Delete a patient, returns the removed record
@router.delete("/{patient_id}", response_model=PatientResponse)
async def delete_patient(patient_id: int, db: Session = Depends(get_db)):
    patient = get_record(db, Patient, patient_id)
    deleted = PatientResponse.model_validate(patient)
    delete_record(db, patient)
    return deleted
