from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import Optional

from ..database import get_db
from ..models.doctor import Doctor
from ..schemas.doctor import DoctorCreate, DoctorUpdate, DoctorResponse, DoctorListResponse
from ..services.records import save_new, get_record, list_records, count_records, update_record, delete_record

router = APIRouter(prefix="/api/doctors", tags=["doctors"])


def _doctor_list(doctors, total=None) -> DoctorListResponse:
    #total is the unpaged count when the list is one page
    return DoctorListResponse(
        doctors=[DoctorResponse.model_validate(d) for d in doctors],
        count=len(doctors) if total is None else total
    )

@router.get("", response_model=DoctorListResponse)
async def get_doctors(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: Session = Depends(get_db)
):
    """Get all doctors."""
    return _doctor_list(
        list_records(db, Doctor, skip=skip, limit=limit), count_records(db, Doctor)
    )

#Search by specialty, case-insensitive substring match
#declared before /{doctor_id} so "specialty" is not read as an id
def _by_specialty(db: Session, specialty: Optional[str]) -> DoctorListResponse:
    query = db.query(Doctor)
    if specialty and specialty.strip():
        query = query.filter(Doctor.specialty.ilike(f"%{specialty.strip()}%"))
    return _doctor_list(query.order_by(Doctor.id).all())

@router.get("/specialty", response_model=DoctorListResponse)
async def get_doctors_by_specialty(
    specialty: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """Get doctors whose specialty contains the given text (all doctors when empty)."""
    return _by_specialty(db, specialty)

#same search with the specialty in the path, e.g. /api/doctors/specialty/cardiology
@router.get("/specialty/{specialty}", response_model=DoctorListResponse)
async def get_doctors_by_specialty_path(specialty: str, db: Session = Depends(get_db)):
    return _by_specialty(db, specialty)

#Register a doctor
#email and license_number must be unique
@router.post("", response_model=DoctorResponse, status_code=status.HTTP_201_CREATED)
async def create_doctor(doctor_data: DoctorCreate, db: Session = Depends(get_db)):
    doctor = Doctor.create(**doctor_data.model_dump())
    return save_new(db, doctor)

@router.get("/{doctor_id}", response_model=DoctorResponse)
async def get_doctor(doctor_id: int, db: Session = Depends(get_db)):
    return get_record(db, Doctor, doctor_id)

@router.put("/{doctor_id}", response_model=DoctorResponse)
async def update_doctor(
    doctor_id: int,
    doctor_update: DoctorUpdate,
    db: Session = Depends(get_db)
):
    """Update doctor information."""
    doctor = get_record(db, Doctor, doctor_id)
    return update_record(db, doctor, doctor_update.model_dump(exclude_unset=True))

@router.delete("/{doctor_id}", response_model=DoctorResponse)
async def delete_doctor(doctor_id: int, db: Session = Depends(get_db)):
    doctor = get_record(db, Doctor, doctor_id)
    deleted = DoctorResponse.model_validate(doctor)
    delete_record(db, doctor)
    return deleted
