from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional

from ..database import get_db
from ..models.appointment import Appointment, AppointmentStatus
from ..schemas.appointment import (
    AppointmentCreate, AppointmentUpdate, AppointmentResponse, AppointmentListResponse
)
from ..services.records import save_new, get_record, list_records, count_records, update_record, delete_record
from ..services.references import fill_reference_names

router = APIRouter(prefix="/api/appointments", tags=["appointments"])

#List appointments with optional filters
@router.get("", response_model=AppointmentListResponse)
async def get_appointments(
    patient_id: Optional[int] = None,
    doctor_id: Optional[int] = None,
    status: Optional[AppointmentStatus] = None,
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: Session = Depends(get_db)
):
    """Get appointments, filtered by patient, doctor or status."""
    appointments = list_records(
        db, Appointment, skip=skip, limit=limit,
        patient_id=patient_id, doctor_id=doctor_id, status=status
    )
    return AppointmentListResponse(
        appointments=[AppointmentResponse.model_validate(a) for a in appointments],
        count=count_records(
            db, Appointment, patient_id=patient_id, doctor_id=doctor_id, status=status
        )
    )

#Book an appointment
#status defaults to SCHEDULED when not given
@router.post("", response_model=AppointmentResponse, status_code=201)
async def create_appointment(
    appointment_data: AppointmentCreate,
    db: Session = Depends(get_db)
):
    """Create a new appointment."""
    data = fill_reference_names(db, appointment_data.model_dump())
    appointment = Appointment.create(**data)
    return save_new(db, appointment)

@router.get("/{appointment_id}", response_model=AppointmentResponse)
async def get_appointment(appointment_id: int, db: Session = Depends(get_db)):
    return get_record(db, Appointment, appointment_id)

#Update an appointment, including its status (e.g. SCHEDULED -> COMPLETED)
@router.put("/{appointment_id}", response_model=AppointmentResponse)
async def update_appointment(
    appointment_id: int,
    appointment_update: AppointmentUpdate,
    db: Session = Depends(get_db)
):
    appointment = get_record(db, Appointment, appointment_id)
    return update_record(db, appointment, appointment_update.model_dump(exclude_unset=True))

@router.delete("/{appointment_id}", response_model=AppointmentResponse)
async def delete_appointment(appointment_id: int, db: Session = Depends(get_db)):
    """Cancel-and-remove: deletes the appointment and returns it."""
    appointment = get_record(db, Appointment, appointment_id)
    deleted = AppointmentResponse.model_validate(appointment)
    delete_record(db, appointment)
    return deleted
