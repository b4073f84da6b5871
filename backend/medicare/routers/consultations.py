from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional

from ..database import get_db
from ..models.quick_consultation import QuickConsultation, ConsultationStatus
from ..schemas.quick_consultation import (
    QuickConsultationCreate, QuickConsultationUpdate,
    QuickConsultationResponse, QuickConsultationListResponse
)
from ..services.records import save_new, get_record, list_records, count_records, update_record, delete_record
from ..services.references import fill_reference_names

router = APIRouter(prefix="/api/consultations", tags=["quick consultations"])

@router.get("", response_model=QuickConsultationListResponse)
async def get_consultations(
    status: Optional[ConsultationStatus] = None,
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: Session = Depends(get_db)
):
    """Get quick consultations, optionally only ACTIVE or COMPLETED ones."""
    consultations = list_records(db, QuickConsultation, skip=skip, limit=limit, status=status)
    return QuickConsultationListResponse(
        consultations=[QuickConsultationResponse.model_validate(c) for c in consultations],
        count=count_records(db, QuickConsultation, status=status)
    )

#Open a quick consultation
#date and status default to now / ACTIVE
@router.post("", response_model=QuickConsultationResponse, status_code=201)
async def create_consultation(
    consultation_data: QuickConsultationCreate,
    db: Session = Depends(get_db)
):
    data = fill_reference_names(db, consultation_data.model_dump())
    consultation = QuickConsultation.create(**data)
    return save_new(db, consultation)

@router.get("/{consultation_id}", response_model=QuickConsultationResponse)
async def get_consultation(consultation_id: int, db: Session = Depends(get_db)):
    return get_record(db, QuickConsultation, consultation_id)

@router.put("/{consultation_id}", response_model=QuickConsultationResponse)
async def update_consultation(
    consultation_id: int,
    consultation_update: QuickConsultationUpdate,
    db: Session = Depends(get_db)
):
    """Update a consultation, e.g. mark it COMPLETED."""
    consultation = get_record(db, QuickConsultation, consultation_id)
    return update_record(db, consultation, consultation_update.model_dump(exclude_unset=True))

@router.delete("/{consultation_id}", response_model=QuickConsultationResponse)
async def delete_consultation(consultation_id: int, db: Session = Depends(get_db)):
    consultation = get_record(db, QuickConsultation, consultation_id)
    deleted = QuickConsultationResponse.model_validate(consultation)
    delete_record(db, consultation)
    return deleted
