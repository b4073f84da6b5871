from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.clinical_history import ClinicalHistory
from ..schemas.clinical_history import (
    ClinicalHistoryCreate, ClinicalHistoryResponse, ClinicalHistoryListResponse
)
from ..services.records import save_new, get_record, list_records, count_records
from ..services.references import fill_reference_names

router = APIRouter(prefix="/api/history", tags=["clinical history"])


def _history_list(entries, total=None) -> ClinicalHistoryListResponse:
    return ClinicalHistoryListResponse(
        history=[ClinicalHistoryResponse.model_validate(h) for h in entries],
        count=len(entries) if total is None else total
    )

@router.get("", response_model=ClinicalHistoryListResponse)
async def get_history(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: Session = Depends(get_db)
):
    """Get all clinical history entries."""
    return _history_list(
        list_records(db, ClinicalHistory, skip=skip, limit=limit),
        count_records(db, ClinicalHistory)
    )

#All entries of one patient, most recent visit first
@router.get("/patient/{patient_id}", response_model=ClinicalHistoryListResponse)
async def get_patient_history(patient_id: int, db: Session = Depends(get_db)):
    entries = db.query(ClinicalHistory).filter(
        ClinicalHistory.patient_id == patient_id
    ).order_by(ClinicalHistory.date.desc(), ClinicalHistory.id.desc()).all()
    return _history_list(entries)

#Add an entry to a patient's history
#date defaults to the moment the entry is created
@router.post("", response_model=ClinicalHistoryResponse, status_code=status.HTTP_201_CREATED)
async def add_to_history(
    entry_data: ClinicalHistoryCreate,
    db: Session = Depends(get_db)
):
    data = fill_reference_names(db, entry_data.model_dump())
    #doctor_id only serves the name lookup, history rows keep the name
    data.pop("doctor_id", None)
    entry = ClinicalHistory.create(**data)
    return save_new(db, entry)

@router.get("/{entry_id}", response_model=ClinicalHistoryResponse)
async def get_history_entry(entry_id: int, db: Session = Depends(get_db)):
    return get_record(db, ClinicalHistory, entry_id)
