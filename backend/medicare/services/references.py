#Fills the denormalised patient/doctor names kept beside the reference ids.
#Supplied names are stored as given; only missing ones are looked up.
from typing import Any, Dict

from sqlalchemy.orm import Session

from ..models import Doctor, Patient
from .records import get_record


def fill_reference_names(db: Session, data: Dict[str, Any]) -> Dict[str, Any]:
    """Return ``data`` with ``patient_name``/``doctor_name`` resolved where missing.

    Raises RecordNotFound when a name is missing and the referenced record
    does not exist either.
    """
    data = dict(data)
    if not data.get("patient_name") and data.get("patient_id") is not None:
        data["patient_name"] = get_record(db, Patient, data["patient_id"]).display_name
    if not data.get("doctor_name") and data.get("doctor_id") is not None:
        data["doctor_name"] = get_record(db, Doctor, data["doctor_id"]).display_name
    return data
