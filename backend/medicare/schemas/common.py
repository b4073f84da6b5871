#Shared field validators for the request schemas.
from datetime import datetime
from typing import Optional


def require_text(v: str) -> str:
    #Required text fields must carry something besides whitespace
    v = v.strip()
    if not v:
        raise ValueError("must not be blank")
    return v


def optional_text(v: Optional[str]) -> Optional[str]:
    if v is None:
        return None
    v = v.strip()
    return v or None


def status_name(v):
    #accepts "scheduled" as well as "SCHEDULED"
    if isinstance(v, str):
        return v.strip().upper()
    return v


def naive_local(v: Optional[datetime]) -> Optional[datetime]:
    #Columns hold naive local wall-clock time; aware input is converted, not truncated
    if v is not None and v.tzinfo is not None:
        return v.astimezone().replace(tzinfo=None)
    return v
