from datetime import datetime
from typing import Optional


class RecordLifecycle:
    """Explicit creation step shared by every record type.

    ``create`` builds the record and runs ``on_create`` once, so the value it
    returns already carries ``created_at`` and any per-type defaults and can be
    handed straight to the session.
    """

    @classmethod
    def create(cls, now: Optional[datetime] = None, **fields):
        record = cls(**fields)
        record.on_create(now)
        return record

    def on_create(self, now: Optional[datetime] = None) -> datetime:
        """Fill ``created_at`` if unset and return the creation instant."""
        if self.created_at is None:
            self.created_at = now or datetime.now()
        return self.created_at
