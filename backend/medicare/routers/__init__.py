#router package initializer
#Each imported router is renamed
from .patients import router as patients_router
from .doctors import router as doctors_router
from .appointments import router as appointments_router
from .history import router as history_router
from .consultations import router as consultations_router

#defines what is publicly exposed when someone imports this package
__all__ = [
    "patients_router", "doctors_router", "appointments_router",
    "history_router", "consultations_router",
]
