from plantcare.routers.species import router as species_router
from plantcare.routers.locations import router as locations_router
from plantcare.routers.plants import router as plants_router
from plantcare.routers.care_reminders import router as care_reminders_router
from plantcare.routers.care_logs import router as care_logs_router

__all__ = [
    "species_router", "locations_router", "plants_router",
    "care_reminders_router", "care_logs_router",
]
