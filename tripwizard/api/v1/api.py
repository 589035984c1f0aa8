from fastapi import APIRouter
from tripwizard.api.v1.endpoints import profiles, trips

api_router = APIRouter()
api_router.include_router(trips.router, prefix="/trips", tags=["Trips"])
api_router.include_router(profiles.router, prefix="/profiles", tags=["Profiles"])
