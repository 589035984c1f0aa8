from typing import Dict, List

from pydantic import BaseModel

from tripwizard.models.trip import Trip

# --- Request / response bodies that only exist at the HTTP boundary ---


class TripCreatedResponse(BaseModel):
    trip: Trip
    # Itinerary stops or cost items that could not be saved
    warnings: List[str] = []


class TripOptionsResponse(BaseModel):
    categories: List[Dict[str, str]]
    accommodation_types: List[str]
    default_currency: str

