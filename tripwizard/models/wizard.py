from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field

from tripwizard.core.config import settings

# One model per wizard page. The client keeps a WizardState and sends the
# whole thing on submit, so no step state lives on the server.


class BasicsStep(BaseModel):
    departure_date: Optional[date] = None
    categories: List[str] = []


class DetailsStep(BaseModel):
    trip_name: Optional[str] = None
    overview: Optional[str] = None
    about_you: Optional[str] = None
    accommodation_type: Optional[str] = None
    accommodation_details: Optional[str] = None
    inclusions: Optional[List[str]] = None
    exclusions: Optional[List[str]] = None
    special_features: Optional[List[str]] = None


class WizardStop(BaseModel):
    # Client-side row key only, never persisted
    id: Optional[str] = None
    location: str = ""
    nights: int = Field(default=0, ge=0)
    description: Optional[str] = None
    activities: Optional[str] = None


class ItineraryStep(BaseModel):
    stops: List[WizardStop] = []


class WizardCostItem(BaseModel):
    id: Optional[str] = None
    name: str = ""
    amount: float = Field(ge=0, allow_inf_nan=False)


class CostStep(BaseModel):
    min_trip_mates: int = Field(default=settings.DEFAULT_MIN_TRIP_MATES, ge=1)
    max_trip_mates: int = Field(default=settings.DEFAULT_MAX_TRIP_MATES, ge=1)
    currency: str = settings.DEFAULT_CURRENCY
    buffer: float = Field(default=0, ge=0, allow_inf_nan=False)
    your_fee: float = Field(default=0, ge=0, allow_inf_nan=False)
    accommodation: List[WizardCostItem] = []
    transportation: List[WizardCostItem] = []
    activities: List[WizardCostItem] = []


class WizardState(BaseModel):
    basics: BasicsStep = Field(default_factory=BasicsStep)
    details: DetailsStep = Field(default_factory=DetailsStep)
    itinerary: ItineraryStep = Field(default_factory=ItineraryStep)
    cost: CostStep = Field(default_factory=CostStep)


# Choices offered by the basics and details pages
TRIP_CATEGORIES = [
    {"id": "food", "name": "Food"},
    {"id": "wellness", "name": "Wellness"},
    {"id": "beach", "name": "Beach"},
    {"id": "culture", "name": "Culture"},
    {"id": "party", "name": "Party"},
    {"id": "sport", "name": "Sport"},
    {"id": "nature", "name": "Nature"},
    {"id": "city", "name": "City"},
    {"id": "backpacking", "name": "Backpacking"},
    {"id": "female-only", "name": "Female Only"},
]

ACCOMMODATION_TYPES = ["Hotel", "Hostel", "Apartments", "Bed & Breakfast", "Camping", "Other"]
