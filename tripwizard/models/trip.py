from datetime import date, datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, model_validator


class CostCategory(str, Enum):
    ACCOMMODATION = "accommodation"
    TRANSPORTATION = "transportation"
    ACTIVITIES = "activities"


class TripStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


# --- Line items ---

class CostItem(BaseModel):
    # Unset until the item is stored in cost_items
    id: Optional[str] = None
    category: CostCategory
    name: str = ""
    amount: float = Field(ge=0, allow_inf_nan=False)


class TripStop(BaseModel):
    id: Optional[str] = None
    # 1-based position in the itinerary, assigned when the submission is assembled
    sequence_number: Optional[int] = Field(default=None, ge=1)
    location: str = ""
    nights: int = Field(default=0, ge=0)
    description: Optional[str] = None
    activities: Optional[str] = None


# --- Submission & persisted trip ---

class TripFields(BaseModel):
    """Scalar trip fields shared by the submission payload and the trips row."""

    trip_name: str
    departure_date: date
    categories: List[str] = []
    overview: str = ""
    about_you: str = ""
    accommodation_type: str = ""
    accommodation_details: str = ""
    inclusions: List[str] = []
    exclusions: List[str] = []
    special_features: List[str] = []
    min_trip_mates: int = Field(default=2, ge=1)
    max_trip_mates: int = Field(default=4, ge=1)
    currency: str = "EUR"
    buffer_percentage: float = Field(default=0, ge=0, allow_inf_nan=False)
    your_fee: float = Field(default=0, ge=0, allow_inf_nan=False)

    @model_validator(mode="after")
    def check_trip_mates(self):
        if self.max_trip_mates < self.min_trip_mates:
            raise ValueError("max_trip_mates must be greater than or equal to min_trip_mates")
        return self


class TripSubmission(TripFields):
    stops: List[TripStop] = []
    cost_items: List[CostItem] = []


class Trip(TripSubmission):
    id: str
    user_id: str
    total_cost: float
    status: TripStatus = TripStatus.PUBLISHED
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# --- Browsing & detail views ---

class HostProfile(BaseModel):
    id: str
    full_name: str = "Unknown Host"
    bio: Optional[str] = None
    avatar_url: Optional[str] = None


class TripDetail(BaseModel):
    trip: Trip
    host: Optional[HostProfile] = None
    total_nights: int
    category_totals: Dict[CostCategory, float]


class TripCard(BaseModel):
    trip: Trip
    host: HostProfile


class ProfileTrips(BaseModel):
    host: HostProfile
    upcoming: List[Trip] = []
    past: List[Trip] = []


class CostQuote(BaseModel):
    currency: str
    category_totals: Dict[CostCategory, float]
    subtotal: float
    buffer_amount: float
    your_fee: float
    total: float


class StatusUpdateRequest(BaseModel):
    status: TripStatus
