from typing import List, Optional

from pydantic import BaseModel

from tripwizard.core.errors import ErrorCode
from tripwizard.models.trip import ProfileTrips, Trip, TripCard, TripDetail

# Service calls never raise; they hand back one of these with either a value
# or an error description.


class ServiceResult(BaseModel):
    error: Optional[str] = None
    error_code: Optional[ErrorCode] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def not_found(self) -> bool:
        return self.error_code in (ErrorCode.TRIP_NOT_FOUND, ErrorCode.PROFILE_NOT_FOUND)


class SubmissionResult(ServiceResult):
    trip: Optional[Trip] = None
    # Child-record failures that did not fail the submission
    warnings: List[str] = []


class TripResult(ServiceResult):
    trip: Optional[Trip] = None


class TripListResult(ServiceResult):
    trips: List[Trip] = []


class TripDetailResult(ServiceResult):
    detail: Optional[TripDetail] = None


class TripCardListResult(ServiceResult):
    cards: List[TripCard] = []


class ProfileTripsResult(ServiceResult):
    profile: Optional[ProfileTrips] = None


class StatusUpdateResult(ServiceResult):
    success: bool = False
