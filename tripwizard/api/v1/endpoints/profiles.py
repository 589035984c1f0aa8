from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends

from tripwizard.api.v1.errors import raise_for_result
from tripwizard.db.trip_store import TripStore, get_trip_store
from tripwizard.models.trip import ProfileTrips
from tripwizard.services import trip_queries

router = APIRouter()


@router.get("/{user_id}/trips", response_model=ProfileTrips)
async def profile_trips(
    user_id: str,
    today: Optional[date] = None,
    store: TripStore = Depends(get_trip_store),
):
    """
    A host's profile with their published trips split into upcoming and past.
    """
    result = await trip_queries.get_profile_trips(user_id, store, today=today)
    raise_for_result(result)
    return result.profile
