# File: tripwizard/api/v1/endpoints/trips.py

from typing import List

from fastapi import APIRouter, Depends, status

from tripwizard.api.v1.errors import http_error, raise_for_result
from tripwizard.auth.clerk_auth import get_current_user_id
from tripwizard.core.config import settings
from tripwizard.core.errors import ErrorCode, ValidationError
from tripwizard.db.trip_store import TripStore, get_trip_store
from tripwizard.models.schemas import TripCreatedResponse, TripOptionsResponse
from tripwizard.models.trip import CostQuote, StatusUpdateRequest, Trip, TripCard, TripDetail
from tripwizard.models.wizard import ACCOMMODATION_TYPES, TRIP_CATEGORIES, CostStep, WizardState
from tripwizard.services import trip_builder, trip_queries, trip_service

router = APIRouter()


@router.get("/options", response_model=TripOptionsResponse)
def trip_options():
    """
    Choices offered by the wizard's basics and details pages.
    """
    return TripOptionsResponse(
        categories=TRIP_CATEGORIES,
        accommodation_types=ACCOMMODATION_TYPES,
        default_currency=settings.DEFAULT_CURRENCY,
    )


@router.post("/quote", response_model=CostQuote)
def quote_cost(cost: CostStep):
    """
    Price breakdown for the cost page, recomputed on every edit.
    """
    return trip_builder.quote(cost)


@router.post("", response_model=TripCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_trip(
    state: WizardState,
    user_id: str = Depends(get_current_user_id),
    store: TripStore = Depends(get_trip_store),
):
    """
    Publishes a trip from the complete wizard state.
    """
    try:
        submission = trip_builder.assemble_submission(state)
    except ValidationError as e:
        raise http_error(e.code)

    result = await trip_service.create_trip(submission, user_id, store)
    raise_for_result(result)
    return TripCreatedResponse(trip=result.trip, warnings=result.warnings)


@router.get("", response_model=List[TripCard])
async def browse_trips(store: TripStore = Depends(get_trip_store)):
    result = await trip_queries.list_published_with_hosts(store)
    raise_for_result(result)
    return result.cards


@router.get("/mine", response_model=List[Trip])
async def my_trips(
    user_id: str = Depends(get_current_user_id),
    store: TripStore = Depends(get_trip_store),
):
    result = await trip_queries.get_user_trips(user_id, store)
    raise_for_result(result)
    return result.trips


@router.get("/{trip_id}", response_model=TripDetail)
async def trip_detail(trip_id: str, store: TripStore = Depends(get_trip_store)):
    result = await trip_queries.get_trip_detail(trip_id, store)
    raise_for_result(result)
    return result.detail


@router.patch("/{trip_id}/status", status_code=status.HTTP_204_NO_CONTENT)
async def change_status(
    trip_id: str,
    request: StatusUpdateRequest,
    user_id: str = Depends(get_current_user_id),
    store: TripStore = Depends(get_trip_store),
):
    """
    Sets a trip's status. Only the trip's host may do this.
    """
    current = await trip_queries.get_trip(trip_id, store)
    raise_for_result(current)
    if current.trip.user_id != user_id:
        raise http_error(ErrorCode.FORBIDDEN)

    result = await trip_queries.update_status(trip_id, request.status, store)
    raise_for_result(result)
