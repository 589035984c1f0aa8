# File: tripwizard/services/trip_queries.py

import logging
from datetime import date
from typing import List, Optional

from tripwizard.core.errors import BackendError, ErrorCode, TripWizardError, USER_MESSAGES
from tripwizard.db import rows
from tripwizard.db.trip_store import COST_ITEMS_TABLE, PROFILES_TABLE, TRIP_STOPS_TABLE, TRIPS_TABLE, TripStore
from tripwizard.logic.costs import category_totals
from tripwizard.models.results import (
    ProfileTripsResult,
    StatusUpdateResult,
    TripCardListResult,
    TripDetailResult,
    TripListResult,
    TripResult,
)
from tripwizard.models.trip import (
    CostItem,
    HostProfile,
    ProfileTrips,
    Trip,
    TripCard,
    TripDetail,
    TripStatus,
    TripStop,
)

logger = logging.getLogger(__name__)

HOST_COLUMNS = "id, full_name, avatar_url, bio"


def _unexpected(action: str) -> dict:
    logger.exception("Unexpected error %s", action)
    return {"error": USER_MESSAGES[ErrorCode.INTERNAL_ERROR], "error_code": ErrorCode.INTERNAL_ERROR}


async def _load_stops(store: TripStore, trip_id: str) -> List[TripStop]:
    stop_rows = await store.list_where(TRIP_STOPS_TABLE, {"trip_id": trip_id}, order_by="stop_number")
    return [rows.stop_from_row(row) for row in stop_rows]


async def _load_cost_items(store: TripStore, trip_id: str) -> List[CostItem]:
    cost_rows = await store.list_where(COST_ITEMS_TABLE, {"trip_id": trip_id})
    return [rows.cost_item_from_row(row) for row in cost_rows]


async def _load_host(store: TripStore, user_id: str) -> Optional[HostProfile]:
    row = await store.fetch_by_id(PROFILES_TABLE, user_id, columns=HOST_COLUMNS)
    if row is None:
        return None
    return HostProfile(
        id=row["id"],
        full_name=row.get("full_name") or "Unknown Host",
        bio=row.get("bio"),
        avatar_url=row.get("avatar_url"),
    )


async def get_trip(trip_id: str, store: TripStore) -> TripResult:
    """Fetch one trip with its stops (in itinerary order) and cost items."""
    try:
        row = await store.fetch_by_id(TRIPS_TABLE, trip_id)
        if row is None:
            return TripResult(error=f"Trip {trip_id} not found", error_code=ErrorCode.TRIP_NOT_FOUND)

        stops = await _load_stops(store, trip_id)
        cost_items = await _load_cost_items(store, trip_id)
        return TripResult(trip=rows.trip_from_rows(row, stops, cost_items))
    except TripWizardError as e:
        logger.error("Error fetching trip %s: %s", trip_id, e.message)
        return TripResult(error=e.message, error_code=e.code)
    except Exception:
        return TripResult(**_unexpected(f"fetching trip {trip_id}"))


async def _list_trips(store: TripStore, filters: dict, action: str) -> TripListResult:
    try:
        trip_rows = await store.list_where(TRIPS_TABLE, filters, order_by="created_at", descending=True)
        return TripListResult(trips=[rows.trip_from_rows(row) for row in trip_rows])
    except TripWizardError as e:
        logger.error("Error %s: %s", action, e.message)
        return TripListResult(error=e.message, error_code=e.code)
    except Exception:
        return TripListResult(**_unexpected(action))


async def list_published(store: TripStore) -> TripListResult:
    """Published trips, newest first. List rows carry no stops or cost items."""
    result = await _list_trips(store, {"status": TripStatus.PUBLISHED.value}, "fetching published trips")
    # The filter is applied server side; drop anything else a policy or view might let through
    result.trips = [trip for trip in result.trips if trip.status == TripStatus.PUBLISHED]
    return result


async def get_user_trips(user_id: str, store: TripStore) -> TripListResult:
    """All trips hosted by a user, any status, newest first."""
    return await _list_trips(store, {"user_id": user_id}, f"fetching trips for user {user_id}")


async def update_status(trip_id: str, new_status: TripStatus, store: TripStore) -> StatusUpdateResult:
    """
    Overwrite a trip's status. Any transition is accepted, including moving
    a completed trip back to draft.
    """
    try:
        updated = await store.update_by_id(TRIPS_TABLE, trip_id, {"status": TripStatus(new_status).value})
        if updated is None:
            return StatusUpdateResult(error=f"Trip {trip_id} not found", error_code=ErrorCode.TRIP_NOT_FOUND)
        logger.info("Trip %s status set to %s", trip_id, TripStatus(new_status).value)
        return StatusUpdateResult(success=True)
    except TripWizardError as e:
        logger.error("Error updating status of trip %s: %s", trip_id, e.message)
        return StatusUpdateResult(error=e.message, error_code=e.code)
    except Exception:
        return StatusUpdateResult(**_unexpected(f"updating status of trip {trip_id}"))


async def get_trip_detail(trip_id: str, store: TripStore) -> TripDetailResult:
    """
    Everything the trip detail page shows: the trip, its host and derived
    totals. A missing host profile or a failing stops / cost items lookup
    leaves that part empty instead of failing the whole page.
    """
    try:
        row = await store.fetch_by_id(TRIPS_TABLE, trip_id)
        if row is None:
            return TripDetailResult(error=f"Trip {trip_id} not found", error_code=ErrorCode.TRIP_NOT_FOUND)

        host = None
        try:
            host = await _load_host(store, row["user_id"])
        except BackendError as e:
            logger.warning("Could not load host for trip %s: %s", trip_id, e.message)

        stops: List[TripStop] = []
        try:
            stops = await _load_stops(store, trip_id)
        except BackendError as e:
            logger.warning("Could not load stops for trip %s: %s", trip_id, e.message)

        cost_items: List[CostItem] = []
        try:
            cost_items = await _load_cost_items(store, trip_id)
        except BackendError as e:
            logger.warning("Could not load cost items for trip %s: %s", trip_id, e.message)

        trip = rows.trip_from_rows(row, stops, cost_items)
        return TripDetailResult(
            detail=TripDetail(
                trip=trip,
                host=host,
                total_nights=sum(stop.nights for stop in trip.stops),
                category_totals=category_totals(trip.cost_items),
            )
        )
    except TripWizardError as e:
        logger.error("Error fetching trip details %s: %s", trip_id, e.message)
        return TripDetailResult(error=e.message, error_code=e.code)
    except Exception:
        return TripDetailResult(**_unexpected(f"fetching trip details {trip_id}"))


async def list_published_with_hosts(store: TripStore) -> TripCardListResult:
    """Published trips paired with their host, for the browse page."""
    published = await list_published(store)
    if not published.ok:
        return TripCardListResult(error=published.error, error_code=published.error_code)

    cards = []
    try:
        for trip in published.trips:
            host = None
            try:
                host = await _load_host(store, trip.user_id)
            except BackendError as e:
                logger.warning("Could not load host %s: %s", trip.user_id, e.message)
            cards.append(TripCard(trip=trip, host=host or HostProfile(id=trip.user_id)))
    except Exception:
        return TripCardListResult(**_unexpected("loading trip hosts"))
    return TripCardListResult(cards=cards)


async def get_profile_trips(user_id: str, store: TripStore, today: Optional[date] = None) -> ProfileTripsResult:
    """
    A host's profile with their published trips, soonest departure first,
    split into upcoming (departing after today) and past.
    """
    today = today or date.today()
    try:
        host = await _load_host(store, user_id)
        if host is None:
            return ProfileTripsResult(error=f"Profile {user_id} not found", error_code=ErrorCode.PROFILE_NOT_FOUND)

        trip_rows = await store.list_where(
            TRIPS_TABLE,
            {"user_id": user_id, "status": TripStatus.PUBLISHED.value},
            order_by="departure_date",
        )
        trips: List[Trip] = [rows.trip_from_rows(row) for row in trip_rows]
        return ProfileTripsResult(
            profile=ProfileTrips(
                host=host,
                upcoming=[trip for trip in trips if trip.departure_date > today],
                past=[trip for trip in trips if trip.departure_date <= today],
            )
        )
    except TripWizardError as e:
        logger.error("Error fetching profile %s: %s", user_id, e.message)
        return ProfileTripsResult(error=e.message, error_code=e.code)
    except Exception:
        return ProfileTripsResult(**_unexpected(f"fetching profile {user_id}"))
