# File: tripwizard/services/trip_service.py

import logging
from typing import List

from tripwizard.core.errors import BackendError, ErrorCode, TripWizardError, USER_MESSAGES
from tripwizard.db import rows
from tripwizard.db.trip_store import COST_ITEMS_TABLE, TRIP_STOPS_TABLE, TRIPS_TABLE, TripStore
from tripwizard.models.results import SubmissionResult
from tripwizard.models.trip import TripStatus, TripSubmission
from tripwizard.services.trip_builder import assign_stop_sequence, compute_total_cost

logger = logging.getLogger(__name__)


async def create_trip(submission: TripSubmission, user_id: str, store: TripStore) -> SubmissionResult:
    """
    Persist a submission as one trips row plus its trip_stops and cost_items.

    The parent insert is the only fatal step: if it fails nothing else is
    written and the result carries the error. Child inserts are best effort;
    their failures are logged and returned as warnings while the already
    created trip is kept. There is no transaction around the three writes.
    """
    if not user_id or not user_id.strip():
        return SubmissionResult(
            error="user_id is required to create a trip",
            error_code=ErrorCode.VALIDATION_ERROR,
        )

    try:
        total_cost = compute_total_cost(submission.cost_items, submission.buffer_percentage, submission.your_fee)
        stops = assign_stop_sequence(submission.stops)

        # 1. Parent record
        try:
            parent = await store.insert_one(
                TRIPS_TABLE,
                rows.trip_row(submission, user_id, total_cost, TripStatus.PUBLISHED),
            )
        except BackendError as e:
            logger.error("Error creating trip for user %s: %s", user_id, e.message)
            return SubmissionResult(error=e.message, error_code=e.code)

        trip_id = parent["id"]
        warnings: List[str] = []

        # 2. Itinerary stops
        saved_stops = stops
        if stops:
            try:
                inserted = await store.insert_many(TRIP_STOPS_TABLE, rows.stop_rows(trip_id, stops))
                if inserted:
                    saved_stops = [rows.stop_from_row(row) for row in inserted]
            except BackendError as e:
                logger.warning("Error creating trip stops for trip %s: %s", trip_id, e.message)
                saved_stops = []
                warnings.append(f"Itinerary stops were not saved: {e.message}")

        # 3. Cost items
        saved_costs = submission.cost_items
        if submission.cost_items:
            try:
                inserted = await store.insert_many(COST_ITEMS_TABLE, rows.cost_item_rows(trip_id, submission.cost_items))
                if inserted:
                    saved_costs = [rows.cost_item_from_row(row) for row in inserted]
            except BackendError as e:
                logger.warning("Error creating cost items for trip %s: %s", trip_id, e.message)
                saved_costs = []
                warnings.append(f"Cost items were not saved: {e.message}")

        trip = rows.trip_from_rows(parent, saved_stops, saved_costs)
        logger.info("Trip %s created for user %s (%d warnings)", trip_id, user_id, len(warnings))
        return SubmissionResult(trip=trip, warnings=warnings)

    except TripWizardError as e:
        return SubmissionResult(error=e.message, error_code=e.code)
    except Exception:
        logger.exception("Unexpected error creating trip for user %s", user_id)
        return SubmissionResult(
            error=USER_MESSAGES[ErrorCode.INTERNAL_ERROR],
            error_code=ErrorCode.INTERNAL_ERROR,
        )
