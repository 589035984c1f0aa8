# tripwizard/db/rows.py
# Conversions between the pydantic models and the trips / trip_stops /
# cost_items table rows.

from typing import Any, Dict, Iterable, List, Optional

from tripwizard.models.trip import CostItem, Trip, TripStatus, TripStop, TripSubmission

Row = Dict[str, Any]


def trip_row(submission: TripSubmission, user_id: str, total_cost: float, status: TripStatus) -> Row:
    # mode="json" turns the departure date into an ISO string for PostgREST
    row = submission.model_dump(mode="json", exclude={"stops", "cost_items"})
    row.update(user_id=user_id, total_cost=total_cost, status=status.value)
    return row


def stop_rows(trip_id: str, stops: Iterable[TripStop]) -> List[Row]:
    return [
        {
            "trip_id": trip_id,
            "stop_number": stop.sequence_number,
            "location": stop.location,
            "nights": stop.nights,
            "description": stop.description,
            "activities": stop.activities,
        }
        for stop in stops
    ]


def cost_item_rows(trip_id: str, items: Iterable[CostItem]) -> List[Row]:
    return [
        {
            "trip_id": trip_id,
            "category": item.category.value,
            "name": item.name,
            "amount": item.amount,
        }
        for item in items
    ]


def stop_from_row(row: Row) -> TripStop:
    return TripStop(
        id=row.get("id"),
        sequence_number=row.get("stop_number"),
        location=row.get("location") or "",
        nights=row.get("nights") or 0,
        description=row.get("description"),
        activities=row.get("activities"),
    )


def cost_item_from_row(row: Row) -> CostItem:
    return CostItem(
        id=row.get("id"),
        category=row["category"],
        name=row.get("name") or "",
        amount=row.get("amount") or 0,
    )


def trip_from_rows(
    row: Row,
    stops: Optional[Iterable[TripStop]] = None,
    cost_items: Optional[Iterable[CostItem]] = None,
) -> Trip:
    data = dict(row)
    # Nullable text columns come back as None
    for column in ("overview", "about_you", "accommodation_type", "accommodation_details"):
        data[column] = data.get(column) or ""
    for column in ("categories", "inclusions", "exclusions", "special_features"):
        data[column] = data.get(column) or []
    data["stops"] = sorted(stops or [], key=lambda stop: stop.sequence_number or 0)
    data["cost_items"] = list(cost_items or [])
    return Trip.model_validate(data)
