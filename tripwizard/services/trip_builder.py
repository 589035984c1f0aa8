# tripwizard/services/trip_builder.py

import math
from typing import Iterable, List, Tuple

from pydantic import ValidationError as PydanticValidationError

from tripwizard.core.errors import ValidationError
from tripwizard.logic.costs import category_totals, subtotal
from tripwizard.models.trip import CostCategory, CostItem, CostQuote, TripStop, TripSubmission
from tripwizard.models.wizard import CostStep, WizardState


def _check_non_negative(name: str, value: float) -> None:
    if value is None or not math.isfinite(value) or value < 0:
        raise ValidationError(f"{name} must be a finite non-negative number, got {value!r}")


def _cost_breakdown(cost_items: Iterable[CostItem], buffer_percentage: float, your_fee: float) -> Tuple[float, float, float]:
    """(subtotal, buffer_amount, total), each rounded to cents; total is the sum of the rounded parts."""
    _check_non_negative("buffer_percentage", buffer_percentage)
    _check_non_negative("your_fee", your_fee)

    items_subtotal = round(subtotal(cost_items), 2)
    buffer_amount = round(items_subtotal * buffer_percentage / 100, 2)
    return items_subtotal, buffer_amount, round(items_subtotal + buffer_amount + your_fee, 2)


def compute_total_cost(cost_items: Iterable[CostItem], buffer_percentage: float, your_fee: float) -> float:
    """
    Subtotal of all line items, plus the buffer percentage of that subtotal,
    plus the host fee. Buffer and fee are applied once, not per category.
    Rounded to cents.
    """
    return _cost_breakdown(cost_items, buffer_percentage, your_fee)[2]


def assign_stop_sequence(stops: Iterable[TripStop]) -> List[TripStop]:
    # Position in the list is the sequence number; input stops are not mutated
    return [stop.model_copy(update={"sequence_number": index}) for index, stop in enumerate(stops, start=1)]


def flatten_cost_step(cost: CostStep) -> List[CostItem]:
    """Turn the per-category lists of the cost page into category-tagged items."""
    grouped = {
        CostCategory.ACCOMMODATION: cost.accommodation,
        CostCategory.TRANSPORTATION: cost.transportation,
        CostCategory.ACTIVITIES: cost.activities,
    }
    return [
        CostItem(category=category, name=item.name, amount=item.amount)
        for category, items in grouped.items()
        for item in items
    ]


def quote(cost: CostStep) -> CostQuote:
    """Live calculator shown on the cost page."""
    items = flatten_cost_step(cost)
    items_subtotal, buffer_amount, total = _cost_breakdown(items, cost.buffer, cost.your_fee)
    return CostQuote(
        currency=cost.currency,
        category_totals={category: round(amount, 2) for category, amount in category_totals(items).items()},
        subtotal=items_subtotal,
        buffer_amount=buffer_amount,
        your_fee=cost.your_fee,
        total=total,
    )


def _unique(values: Iterable[str]) -> List[str]:
    seen = []
    for value in values:
        if value not in seen:
            seen.append(value)
    return seen


def assemble_submission(state: WizardState) -> TripSubmission:
    """
    Collapse the wizard's per-page state into one submission payload.
    Absent strings become "" and absent lists become [].
    Raises ValidationError when a required field is missing or out of range.
    """
    basics, details, itinerary, cost = state.basics, state.details, state.itinerary, state.cost

    if not (details.trip_name or "").strip():
        raise ValidationError("trip_name is required")
    if basics.departure_date is None:
        raise ValidationError("departure_date is required")

    stops = assign_stop_sequence(
        TripStop(
            location=stop.location,
            nights=stop.nights,
            description=stop.description,
            activities=stop.activities,
        )
        for stop in itinerary.stops
    )

    try:
        return TripSubmission(
            trip_name=details.trip_name,
            departure_date=basics.departure_date,
            categories=_unique(basics.categories),
            overview=details.overview or "",
            about_you=details.about_you or "",
            accommodation_type=details.accommodation_type or "",
            accommodation_details=details.accommodation_details or "",
            inclusions=list(details.inclusions or []),
            exclusions=list(details.exclusions or []),
            special_features=list(details.special_features or []),
            min_trip_mates=cost.min_trip_mates,
            max_trip_mates=cost.max_trip_mates,
            currency=cost.currency,
            buffer_percentage=cost.buffer,
            your_fee=cost.your_fee,
            stops=stops,
            cost_items=flatten_cost_step(cost),
        )
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid trip submission: {e}") from e
