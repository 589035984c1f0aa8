"""Shared test fixtures for the trip wizard backend."""

import copy
import uuid
from datetime import date, datetime, timedelta

import pytest

from tripwizard.core.errors import BackendError, ErrorCode
from tripwizard.models.wizard import (
    BasicsStep,
    CostStep,
    DetailsStep,
    ItineraryStep,
    WizardCostItem,
    WizardState,
    WizardStop,
)
from tripwizard.services.trip_builder import assemble_submission


class FakeTripStore:
    """
    In-memory stand-in for TripStore. Rows get a generated id and increasing
    created_at / updated_at timestamps. Register failures with ``fail``.
    """

    def __init__(self):
        self.tables = {}
        self.calls = []
        self._failures = {}
        self._clock = datetime(2025, 1, 1, 12, 0, 0)

    def fail(self, operation, table, code=ErrorCode.BACKEND_WRITE_FAILED, error=None):
        self._failures[(operation, table)] = error or BackendError(f"{operation} {table} failed", code=code)

    def _check(self, operation, table):
        self.calls.append((operation, table))
        error = self._failures.get((operation, table))
        if error is not None:
            raise error

    def _stamp(self, row):
        self._clock += timedelta(seconds=1)
        stored = copy.deepcopy(row)
        stored.setdefault("id", str(uuid.uuid4()))
        stored.setdefault("created_at", self._clock.isoformat())
        stored.setdefault("updated_at", self._clock.isoformat())
        return stored

    def add(self, table, row):
        """Seed a row directly, bypassing call tracking."""
        stored = self._stamp(row)
        self.tables.setdefault(table, []).append(stored)
        return copy.deepcopy(stored)

    async def insert_one(self, table, row):
        self._check("insert_one", table)
        return self.add(table, row)

    async def insert_many(self, table, rows):
        self._check("insert_many", table)
        return [self.add(table, row) for row in rows]

    async def fetch_by_id(self, table, record_id, columns="*"):
        self._check("fetch_by_id", table)
        for row in self.tables.get(table, []):
            if row["id"] == record_id:
                return copy.deepcopy(row)
        return None

    async def list_where(self, table, filters=None, order_by=None, descending=False, columns="*"):
        self._check("list_where", table)
        found = [
            copy.deepcopy(row)
            for row in self.tables.get(table, [])
            if all(row.get(column) == value for column, value in (filters or {}).items())
        ]
        if order_by:
            found.sort(key=lambda row: row[order_by], reverse=descending)
        return found

    async def update_by_id(self, table, record_id, changes):
        self._check("update_by_id", table)
        for row in self.tables.get(table, []):
            if row["id"] == record_id:
                row.update(changes)
                return copy.deepcopy(row)
        return None


@pytest.fixture
def store():
    return FakeTripStore()


@pytest.fixture
def wizard_state():
    return WizardState(
        basics=BasicsStep(departure_date=date(2025, 9, 17), categories=["wellness", "party"]),
        details=DetailsStep(
            trip_name="Epic European Adventure",
            overview="Join us for an amazing journey through Europe's most beautiful cities.",
            about_you="I'm a passionate traveler who loves to explore new cultures.",
            accommodation_type="Hotel",
            accommodation_details="Comfortable hotels with private rooms",
            inclusions=["Accommodation", "Local transport", "Entrance fees"],
            exclusions=["International flights", "Personal expenses"],
            special_features=["Local guides", "Cultural experiences"],
        ),
        itinerary=ItineraryStep(
            stops=[
                WizardStop(
                    id="1",
                    location="Paris, France",
                    nights=3,
                    description="Explore the City of Light",
                    activities="Eiffel Tower, Louvre Museum, Seine River cruise",
                ),
                WizardStop(
                    id="2",
                    location="Amsterdam, Netherlands",
                    nights=2,
                    description="Discover Dutch culture",
                    activities="Canal tour, Anne Frank House, Van Gogh Museum",
                ),
            ]
        ),
        cost=CostStep(
            min_trip_mates=2,
            max_trip_mates=4,
            currency="EUR",
            buffer=10,
            your_fee=50,
            accommodation=[WizardCostItem(id="a1", name="Hotels", amount=800)],
            transportation=[WizardCostItem(id="t1", name="Local transport", amount=300)],
            activities=[WizardCostItem(id="x1", name="Tours and activities", amount=100)],
        ),
    )


@pytest.fixture
def submission(wizard_state):
    return assemble_submission(wizard_state)
