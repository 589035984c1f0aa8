"""
Thin gateway over the Supabase tables used by the trip wizard.

Only the operations the services need are exposed: insert-returning,
batch insert, fetch by id, filtered + ordered list and partial update.
Each call gets its own timeout and is attempted exactly once.
"""

import asyncio
from typing import Any, Dict, List, Optional

from postgrest.exceptions import APIError

from tripwizard.core.config import settings
from tripwizard.core.errors import BackendError, BackendTimeoutError, ErrorCode
from tripwizard.db.supabase_client import get_supabase_client

TRIPS_TABLE = "trips"
TRIP_STOPS_TABLE = "trip_stops"
COST_ITEMS_TABLE = "cost_items"
PROFILES_TABLE = "profiles"

Row = Dict[str, Any]


class TripStore:
    def __init__(self, client: Any, timeout: Optional[float] = None):
        self._client = client
        self._timeout = timeout if timeout is not None else settings.BACKEND_TIMEOUT_SECONDS

    async def _execute(self, query: Any, action: str, code: ErrorCode) -> List[Row]:
        try:
            response = await asyncio.wait_for(query.execute(), timeout=self._timeout)
        except asyncio.TimeoutError as e:
            raise BackendTimeoutError(f"{action} timed out after {self._timeout}s") from e
        except APIError as e:
            raise BackendError(f"{action} failed: {e.message}", code=code) from e
        except Exception as e:
            raise BackendError(f"{action} failed: {e}", code=code) from e
        return response.data or []

    async def insert_one(self, table: str, row: Row) -> Row:
        """Insert a single row and return it as stored (generated id, timestamps)."""
        data = await self._execute(
            self._client.table(table).insert(row),
            f"insert into {table}",
            ErrorCode.BACKEND_WRITE_FAILED,
        )
        if not data:
            raise BackendError(f"insert into {table} returned no data", code=ErrorCode.BACKEND_WRITE_FAILED)
        return data[0]

    async def insert_many(self, table: str, rows: List[Row]) -> List[Row]:
        if not rows:
            return []
        return await self._execute(
            self._client.table(table).insert(rows),
            f"batch insert into {table}",
            ErrorCode.BACKEND_WRITE_FAILED,
        )

    async def fetch_by_id(self, table: str, record_id: str, columns: str = "*") -> Optional[Row]:
        data = await self._execute(
            self._client.table(table).select(columns).eq("id", record_id).limit(1),
            f"fetch {table} {record_id}",
            ErrorCode.BACKEND_READ_FAILED,
        )
        return data[0] if data else None

    async def list_where(
        self,
        table: str,
        filters: Optional[Dict[str, Any]] = None,
        order_by: Optional[str] = None,
        descending: bool = False,
        columns: str = "*",
    ) -> List[Row]:
        query = self._client.table(table).select(columns)
        for column, value in (filters or {}).items():
            query = query.eq(column, value)
        if order_by:
            query = query.order(order_by, desc=descending)
        return await self._execute(query, f"list {table}", ErrorCode.BACKEND_READ_FAILED)

    async def update_by_id(self, table: str, record_id: str, changes: Row) -> Optional[Row]:
        """Partial update; returns the updated row or None when no row matched."""
        data = await self._execute(
            self._client.table(table).update(changes).eq("id", record_id),
            f"update {table} {record_id}",
            ErrorCode.BACKEND_WRITE_FAILED,
        )
        return data[0] if data else None


async def get_trip_store() -> TripStore:
    """FastAPI dependency returning a store bound to the shared client."""
    return TripStore(await get_supabase_client())
