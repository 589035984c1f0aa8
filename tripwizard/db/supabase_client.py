from typing import Optional

from supabase import AsyncClient, acreate_client

from tripwizard.core.config import settings

_client: Optional[AsyncClient] = None


async def get_supabase_client() -> AsyncClient:
    """
    Initializes (once) and returns the async Supabase client.
    """
    global _client
    if _client is not None:
        return _client

    if not settings.SUPABASE_URL or not settings.SUPABASE_KEY:
        raise ValueError("Supabase URL and Key must be set in .env file")

    _client = await acreate_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)
    return _client

