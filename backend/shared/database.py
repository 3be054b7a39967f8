"""
Database client factory for Supabase.

Both services talk to Supabase with the service role key; ownership rules
are enforced in the service layer, not through row level security.
"""

from typing import Optional
from supabase import create_client, Client

from .config import Settings

# Module-level client cache
_service_client: Optional[Client] = None


def get_supabase_client(settings: Settings) -> Client:
    """
    Get Supabase client with service role (bypasses RLS).

    Args:
        settings: Application settings carrying the Supabase URL and key

    Returns:
        Supabase client configured with service role key
    """
    global _service_client

    if _service_client is None:
        if not settings.supabase_url or not settings.supabase_service_role_key:
            raise RuntimeError(
                "Supabase configuration missing. "
                "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
            )
        _service_client = create_client(
            settings.supabase_url,
            settings.supabase_service_role_key,
        )

    return _service_client


def reset_client_cache() -> None:
    """
    Reset the cached database client.

    Useful for testing or when configuration changes.
    """
    global _service_client
    _service_client = None
