"""
Supabase client for the storage layer.

The API talks to Postgres through a single service-role client; access
control is enforced by the API's own bearer-token gate, not by RLS.
Every repository shares this client.
"""

from typing import Optional
from supabase import Client, ClientOptions, create_client

from .config import get_settings

_service_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """
    Get the shared service-role client, creating it on first use.

    PostgREST calls time out after ``supabase_timeout_seconds``; a timeout
    surfaces from the repositories as StorageError like any other failure.

    Raises:
        RuntimeError: If the Supabase URL or key is not configured
    """
    global _service_client

    if _service_client is None:
        settings = get_settings()
        missing = [
            name
            for name, value in (
                ("CATALOG_SUPABASE_URL", settings.supabase_url),
                ("CATALOG_SUPABASE_SERVICE_ROLE_KEY", settings.supabase_service_role_key),
            )
            if not value
        ]
        if missing:
            raise RuntimeError(f"Supabase configuration missing. Set {', '.join(missing)}.")

        _service_client = create_client(
            settings.supabase_url,
            settings.supabase_service_role_key,
            options=ClientOptions(postgrest_client_timeout=settings.supabase_timeout_seconds),
        )

    return _service_client


def reset_client_cache() -> None:
    """Drop the cached client so the next call rebuilds it from settings."""
    global _service_client
    _service_client = None
