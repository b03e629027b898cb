# core/supabase_client.py

from typing import Optional

from supabase import create_client, Client
from core.config import settings
from core.logging_config import logger


# Tables /health/db reads one row from
CONTENT_TABLES = ["sermons", "events", "leaders", "cell_groups", "zones", "media"]
REQUEST_TABLES = [
    "membership_renewals",
    "foundation_class_registrations",
    "foundation_class_sessions",
    "event_signup_requests",
    "cell_group_join_requests",
]


def get_supabase_client() -> Optional[Client]:
    """
    Service-role client. The API is the only writer, so row level
    security never applies; returns None when credentials are missing.
    """
    url = settings.SUPABASE_URL
    key = settings.SUPABASE_SERVICE_ROLE_KEY

    if not url or not key:
        logger.error(
            f"Supabase not configured (SUPABASE_URL {'set' if url else 'missing'}, "
            f"SUPABASE_SERVICE_ROLE_KEY {'set' if key else 'missing'})"
        )
        return None

    try:
        return create_client(url, key)
    except Exception as e:
        logger.error(f"Could not create Supabase client: {e}", exc_info=True)
        return None


def _probe_table(client: Client, table: str) -> dict:
    try:
        res = client.table(table).select("*").limit(1).execute()
    except Exception as err:
        return {"status": "error", "detail": str(err)}
    return {"status": "ok", "rows_found": len(res.data or [])}


def ping_supabase() -> dict:
    """Per-table read check for the health endpoint; never raises."""
    client = get_supabase_client()
    if client is None:
        return {"service": "Supabase", "status": "not_configured"}

    tables = {t: _probe_table(client, t) for t in CONTENT_TABLES + REQUEST_TABLES}
    return {"service": "Supabase", "status": "ok", "tables": tables}
