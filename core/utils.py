# core/utils.py

from datetime import date, datetime, timezone

# Fields the client echoes back but the API owns
READ_ONLY_FIELDS = ("_id", "id", "__v", "createdAt", "updatedAt", "_doc")


def sanitize(data: dict) -> dict:
    """
    Sanitize dictionary data before it is sent to Supabase:
    - Empty strings → None
    - Strip string whitespace
    - date / datetime → ISO string
    - Everything else kept as-is (phone numbers stay strings)
    """
    clean = {}

    for k, v in data.items():
        if isinstance(v, str):
            stripped = v.strip()
            clean[k] = stripped if stripped else None
            continue

        if isinstance(v, date):
            clean[k] = v.isoformat()
            continue

        clean[k] = v

    return clean


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def utc_now_iso() -> str:
    return utc_now().isoformat()


def strip_read_only(data: dict) -> dict:
    """Drop identity/bookkeeping fields before an update and stamp updatedAt."""
    cleaned = {k: v for k, v in data.items() if k not in READ_ONLY_FIELDS}
    cleaned["updatedAt"] = utc_now_iso()
    return cleaned
