# core/supabase_helpers.py

from typing import Optional

from fastapi import HTTPException

from core.utils import sanitize
from core.errors import supabase_error, handle_supabase_error
from core.supabase_client import get_supabase_client


# =================================================================
#  MEDIA REFERENCES
# =================================================================
# Content rows point at the `media` table through *Id columns
# (imageId, coverImageId, leaderImageId). Reads embed the media row
# under the reference name so the formatter can resolve `<field>Url`.
# =================================================================

MEDIA_REF_FIELDS = ("image", "coverImage", "leaderImage")


def media_columns(*refs: str) -> str:
    """Select string embedding the given media references."""
    embeds = [f"{ref}:{ref}Id(*)" for ref in refs]
    return ", ".join(["*"] + embeds)


def to_media_columns(data: dict) -> dict:
    """
    Map API media references onto their FK columns.
    Accepts a media id or a populated media object.
    """
    mapped = dict(data)
    for ref in MEDIA_REF_FIELDS:
        if ref not in mapped:
            continue
        value = mapped.pop(ref)
        if isinstance(value, dict):
            value = value.get("id") or value.get("_id")
        mapped[f"{ref}Id"] = value or None
    return mapped


# =================================================================
#  SAFE SELECT / INSERT / UPDATE / DELETE
# =================================================================

def _client():
    client = get_supabase_client()
    if not client:
        raise HTTPException(500, "Supabase client not configured")
    return client


def safe_select(
    table: str,
    filters: dict = None,
    *,
    columns: str = "*",
    order: Optional[str] = None,
    desc: bool = False,
    single: bool = False,
):
    """Safe table SELECT. `single=True` returns the first row or None."""
    client = _client()

    try:
        query = client.table(table).select(columns)
        if filters:
            for key, val in filters.items():
                query = query.eq(key, val)
        if order:
            query = query.order(order, desc=desc)
        if single:
            query = query.limit(1)

        rows = query.execute().data or []
        if single:
            return rows[0] if rows else None
        return rows

    except Exception as e:
        supabase_error(e, f"Failed to fetch from {table}")


def safe_insert(table: str, data: dict, *, columns: str = "*"):
    """Safe INSERT. Re-reads the row when `columns` asks for embeds."""
    client = _client()
    cleaned = sanitize(data)

    try:
        result = (
            client.table(table)
            .insert(cleaned, returning="representation")
            .execute()
        )
        row = result.data[0] if result.data else None

    except Exception as e:
        raise handle_supabase_error(e, f"Insert into {table}")

    if row is not None and columns != "*":
        return safe_select(table, {"id": row["id"]}, columns=columns, single=True)
    return row


def safe_update(table: str, filters: dict, data: dict, *, columns: str = "*"):
    """Safe UPDATE. Returns the updated row, or None when nothing matched."""
    client = _client()
    cleaned = sanitize(data)

    try:
        query = client.table(table).update(
            cleaned, returning="representation"
        )
        for key, val in filters.items():
            query = query.eq(key, val)

        result = query.execute()
        row = result.data[0] if result.data else None

    except Exception as e:
        raise handle_supabase_error(e, f"Update of {table}")

    if row is not None and columns != "*":
        return safe_select(table, {"id": row["id"]}, columns=columns, single=True)
    return row


def safe_delete(table: str, filters: dict):
    """Safe DELETE. Returns the deleted row, or None when nothing matched."""
    client = _client()

    try:
        query = client.table(table).delete()
        for key, val in filters.items():
            query = query.eq(key, val)

        result = query.execute()
        return result.data[0] if result.data else None

    except Exception as e:
        supabase_error(e, f"Failed to delete from {table}")


def safe_count(table: str, filters: dict = None) -> int:
    rows = safe_select(table, filters, columns="id")
    return len(rows or [])
