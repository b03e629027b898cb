# core/formatting.py

"""
Response formatter.

Turns database rows (or pydantic models) into the JSON shape the church
website expects:

  • every record gets a string `id`
  • a `type` tag is attached when the row has none (explicit hint or shape)
  • `imageUrl` / `coverImageUrl` / `leaderImageUrl` are always resolvable
  • events get display `date` / `time`, sermons a display `date`
  • date fields clobbered by objects (e.g. `{"imageUrl": ...}`) are repaired
    from the backing original document or replaced by "Date unavailable"

Formatting never raises and is idempotent.
"""

from datetime import date
from typing import Any, Dict, Optional, Tuple
from uuid import UUID

from pydantic import BaseModel

from core.date_utils import (
    DATE_UNAVAILABLE,
    extract_original_date,
    format_date_to_string,
    format_time_to_string,
    is_date_field,
    parse_date,
    process_date_field,
)
from core.logging_config import logger


PLACEHOLDER_ROOT = "/assets/placeholders"

DEFAULT_IMAGE = f"{PLACEHOLDER_ROOT}/default-image.svg"
DEFAULT_SERMON_IMAGE = f"{PLACEHOLDER_ROOT}/default-sermon.svg"
DEFAULT_EVENT_IMAGE = f"{PLACEHOLDER_ROOT}/default-event.svg"
DEFAULT_LEADER_IMAGE = f"{PLACEHOLDER_ROOT}/default-leader.svg"
DEFAULT_CELL_GROUP_IMAGE = f"{PLACEHOLDER_ROOT}/default-cell-group.svg"
DEFAULT_ZONE_IMAGE = f"{PLACEHOLDER_ROOT}/default-zone.svg"

IMAGE_FIELDS = ("image", "coverImage", "leaderImage")

# Fallbacks for secondary image slots, independent of the record type
IMAGE_FIELD_FALLBACKS = {
    "coverImage": DEFAULT_ZONE_IMAGE,
    "leaderImage": DEFAULT_LEADER_IMAGE,
}


class EntityStrategy(BaseModel):
    """Per-entity formatting rules."""

    default_image: str = DEFAULT_IMAGE
    # image slots whose *Url is filled even when the record has no reference
    image_fields: Tuple[str, ...] = ("image",)
    # normalized to a "Month D, YYYY" display string on every pass
    display_date_fields: Tuple[str, ...] = ()
    # only repaired when clobbered by a non-date object
    repair_date_fields: Tuple[str, ...] = ()
    derive_schedule: bool = False

    model_config = {"frozen": True}


DEFAULT_STRATEGY = EntityStrategy()

ENTITY_STRATEGIES: Dict[str, EntityStrategy] = {
    "sermon": EntityStrategy(
        default_image=DEFAULT_SERMON_IMAGE,
        display_date_fields=("date",),
    ),
    "event": EntityStrategy(
        default_image=DEFAULT_EVENT_IMAGE,
        derive_schedule=True,
    ),
    "leader": EntityStrategy(default_image=DEFAULT_LEADER_IMAGE),
    "cell-group": EntityStrategy(
        default_image=DEFAULT_CELL_GROUP_IMAGE,
        image_fields=("image", "leaderImage"),
    ),
    "zone": EntityStrategy(
        default_image=DEFAULT_ZONE_IMAGE,
        image_fields=("image", "coverImage"),
    ),
    "membership-renewal": EntityStrategy(
        repair_date_fields=("birthday", "renewalDate"),
    ),
    "foundation-class-registration": EntityStrategy(
        repair_date_fields=("registrationDate",),
    ),
    "event-signup": EntityStrategy(
        repair_date_fields=("childDateOfBirth", "submittedAt"),
    ),
}


# -----------------------------------------------------
# Type inference (first match wins)
# -----------------------------------------------------
def infer_entity_type(obj: dict) -> Optional[str]:
    if obj.get("startDate") and obj.get("title"):
        return "event"
    if (obj.get("speaker") or obj.get("preacher")) and obj.get("title"):
        return "sermon"
    if obj.get("position") and obj.get("name"):
        return "leader"
    if obj.get("meetingDay") and obj.get("meetingTime"):
        return "cell-group"
    if obj.get("zoneLeader") and obj.get("zoneName"):
        return "zone"
    if obj.get("memberSince"):
        return "membership-renewal"
    if obj.get("preferredSession"):
        return "foundation-class-registration"
    if obj.get("eventType") and obj.get("fullName"):
        return "event-signup"
    return None


def resolve_strategy(obj: dict) -> EntityStrategy:
    for tag in (obj.get("type"), obj.get("category")):
        if isinstance(tag, str) and tag in ENTITY_STRATEGIES:
            return ENTITY_STRATEGIES[tag]
    return DEFAULT_STRATEGY


# -----------------------------------------------------
# Public entry point
# -----------------------------------------------------
def format_response(data: Any, entity: Optional[str] = None) -> Any:
    """
    Format a record or a list of records.

    `entity` tags records that carry no `type`/`category` of their own;
    without it the type is inferred from the record's shape.
    """
    if isinstance(data, (list, tuple)):
        return [format_record(item, entity) for item in data]
    return format_record(data, entity)


def format_record(item: Any, entity: Optional[str] = None) -> Any:
    if item is None:
        return None

    obj = _to_plain(item)
    if obj is None:
        return _json_safe(item)

    try:
        _apply_rules(obj, entity)
    except Exception as e:
        logger.warning(f"Response formatting degraded for record {obj.get('id')}: {e}")

    obj.pop("_doc", None)
    for key, value in obj.items():
        if not isinstance(value, (dict, list)):
            obj[key] = _json_safe(value)
    return obj


# -----------------------------------------------------
# Rules
# -----------------------------------------------------
def _apply_rules(obj: dict, entity: Optional[str]) -> None:
    if obj.get("_id") is not None:
        obj["_id"] = str(obj["_id"])
        obj["id"] = obj["_id"]
    elif obj.get("id") is not None:
        obj["id"] = str(obj["id"])

    if not obj.get("type") and not obj.get("category"):
        tag = entity or infer_entity_type(obj)
        if tag:
            obj["type"] = tag

    strategy = resolve_strategy(obj)

    _resolve_images(obj, strategy)

    if strategy.derive_schedule or (obj.get("startDate") and obj.get("title")):
        _derive_event_schedule(obj)

    # sermon-shaped rows tagged otherwise still get their date normalized
    if (obj.get("speaker") or obj.get("preacher")) and obj.get("title"):
        strategy = ENTITY_STRATEGIES["sermon"]

    for field in strategy.display_date_fields:
        _normalize_display_date(obj, field)

    for field in strategy.repair_date_fields:
        _repair_date(obj, field)

    _format_children(obj)


def _resolve_images(obj: dict, strategy: EntityStrategy) -> None:
    for field in IMAGE_FIELDS:
        url_key = f"{field}Url"
        ref = obj.get(field)

        if isinstance(ref, dict) and ref.get("path"):
            obj[url_key] = ref["path"]
            continue

        if obj.get(url_key):
            continue

        # media rows are their own image
        if field == "image" and not ref and obj.get("filename") and obj.get("path"):
            obj[url_key] = obj["path"]
            continue

        if ref or field in strategy.image_fields:
            if field == "image":
                obj[url_key] = strategy.default_image
            else:
                obj[url_key] = IMAGE_FIELD_FALLBACKS[field]


def _derive_event_schedule(obj: dict) -> None:
    if obj.get("startDate") and not obj.get("date"):
        start = parse_date(obj["startDate"])
        if start is not None:
            obj["date"] = format_date_to_string(start)
            if not obj.get("time"):
                obj["time"] = format_time_to_string(start)

    if "ministry" not in obj:
        obj["ministry"] = ""


def _normalize_display_date(obj: dict, field: str) -> None:
    value = obj.get(field)
    if isinstance(value, dict) and "imageUrl" in value:
        logger.warning(f"Corrupted {field} on record {obj.get('id')}: object with imageUrl")
    obj[field] = process_date_field(obj, field)


def _repair_date(obj: dict, field: str) -> None:
    value = obj.get(field)
    if value is None or isinstance(value, (str, date)):
        return

    logger.warning(f"Corrupted {field} on record {obj.get('id')}: {type(value).__name__}")
    recovered = extract_original_date(obj, field)
    obj[field] = recovered if recovered is not None else DATE_UNAVAILABLE


# -----------------------------------------------------
# Recursion
# -----------------------------------------------------
def _looks_like_record(value: dict) -> bool:
    if value.get("_id") is not None or value.get("id") is not None:
        return True
    return any(field in value for field in IMAGE_FIELDS)


def _format_nested(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return format_record(value)
    if isinstance(value, dict):
        if _looks_like_record(value):
            return format_record(value)
        walked = dict(value)
        _format_children(walked)
        return walked
    if isinstance(value, (list, tuple)):
        return [_format_nested(item) for item in value]
    return _json_safe(value)


def _format_children(obj: dict) -> None:
    for key, value in list(obj.items()):
        if key in ("_id", "_doc"):
            continue
        if is_date_field(key):
            if not isinstance(value, (dict, list)):
                obj[key] = _json_safe(value)
            continue
        if isinstance(value, (dict, list, tuple, BaseModel)):
            obj[key] = _format_nested(value)
        else:
            obj[key] = _json_safe(value)


# -----------------------------------------------------
# Conversion helpers
# -----------------------------------------------------
def _to_plain(item: Any) -> Optional[dict]:
    if isinstance(item, BaseModel):
        raw = item.model_dump(by_alias=True)
        obj = dict(raw)
        obj["_doc"] = raw
        return obj
    if isinstance(item, dict):
        return dict(item)
    return None


def _json_safe(value: Any) -> Any:
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, UUID):
        return str(value)
    return value
