# jobs/seed_data.py

"""
Seed the database with the initial admin accounts, zones, cell groups
and foundation class sessions.

Every step is idempotent: tables that already hold rows are left alone.
Run as `python -m jobs.seed_data`, or set SEED_ON_STARTUP=true.
"""

from typing import Dict, List

from core.config import settings
from core.logging_config import logger
from core.security import hash_password
from core.supabase_client import get_supabase_client
from core.utils import utc_now_iso


# -----------------------------------------------------
# Seed content (zone keys are the website's static ids)
# -----------------------------------------------------
ZONES: List[dict] = [
    {
        "key": "zone1",
        "name": "Central Zone",
        "description": "Covering the central areas of Kitwe including CBD and surrounding neighborhoods.",
        "elder": {
            "name": "Elder James Mwanza",
            "title": "Zone Elder",
            "bio": "Serving as an elder for 8 years, James has a passion for discipleship and community building.",
            "contact": "james.mwanza@example.com",
            "phone": "+260 97 1234567",
        },
        "location": "Kitwe Central",
        "iconName": "FaUsers",
    },
    {
        "key": "zone2",
        "name": "Northern Zone",
        "description": "Serving the northern communities of Kitwe including Riverside and Parklands areas.",
        "elder": {
            "name": "Elder Sarah Banda",
            "title": "Zone Elder",
            "bio": "With a background in counseling, Sarah leads the Northern Zone with compassion and wisdom.",
            "contact": "sarah.banda@example.com",
            "phone": "+260 97 7654321",
        },
        "location": "Kitwe North",
        "iconName": "FaHome",
    },
    {
        "key": "zone3",
        "name": "Eastern Zone",
        "description": "Covering the eastern regions of Kitwe including Chamboli and Chimwemwe areas.",
        "elder": {
            "name": "Elder David Mutale",
            "title": "Zone Elder",
            "bio": "David has been serving in church leadership for over a decade with a focus on family ministry.",
            "contact": "david.mutale@example.com",
            "phone": "+260 96 8765432",
        },
        "location": "Kitwe East",
        "iconName": "FaHeart",
    },
]

CELL_GROUPS: List[dict] = [
    {
        "zoneKey": "zone1",
        "name": "Faith Builders",
        "description": "A welcoming group focused on building faith through Bible study and prayer.",
        "leader": "John Mulenga",
        "leaderContact": "john.mulenga@example.com",
        "location": "Kitwe Central",
        "coordinates": {"lat": -12.809, "lng": 28.213},
        "meetingDay": "Wednesday",
        "meetingTime": "6:30 PM",
        "capacity": "10-15 people",
        "tags": ["Bible Study", "Prayer", "Families"],
    },
    {
        "zoneKey": "zone1",
        "name": "Grace Fellowship",
        "description": "A group dedicated to experiencing God's grace through fellowship and worship.",
        "leader": "Mary Banda",
        "leaderContact": "mary.banda@example.com",
        "location": "Kitwe Central",
        "coordinates": {"lat": -12.815, "lng": 28.219},
        "meetingDay": "Thursday",
        "meetingTime": "7:00 PM",
        "capacity": "8-12 people",
        "tags": ["Worship", "Fellowship", "Young Adults"],
    },
    {
        "zoneKey": "zone1",
        "name": "New Believers",
        "description": "A supportive group for those new to the faith, focusing on foundational teachings.",
        "leader": "Peter Chanda",
        "leaderContact": "peter.chanda@example.com",
        "location": "Kitwe Central",
        "coordinates": {"lat": -12.805, "lng": 28.208},
        "meetingDay": "Tuesday",
        "meetingTime": "6:00 PM",
        "capacity": "5-10 people",
        "tags": ["New Christians", "Bible Basics", "Mentoring"],
    },
]

FOUNDATION_CLASS_SESSIONS: List[dict] = [
    {
        "startDate": "2024-06-02T00:00:00+00:00",
        "endDate": "2024-06-23T00:00:00+00:00",
        "day": "Sundays",
        "time": "9:00 AM - 10:30 AM",
        "location": "Room 201",
        "capacity": 20,
        "enrolledCount": 5,
        "active": True,
    },
    {
        "startDate": "2024-07-07T00:00:00+00:00",
        "endDate": "2024-07-28T00:00:00+00:00",
        "day": "Sundays",
        "time": "9:00 AM - 10:30 AM",
        "location": "Room 201",
        "capacity": 20,
        "enrolledCount": 0,
        "active": True,
    },
    {
        "startDate": "2024-08-07T00:00:00+00:00",
        "endDate": "2024-08-28T00:00:00+00:00",
        "day": "Wednesdays",
        "time": "6:30 PM - 8:00 PM",
        "location": "Room 105",
        "capacity": 15,
        "enrolledCount": 0,
        "active": True,
    },
]


def _rows(client, table: str, columns: str = "*") -> list:
    return client.table(table).select(columns).execute().data or []


# -----------------------------------------------------
# Steps
# -----------------------------------------------------
def seed_users(client) -> int:
    if _rows(client, "users", "id"):
        logger.info("Users already exist, skipping seed")
        return 0

    now = utc_now_iso()
    users = [
        {
            "username": "admin",
            "hashedPassword": hash_password(settings.SEED_ADMIN_PASSWORD),
            "role": "admin",
            "name": "Church Administrator",
            "createdAt": now,
        },
        {
            "username": "pastor",
            "hashedPassword": hash_password(settings.SEED_EDITOR_PASSWORD),
            "role": "editor",
            "name": "Church Pastor",
            "createdAt": now,
        },
    ]
    client.table("users").insert(users).execute()
    logger.info(f"Seeded {len(users)} users")
    return len(users)


def seed_zones(client) -> Dict[str, str]:
    """
    Insert the zones when the table is empty.

    Returns the zone key → row id map. When zones already exist the map
    is rebuilt by matching names.
    """
    existing = _rows(client, "zones", "id, name")

    if existing:
        by_name = {zone["name"]: zone["id"] for zone in existing}
        zone_id_map = {
            zone["key"]: by_name[zone["name"]]
            for zone in ZONES
            if zone["name"] in by_name
        }
        logger.info("Zones already exist, skipping seed")
        return zone_id_map

    zone_id_map = {}
    now = utc_now_iso()
    for zone in ZONES:
        data = {k: v for k, v in zone.items() if k != "key"}
        data["createdAt"] = data["updatedAt"] = now
        row = client.table("zones").insert(data).execute().data[0]
        zone_id_map[zone["key"]] = row["id"]

    logger.info(f"Seeded {len(zone_id_map)} zones")
    return zone_id_map


def seed_cell_groups(client, zone_id_map: Dict[str, str]) -> int:
    if _rows(client, "cell_groups", "id"):
        logger.info("Cell groups already exist, skipping seed")
        return 0

    if not zone_id_map:
        logger.warning("Zone id map is empty; run seed_zones first")
        return 0

    now = utc_now_iso()
    created = 0
    for group in CELL_GROUPS:
        zone_id = zone_id_map.get(group["zoneKey"])
        if not zone_id:
            logger.warning(f"Zone {group['zoneKey']} not found; skipping cell group {group['name']}")
            continue

        data = {k: v for k, v in group.items() if k != "zoneKey"}
        data.update({"zoneId": zone_id, "createdAt": now, "updatedAt": now})
        client.table("cell_groups").insert(data).execute()
        created += 1

    logger.info(f"Seeded {created} cell groups")
    return created


def seed_foundation_class_sessions(client, force_refresh: bool = False) -> int:
    existing = _rows(client, "foundation_class_sessions", "id")

    if existing and not force_refresh:
        logger.info(f"Found {len(existing)} foundation class sessions, skipping seed")
        return 0

    if existing:
        logger.info(f"Deleting {len(existing)} foundation class sessions for refresh")
        for row in existing:
            client.table("foundation_class_sessions").delete().eq("id", row["id"]).execute()

    now = utc_now_iso()
    sessions = [dict(s, createdAt=now, updatedAt=now) for s in FOUNDATION_CLASS_SESSIONS]
    client.table("foundation_class_sessions").insert(sessions).execute()

    logger.info(f"Seeded {len(sessions)} foundation class sessions")
    return len(sessions)


def run(force_refresh: bool = False):
    """CLI / startup entry point."""
    client = get_supabase_client()
    if not client:
        raise RuntimeError("Supabase not configured")

    seed_users(client)
    zone_id_map = seed_zones(client)
    seed_cell_groups(client, zone_id_map)
    seed_foundation_class_sessions(client, force_refresh=force_refresh)


if __name__ == "__main__":
    run()
