# tests/test_seed_data.py

"""
Tests for the seed job.
"""

from unittest.mock import patch

import pytest

from core.security import verify_password
from jobs import seed_data


def test_run_seeds_everything(fake_db):
    with patch("jobs.seed_data.get_supabase_client", return_value=fake_db):
        seed_data.run()

    users = {u["username"]: u for u in fake_db.tables["users"]}
    assert users["admin"]["role"] == "admin"
    assert users["pastor"]["role"] == "editor"
    assert verify_password("admin123", users["admin"]["hashedPassword"])

    assert len(fake_db.tables["zones"]) == 3
    assert all("key" not in z for z in fake_db.tables["zones"])

    central = next(z for z in fake_db.tables["zones"] if z["name"] == "Central Zone")
    groups = fake_db.tables["cell_groups"]
    assert len(groups) == 3
    assert {g["zoneId"] for g in groups} == {central["id"]}

    assert len(fake_db.tables["foundation_class_sessions"]) == 3


def test_run_is_idempotent(fake_db):
    with patch("jobs.seed_data.get_supabase_client", return_value=fake_db):
        seed_data.run()
        seed_data.run()

    assert len(fake_db.tables["users"]) == 2
    assert len(fake_db.tables["zones"]) == 3
    assert len(fake_db.tables["cell_groups"]) == 3
    assert len(fake_db.tables["foundation_class_sessions"]) == 3


def test_zone_map_rebuilt_from_existing_rows(fake_db):
    central = fake_db.seed("zones", {"name": "Central Zone"})[0]

    assert seed_data.seed_zones(fake_db) == {"zone1": central["id"]}
    assert seed_data.seed_cell_groups(fake_db, {"zone1": central["id"]}) == 3


def test_cell_groups_need_zone_map(fake_db):
    assert seed_data.seed_cell_groups(fake_db, {}) == 0
    assert "cell_groups" not in fake_db.tables or fake_db.tables["cell_groups"] == []


def test_force_refresh_replaces_sessions(fake_db):
    fake_db.seed("foundation_class_sessions", {"day": "Mondays"})

    assert seed_data.seed_foundation_class_sessions(fake_db) == 0
    assert seed_data.seed_foundation_class_sessions(fake_db, force_refresh=True) == 3

    days = [s["day"] for s in fake_db.tables["foundation_class_sessions"]]
    assert "Mondays" not in days
    assert len(days) == 3


def test_run_without_supabase():
    with patch("jobs.seed_data.get_supabase_client", return_value=None):
        with pytest.raises(RuntimeError):
            seed_data.run()
