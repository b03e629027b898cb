# tests/conftest.py

"""
Pytest configuration and shared fixtures for testing.

`fake_db` swaps Supabase for an in-memory store that understands the
subset of the PostgREST builder the API uses: select (with `alias:fkId(*)`
embeds), eq, order, limit, insert, update, delete.
"""

import copy
import re
import uuid

import pytest
from fastapi.testclient import TestClient
from unittest.mock import patch
from typing import Generator

from main import create_app
from core.rate_limiter import reset_rate_limits
from core.security import create_access_token


# FK column → referenced table
FOREIGN_KEYS = {
    "imageId": "media",
    "coverImageId": "media",
    "leaderImageId": "media",
    "zoneId": "zones",
    "eventId": "events",
    "cellGroupId": "cell_groups",
}

EMBED_PATTERN = re.compile(r"^(\w+):(\w+)\((.*)\)$")


def _split_columns(columns: str) -> list:
    """Split a select string on top-level commas."""
    parts, depth, current = [], 0, ""
    for ch in columns:
        if ch == "," and depth == 0:
            parts.append(current.strip())
            current = ""
            continue
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
        current += ch
    if current.strip():
        parts.append(current.strip())
    return parts


class FakeResponse:
    def __init__(self, data):
        self.data = data


class FakeQuery:
    def __init__(self, db: "FakeSupabase", table: str):
        self.db = db
        self.table_name = table
        self.action = "select"
        self.columns = "*"
        self.payload = None
        self.filters = []
        self.order_by = None
        self.limit_to = None

    # builder ------------------------------------------------
    def select(self, columns: str = "*"):
        self.action, self.columns = "select", columns
        return self

    def insert(self, data, returning: str = "representation"):
        self.action, self.payload = "insert", data
        return self

    def update(self, data, returning: str = "representation"):
        self.action, self.payload = "update", data
        return self

    def delete(self):
        self.action = "delete"
        return self

    def eq(self, key, value):
        self.filters.append((key, value))
        return self

    def order(self, column, desc: bool = False):
        self.order_by = (column, desc)
        return self

    def limit(self, n: int):
        self.limit_to = n
        return self

    # execution ----------------------------------------------
    def _matches(self, row: dict) -> bool:
        return all(row.get(k) == v for k, v in self.filters)

    def execute(self) -> FakeResponse:
        self.db.calls.append((self.table_name, self.action))
        if self.db.fail_on and self.table_name in self.db.fail_on:
            raise Exception(self.db.fail_on[self.table_name])

        rows = self.db.tables.setdefault(self.table_name, [])

        if self.action == "insert":
            items = self.payload if isinstance(self.payload, list) else [self.payload]
            created = []
            for item in items:
                row = copy.deepcopy(item)
                row.setdefault("id", str(uuid.uuid4()))
                rows.append(row)
                created.append(copy.deepcopy(row))
            return FakeResponse(created)

        matched = [row for row in rows if self._matches(row)]

        if self.action == "update":
            for row in matched:
                row.update(copy.deepcopy(self.payload))
            return FakeResponse([copy.deepcopy(r) for r in matched])

        if self.action == "delete":
            self.db.tables[self.table_name] = [r for r in rows if not self._matches(r)]
            return FakeResponse([copy.deepcopy(r) for r in matched])

        if self.order_by:
            column, desc = self.order_by
            present = [r for r in matched if r.get(column) is not None]
            missing = [r for r in matched if r.get(column) is None]
            matched = sorted(present, key=lambda r: r[column], reverse=desc) + missing
        if self.limit_to is not None:
            matched = matched[: self.limit_to]

        return FakeResponse([self.db.project(r, self.columns) for r in matched])


class FakeSupabase:
    def __init__(self):
        self.tables = {}
        self.calls = []
        self.fail_on = {}

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def seed(self, table: str, *rows: dict) -> list:
        created = []
        for row in rows:
            row = copy.deepcopy(row)
            row.setdefault("id", str(uuid.uuid4()))
            self.tables.setdefault(table, []).append(row)
            created.append(row)
        return created

    def project(self, row: dict, columns: str) -> dict:
        result = {}
        for part in _split_columns(columns):
            if part == "*":
                result.update(copy.deepcopy(row))
                continue
            embed = EMBED_PATTERN.match(part)
            if embed:
                alias, fk, inner = embed.groups()
                target_id = row.get(fk)
                target = next(
                    (r for r in self.tables.get(FOREIGN_KEYS[fk], []) if r.get("id") == target_id),
                    None,
                )
                result[alias] = self.project(target, inner) if target else None
                continue
            result[part] = copy.deepcopy(row.get(part))
        return result


@pytest.fixture
def fake_db() -> Generator[FakeSupabase, None, None]:
    db = FakeSupabase()
    with patch("core.supabase_helpers.get_supabase_client", return_value=db), \
            patch("core.supabase_client.get_supabase_client", return_value=db):
        yield db


@pytest.fixture(scope="function")
def app():
    """Create a test FastAPI application instance."""
    return create_app()


@pytest.fixture(scope="function")
def client(app, fake_db) -> Generator[TestClient, None, None]:
    """Create a test client backed by the in-memory database."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_headers():
    token = create_access_token({"id": "admin-1", "username": "admin", "role": "admin", "name": "Church Administrator"})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def editor_headers():
    token = create_access_token({"id": "editor-1", "username": "pastor", "role": "editor", "name": "Church Pastor"})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers():
    token = create_access_token({"id": "user-1", "username": "member", "role": "user"})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture(autouse=True)
def reset_limits():
    """Reset the in-memory rate limiter before each test."""
    reset_rate_limits()
    yield
    reset_rate_limits()


@pytest.fixture(autouse=True)
def no_smtp():
    """Never touch a real mail server; tests opt in by patching send_email."""
    with patch("core.email_utils.send_email", return_value=False) as mock_send:
        yield mock_send
