"""
Pytest configuration and shared fixtures.
"""

from datetime import datetime, timezone
from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from applicant_tracker.core.config import Settings
from applicant_tracker.core.errors import PersistenceError, PersistenceErrorKind
from applicant_tracker.db.crud import ApplicantRepository
from applicant_tracker.db.session import create_db_engine, ensure_tables, make_session_factory
from applicant_tracker.main import create_app
from applicant_tracker.schemas import ApplicantIn, ApplicantStatus
from applicant_tracker.service.applicants import ApplicantService


class FakeStore:
    """In-memory ApplicantStore with per-operation failure injection."""

    def __init__(self) -> None:
        self.rows: Dict[int, SimpleNamespace] = {}
        self.next_id = 1
        self.fail: Dict[str, PersistenceError] = {}
        self.calls: List[str] = []
        self.last_create: Optional[Dict[str, Any]] = None
        self.last_update: Optional[Dict[str, Any]] = None
        self.last_list: Optional[Dict[str, Any]] = None
        self.last_count: Optional[Dict[str, Any]] = None

    def _enter(self, op: str) -> None:
        self.calls.append(op)
        err = self.fail.get(op)
        if err is not None:
            raise err

    def _email_taken(self, email: str, exclude_id: int = 0) -> bool:
        return any(r.email == email and r.id != exclude_id for r in self.rows.values())

    @staticmethod
    def _matches(row: SimpleNamespace, filters: Optional[Dict[str, Any]]) -> bool:
        filters = filters or {}
        if filters.get("position") and row.position != filters["position"]:
            return False
        if filters.get("status") and row.status != filters["status"]:
            return False
        if (filters.get("min_score") or 0) > 0 and row.overall_score < filters["min_score"]:
            return False
        return True

    def create(self, fields):
        self._enter("create")
        self.last_create = dict(fields)
        if self._email_taken(fields["email"]):
            raise PersistenceError(PersistenceErrorKind.UNIQUE_VIOLATION, "duplicate email")
        now = datetime.now(timezone.utc)
        row = SimpleNamespace(id=self.next_id, created_at=now, updated_at=now, **fields)
        self.rows[row.id] = row
        self.next_id += 1
        return row

    def get_by_id(self, applicant_id):
        self._enter("get_by_id")
        return self.rows.get(applicant_id)

    def update(self, applicant_id, fields):
        self._enter("update")
        self.last_update = dict(fields)
        row = self.rows.get(applicant_id)
        if row is None:
            return None
        if self._email_taken(fields["email"], exclude_id=applicant_id):
            raise PersistenceError(PersistenceErrorKind.UNIQUE_VIOLATION, "duplicate email")
        for k, v in fields.items():
            setattr(row, k, v)
        row.updated_at = datetime.now(timezone.utc)
        return row

    def delete(self, applicant_id):
        self._enter("delete")
        return self.rows.pop(applicant_id, None) is not None

    def delete_all(self):
        self._enter("delete_all")
        n = len(self.rows)
        self.rows.clear()
        return n

    def list(self, filters, limit, offset):
        self._enter("list")
        self.last_list = {"filters": dict(filters or {}), "limit": limit, "offset": offset}
        rows = [r for r in self.rows.values() if self._matches(r, filters)]
        rows.sort(key=lambda r: (-r.overall_score, r.id))
        return rows[offset:offset + limit]

    def count(self, filters):
        self._enter("count")
        self.last_count = {"filters": dict(filters or {})}
        return sum(1 for r in self.rows.values() if self._matches(r, filters))

    def get_best(self):
        self._enter("get_best")
        rows = sorted(self.rows.values(), key=lambda r: (-r.overall_score, r.id))
        return rows[0] if rows else None


def make_applicant(**overrides: Any) -> ApplicantIn:
    data: Dict[str, Any] = {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "position": "Senior Developer",
        "years_experience": 5,
        "skills": ["Go", "Kubernetes"],
        "github_stars": 200,
        "can_exit_vim": True,
        "knows_go": True,
        "debugs_in_production": False,
        "interview_score": 85.0,
        "cultural_fit_score": 90.0,
        "technical_score": 88.0,
        "status": ApplicantStatus.APPLIED,
    }
    data.update(overrides)
    return ApplicantIn(**data)


@pytest.fixture
def fake_store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def service(fake_store) -> ApplicantService:
    return ApplicantService(fake_store)


@pytest.fixture
def engine():
    """In-memory SQLite engine with tables created."""
    eng = create_db_engine("sqlite://")
    ensure_tables(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def repo(engine) -> ApplicantRepository:
    return ApplicantRepository(make_session_factory(engine))


@pytest.fixture
def settings() -> Settings:
    return Settings(database_url="sqlite://", cors_origins_raw="http://localhost:3000")


@pytest.fixture
def client(settings, engine):
    app = create_app(settings, engine=engine)
    with TestClient(app) as c:
        yield c
