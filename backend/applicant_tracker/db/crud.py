# backend/applicant_tracker/db/crud.py
"""
SQLAlchemy implementation of the applicant store.
Usage:
    engine = create_db_engine(url)
    ensure_tables(engine)
    repo = ApplicantRepository(make_session_factory(engine))
    row = repo.create(fields)

Every public method opens its own session (one unit of work per call) and
raises PersistenceError, already classified, on any database failure.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, TypedDict

from sqlalchemy import Select, delete, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from ..core.errors import PersistenceError, PersistenceErrorKind
from ..core.utils import now_utc
from .models import Applicant
from .session import session_scope

logger = logging.getLogger(__name__)


class ApplicantFields(TypedDict):
    """Full set of writable columns; create and update both take all of them."""
    name: str
    email: str
    position: str
    years_experience: int
    skills: List[str]
    github_stars: int
    can_exit_vim: bool
    knows_go: bool
    debugs_in_production: bool
    interview_score: float
    cultural_fit_score: float
    technical_score: float
    overall_score: float
    status: int
    fun_fact: Optional[str]
    availability: Optional[str]
    salary_expectation: Optional[str]


class ApplicantFilters(TypedDict, total=False):
    position: str
    status: int
    min_score: float


# ----------------- Error classification -----------------

def classify_error(exc: Exception) -> PersistenceError:
    """
    Map a driver failure to a PersistenceError. Unique violations on the email
    column (PostgreSQL SQLSTATE 23505 / SQLite "UNIQUE constraint failed") get
    their own kind; everything else is OTHER.
    """
    message = str(getattr(exc, "orig", None) or exc)
    if isinstance(exc, IntegrityError):
        orig = exc.orig
        sqlstate = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
        lowered = message.lower()
        is_unique = sqlstate == "23505" or "unique" in lowered or "duplicate key" in lowered
        if is_unique and "email" in lowered:
            return PersistenceError(PersistenceErrorKind.UNIQUE_VIOLATION, message)
    return PersistenceError(PersistenceErrorKind.OTHER, message)


def _apply_filters(q: Select, filters: Optional[ApplicantFilters]) -> Select:
    filters = filters or {}
    position = filters.get("position") or ""
    status = int(filters.get("status") or 0)
    min_score = float(filters.get("min_score") or 0.0)

    if position:
        q = q.where(Applicant.position == position)
    if status:
        q = q.where(Applicant.status == status)
    if min_score > 0:
        q = q.where(Applicant.overall_score >= min_score)
    return q


class ApplicantRepository:
    """Applicant persistence on top of a sessionmaker."""

    def __init__(self, session_factory: sessionmaker[Session]):
        self._session_factory = session_factory

    def _run(self, action: str, fn):
        try:
            with session_scope(self._session_factory) as s:
                return fn(s)
        # sqlite3 raises OverflowError for out-of-range ints before SQLAlchemy wraps anything
        except (SQLAlchemyError, OverflowError) as e:
            err = classify_error(e)
            logger.debug("%s failed (%s): %s", action, err.kind.value, err.message)
            raise err from e

    # ----------------- Inserts / Updates -----------------

    def create(self, fields: ApplicantFields) -> Applicant:
        def _create(s: Session) -> Applicant:
            ts = now_utc()
            row = Applicant(**_copy_fields(fields), created_at=ts, updated_at=ts)
            s.add(row)
            s.flush()
            s.refresh(row)
            return row

        return self._run("create applicant", _create)

    def update(self, applicant_id: int, fields: ApplicantFields) -> Optional[Applicant]:
        """Whole-record replace. Returns None when the id does not exist."""
        def _update(s: Session) -> Optional[Applicant]:
            row = s.get(Applicant, applicant_id)
            if row is None:
                return None
            for key, value in _copy_fields(fields).items():
                setattr(row, key, value)
            row.updated_at = now_utc()
            s.flush()
            s.refresh(row)
            return row

        return self._run("update applicant", _update)

    def delete(self, applicant_id: int) -> bool:
        """Hard delete. Returns False when nothing matched the id."""
        def _delete(s: Session) -> bool:
            result = s.execute(delete(Applicant).where(Applicant.id == applicant_id))
            return (result.rowcount or 0) > 0

        return self._run("delete applicant", _delete)

    def delete_all(self) -> int:
        return self._run("delete all applicants", lambda s: s.execute(delete(Applicant)).rowcount or 0)

    # ----------------- Queries -----------------

    def get_by_id(self, applicant_id: int) -> Optional[Applicant]:
        return self._run("get applicant", lambda s: s.get(Applicant, applicant_id))

    def list(self, filters: Optional[ApplicantFilters], limit: int, offset: int) -> List[Applicant]:
        q = (
            _apply_filters(select(Applicant), filters)
            .order_by(Applicant.overall_score.desc(), Applicant.id.asc())
            .limit(limit)
            .offset(offset)
        )
        return self._run("list applicants", lambda s: list(s.execute(q).scalars().all()))

    def count(self, filters: Optional[ApplicantFilters]) -> int:
        q = _apply_filters(select(func.count()).select_from(Applicant), filters)
        return self._run("count applicants", lambda s: int(s.execute(q).scalar_one()))

    def get_best(self) -> Optional[Applicant]:
        q = select(Applicant).order_by(Applicant.overall_score.desc(), Applicant.id.asc()).limit(1)
        return self._run("get best applicant", lambda s: s.execute(q).scalars().first())


def _copy_fields(fields: ApplicantFields) -> Dict[str, Any]:
    out: Dict[str, Any] = dict(fields)
    out["skills"] = list(fields.get("skills") or [])
    return out


__all__ = [
    "ApplicantRepository",
    "ApplicantFields",
    "ApplicantFilters",
    "classify_error",
]
