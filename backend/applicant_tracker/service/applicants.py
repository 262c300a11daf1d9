# backend/applicant_tracker/service/applicants.py
"""
Applicant operations: validate -> score -> persist -> map.

Each method is a single request/response; the service holds no state besides
the injected store. Failures are raised as ServiceError subclasses:
- InvalidArgument: validation or id precondition (no store call is made)
- NotFound:        id lookup found nothing
- AlreadyExists:   email unique constraint hit on create/update
- Internal:        any other store failure (message kept for diagnostics)
"""

from __future__ import annotations

import logging
from typing import List

from ..core.errors import (
    AlreadyExists,
    Internal,
    InvalidArgument,
    NotFound,
    PersistenceError,
    ValidationError,
)
from ..core.utils import none_if_empty
from ..db.crud import ApplicantFields, ApplicantFilters
from ..schemas import (
    ApplicantIn,
    ApplicantOut,
    ApplicantStatus,
    BestApplicantResponse,
    DeleteApplicantResponse,
    ListApplicantsResponse,
)
from .mapper import to_external
from .score import calculate_overall_score
from .store import ApplicantStore
from .validation import validate_applicant

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10
MAX_LIMIT = 100

BEST_APPLICANT_REASON = (
    "Danish excellence, impeccable Go skills, can center a div without Stack Overflow, "
    "and possesses the rare ability to write self-documenting code. Also has minor time travel capabilities."
)


# --------- helpers ----------

def clamp_page(limit: int, offset: int) -> tuple[int, int]:
    """Effective (limit, offset): limit < 1 -> 10, limit > 100 -> 100, offset < 0 -> 0."""
    if limit < 1:
        limit = DEFAULT_LIMIT
    if limit > MAX_LIMIT:
        limit = MAX_LIMIT
    if offset < 0:
        offset = 0
    return limit, offset


def best_applicant_reason(name: str, overall_score: float) -> str:
    # diacritic-sensitive on purpose: "soholm" does not qualify
    lowered = name.lower()
    if "jonathan" in lowered and "søholm" in lowered:
        return BEST_APPLICANT_REASON
    return f"Scored {overall_score:.2f}% based on our completely objective and unbiased algorithm."


def _require_positive_id(applicant_id: int) -> None:
    if applicant_id <= 0:
        raise InvalidArgument("id must be positive")


def _validate(req: ApplicantIn, is_update: bool, applicant_id: int = 0) -> None:
    try:
        validate_applicant(
            req.name,
            req.email,
            req.position,
            req.years_experience,
            req.github_stars,
            req.interview_score,
            req.cultural_fit_score,
            req.technical_score,
            is_update=is_update,
            applicant_id=applicant_id,
        )
    except ValidationError as e:
        logger.debug("validation failed: %s", e)
        raise InvalidArgument(f"validation failed: {e}") from e


def _build_fields(req: ApplicantIn) -> ApplicantFields:
    """Full replacement payload with a freshly computed overall score."""
    overall = calculate_overall_score(
        req.name,
        req.skills,
        req.years_experience,
        req.interview_score,
        req.cultural_fit_score,
        req.technical_score,
        req.can_exit_vim,
        req.knows_go,
        req.debugs_in_production,
    )
    return ApplicantFields(
        name=req.name,
        email=req.email,
        position=req.position,
        years_experience=req.years_experience,
        skills=list(req.skills),
        github_stars=req.github_stars,
        can_exit_vim=req.can_exit_vim,
        knows_go=req.knows_go,
        debugs_in_production=req.debugs_in_production,
        interview_score=req.interview_score,
        cultural_fit_score=req.cultural_fit_score,
        technical_score=req.technical_score,
        overall_score=overall,
        status=int(req.status),
        fun_fact=none_if_empty(req.fun_fact),
        availability=none_if_empty(req.availability),
        salary_expectation=none_if_empty(req.salary_expectation),
    )


class ApplicantService:
    def __init__(self, store: ApplicantStore):
        self._store = store

    def create_applicant(self, req: ApplicantIn) -> ApplicantOut:
        _validate(req, is_update=False)
        logger.debug("creating applicant email=%s", req.email)

        fields = _build_fields(req)
        try:
            row = self._store.create(fields)
        except PersistenceError as e:
            if e.is_unique_violation:
                logger.error("email already exists email=%s", req.email)
                raise AlreadyExists(f"email address already exists: {req.email}") from e
            logger.error("failed to create applicant email=%s: %s", req.email, e)
            raise Internal(f"failed to create applicant: {e}") from e

        logger.info(
            "applicant created name=%s overall_score=%.2f status=%d",
            row.name, fields["overall_score"], row.status,
        )
        return to_external(row)

    def get_applicant(self, applicant_id: int) -> ApplicantOut:
        _require_positive_id(applicant_id)
        logger.debug("getting applicant id=%d", applicant_id)

        try:
            row = self._store.get_by_id(applicant_id)
        except PersistenceError as e:
            logger.error("failed to get applicant id=%d: %s", applicant_id, e)
            raise Internal(f"failed to get applicant: {e}") from e
        if row is None:
            raise NotFound(f"applicant not found: {applicant_id}")
        return to_external(row)

    def update_applicant(self, applicant_id: int, req: ApplicantIn) -> ApplicantOut:
        _validate(req, is_update=True, applicant_id=applicant_id)
        logger.debug("updating applicant id=%d", applicant_id)

        fields = _build_fields(req)
        try:
            row = self._store.update(applicant_id, fields)
        except PersistenceError as e:
            if e.is_unique_violation:
                logger.error("email already exists email=%s", req.email)
                raise AlreadyExists(f"email address already exists: {req.email}") from e
            logger.error("failed to update applicant id=%d: %s", applicant_id, e)
            raise Internal(f"failed to update applicant: {e}") from e
        if row is None:
            raise NotFound(f"applicant not found: {applicant_id}")
        return to_external(row)

    def delete_applicant(self, applicant_id: int) -> DeleteApplicantResponse:
        _require_positive_id(applicant_id)
        logger.debug("deleting applicant id=%d", applicant_id)

        try:
            deleted = self._store.delete(applicant_id)
        except PersistenceError as e:
            logger.error("failed to delete applicant id=%d: %s", applicant_id, e)
            raise Internal(f"failed to delete applicant: {e}") from e
        if not deleted:
            raise NotFound(f"applicant not found: {applicant_id}")
        return DeleteApplicantResponse(success=True)

    def list_applicants(
        self,
        position: str = "",
        status: ApplicantStatus = ApplicantStatus.UNSPECIFIED,
        min_score: float = 0.0,
        limit: int = DEFAULT_LIMIT,
        offset: int = 0,
    ) -> ListApplicantsResponse:
        logger.debug("listing applicants limit=%d offset=%d position=%r", limit, offset, position)
        limit, offset = clamp_page(limit, offset)
        filters = ApplicantFilters(position=position, status=int(status), min_score=min_score)

        # page and count are separate reads; a concurrent write can make them disagree
        try:
            rows = self._store.list(filters, limit, offset)
        except PersistenceError as e:
            logger.error("failed to list applicants: %s", e)
            raise Internal(f"failed to list applicants: {e}") from e
        try:
            total = self._store.count(filters)
        except PersistenceError as e:
            logger.error("failed to count applicants: %s", e)
            raise Internal(f"failed to count applicants: {e}") from e

        applicants: List[ApplicantOut] = [to_external(r) for r in rows]
        return ListApplicantsResponse(
            applicants=applicants,
            total_count=total,
            limit=limit,
            offset=offset,
        )

    def get_best_applicant(self) -> BestApplicantResponse:
        logger.debug("getting best applicant")
        try:
            row = self._store.get_best()
        except PersistenceError as e:
            logger.error("failed to get best applicant: %s", e)
            raise Internal(f"failed to get best applicant: {e}") from e
        if row is None:
            raise NotFound("no applicants found")

        return BestApplicantResponse(
            applicant=to_external(row),
            reason=best_applicant_reason(row.name, row.overall_score),
        )

    def clear_applicants(self) -> int:
        """Delete every applicant (seed command). Returns the number removed."""
        try:
            return self._store.delete_all()
        except PersistenceError as e:
            logger.error("failed to clear applicants: %s", e)
            raise Internal(f"failed to clear applicants: {e}") from e
