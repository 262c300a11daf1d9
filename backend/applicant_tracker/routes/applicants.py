# backend/applicant_tracker/routes/applicants.py
from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request

from ..schemas import (
    ApplicantIn,
    ApplicantOut,
    ApplicantStatus,
    BestApplicantResponse,
    DeleteApplicantResponse,
    ErrorResponse,
    ListApplicantsResponse,
)
from ..service.applicants import DEFAULT_LIMIT, ApplicantService

router = APIRouter(prefix="/applicants", tags=["applicants"])

_ERRORS = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def get_service(request: Request) -> ApplicantService:
    return request.app.state.applicant_service


@router.post("", response_model=ApplicantOut, status_code=201, responses=_ERRORS)
def create_applicant(body: ApplicantIn, service: ApplicantService = Depends(get_service)):
    return service.create_applicant(body)


@router.get("", response_model=ListApplicantsResponse, responses=_ERRORS)
def list_applicants(
    position: str = "",
    status: ApplicantStatus = ApplicantStatus.UNSPECIFIED,
    min_score: float = 0.0,
    limit: int = Query(default=DEFAULT_LIMIT, description="1-100; out-of-range values are clamped"),
    offset: int = Query(default=0, description="negative values are treated as 0"),
    service: ApplicantService = Depends(get_service),
):
    return service.list_applicants(
        position=position,
        status=status,
        min_score=min_score,
        limit=limit,
        offset=offset,
    )


# declared before /{applicant_id} so "best" is never parsed as an id
@router.get("/best", response_model=BestApplicantResponse, responses=_ERRORS)
def get_best_applicant(service: ApplicantService = Depends(get_service)):
    """The highest overall score, with a short justification."""
    return service.get_best_applicant()


@router.get("/{applicant_id}", response_model=ApplicantOut, responses=_ERRORS)
def get_applicant(applicant_id: int, service: ApplicantService = Depends(get_service)):
    return service.get_applicant(applicant_id)


@router.put("/{applicant_id}", response_model=ApplicantOut, responses=_ERRORS)
def update_applicant(applicant_id: int, body: ApplicantIn, service: ApplicantService = Depends(get_service)):
    """Whole-record replace; the overall score is recomputed."""
    return service.update_applicant(applicant_id, body)


@router.delete("/{applicant_id}", response_model=DeleteApplicantResponse, responses=_ERRORS)
def delete_applicant(applicant_id: int, service: ApplicantService = Depends(get_service)):
    return service.delete_applicant(applicant_id)
