# backend/applicant_tracker/schemas.py
"""
Pydantic models for requests and responses, plus the status enumeration.

Request models only coerce types; every field has a zero-value default so
that missing fields reach the validator and get its specific message
("name is required", ...) instead of a generic schema error.
"""

from __future__ import annotations

from datetime import datetime
from enum import IntEnum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ApplicantStatus(IntEnum):
    UNSPECIFIED = 0
    APPLIED = 1
    REVIEWING = 2
    INTERVIEWED = 3
    HIRED = 4
    REJECTED = 5
    OBVIOUSLY_THE_BEST = 6  # seed data only


INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


# --- Requests ---------------------------------------------------------------

class ApplicantIn(BaseModel):
    """Body for create and (whole-record) update."""

    name: str = ""
    email: str = ""
    position: str = ""
    # int32 range; the sign check is left to the validator for its message
    years_experience: int = Field(default=0, ge=INT32_MIN, le=INT32_MAX)
    skills: List[str] = Field(default_factory=list)
    github_stars: int = Field(default=0, ge=INT32_MIN, le=INT32_MAX)
    can_exit_vim: bool = False
    knows_go: bool = False
    debugs_in_production: bool = False
    interview_score: float = 0.0
    cultural_fit_score: float = 0.0
    technical_score: float = 0.0
    status: ApplicantStatus = ApplicantStatus.UNSPECIFIED
    fun_fact: Optional[str] = None
    availability: Optional[str] = None
    salary_expectation: Optional[str] = None


# --- Responses --------------------------------------------------------------

class ApplicantOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
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
    status: ApplicantStatus
    fun_fact: str = ""
    availability: str = ""
    salary_expectation: str = ""
    created_at: datetime
    updated_at: datetime


class ListApplicantsResponse(BaseModel):
    applicants: List[ApplicantOut]
    total_count: int
    limit: int
    offset: int


class DeleteApplicantResponse(BaseModel):
    success: bool


class BestApplicantResponse(BaseModel):
    applicant: ApplicantOut
    reason: str


class ErrorResponse(BaseModel):
    code: str
    detail: str


__all__ = [
    "ApplicantStatus",
    "ApplicantIn",
    "ApplicantOut",
    "ListApplicantsResponse",
    "DeleteApplicantResponse",
    "BestApplicantResponse",
    "ErrorResponse",
]
