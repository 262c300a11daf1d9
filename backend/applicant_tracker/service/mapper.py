# backend/applicant_tracker/service/mapper.py
"""Stored row -> API representation."""

from __future__ import annotations

from typing import Any

from ..core.utils import as_utc, empty_if_none, round_half_away_from_zero
from ..schemas import ApplicantOut, ApplicantStatus


def to_external(record: Any) -> ApplicantOut:
    """
    Convert a stored applicant (ORM row or any object with the same
    attributes) into ApplicantOut.

    Scores are rounded for display only; the stored values keep full
    precision. NULL optional text becomes "". Unknown status codes raise
    ValueError.
    """
    if record is None:
        raise ValueError("cannot map a missing applicant record")

    return ApplicantOut(
        id=record.id,
        name=record.name,
        email=record.email,
        position=record.position,
        years_experience=record.years_experience,
        skills=list(record.skills or []),
        github_stars=record.github_stars,
        can_exit_vim=record.can_exit_vim,
        knows_go=record.knows_go,
        debugs_in_production=record.debugs_in_production,
        interview_score=round_half_away_from_zero(record.interview_score),
        cultural_fit_score=round_half_away_from_zero(record.cultural_fit_score),
        technical_score=round_half_away_from_zero(record.technical_score),
        overall_score=round_half_away_from_zero(record.overall_score),
        status=ApplicantStatus(record.status),
        fun_fact=empty_if_none(record.fun_fact),
        availability=empty_if_none(record.availability),
        salary_expectation=empty_if_none(record.salary_expectation),
        created_at=as_utc(record.created_at),
        updated_at=as_utc(record.updated_at),
    )
