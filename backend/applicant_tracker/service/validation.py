# backend/applicant_tracker/service/validation.py
"""
Field validation shared by create and update. Rules run in a fixed order and
the first failure wins, so a payload that is wrong in two ways reports only
the earlier rule.
"""

from __future__ import annotations

from email_validator import EmailNotValidError, validate_email

from ..core.errors import ValidationError

NAME_MIN_LEN = 2
NAME_MAX_LEN = 255
POSITION_MIN_LEN = 2
SCORE_MIN = 0.0
SCORE_MAX = 100.0


def is_valid_email(address: str) -> bool:
    """Syntax-only check: no DNS lookups, dotless and special-use domains allowed."""
    try:
        validate_email(address, check_deliverability=False, globally_deliverable=False)
    except EmailNotValidError:
        return False
    return True


def _check_score(field: str, value: float) -> None:
    # written as a range test so NaN is rejected too
    if not SCORE_MIN <= value <= SCORE_MAX:
        raise ValidationError(f"{field} must be between 0 and 100")


def validate_applicant(
    name: str,
    email: str,
    position: str,
    years_experience: int,
    github_stars: int,
    interview_score: float,
    cultural_fit_score: float,
    technical_score: float,
    is_update: bool = False,
    applicant_id: int = 0,
) -> None:
    """Raise ValidationError with the first violated rule; return None if valid."""
    if is_update and applicant_id <= 0:
        raise ValidationError("id must be positive")

    # lengths are measured on the raw value, only emptiness is trimmed
    if not name.strip():
        raise ValidationError("name is required")
    if len(name) < NAME_MIN_LEN:
        raise ValidationError("name must be at least 2 characters")
    if len(name) > NAME_MAX_LEN:
        raise ValidationError("name must be at most 255 characters")

    if not email.strip():
        raise ValidationError("email is required")
    if not is_valid_email(email):
        raise ValidationError("email must be a valid email address")

    if not position.strip():
        raise ValidationError("position is required")
    if len(position) < POSITION_MIN_LEN:
        raise ValidationError("position must be at least 2 characters")

    if years_experience < 0:
        raise ValidationError("years_experience must be positive")
    if github_stars < 0:
        raise ValidationError("github_stars must be positive")

    _check_score("interview_score", interview_score)
    _check_score("cultural_fit_score", cultural_fit_score)
    _check_score("technical_score", technical_score)


__all__ = ["validate_applicant", "is_valid_email"]
