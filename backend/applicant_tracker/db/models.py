# backend/applicant_tracker/db/models.py
"""
SQLAlchemy ORM models.
One table:
- Applicant: one job applicant with raw sub-scores and the derived
  overall_score written by the service on every create/update.
"""

from __future__ import annotations

from datetime import datetime
from typing import List

from sqlalchemy import JSON, Boolean, DateTime, Float, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from .session import Base


class Applicant(Base):
    __tablename__ = "applicants"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # identity / descriptive
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    position: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    years_experience: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    # JSON keeps insertion order and works on both PostgreSQL and SQLite
    skills: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    github_stars: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # traits
    can_exit_vim: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    knows_go: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    debugs_in_production: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # scores
    interview_score: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    cultural_fit_score: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    technical_score: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    overall_score: Mapped[float] = mapped_column(Float, nullable=False, default=0.0, index=True)

    status: Mapped[int] = mapped_column(Integer, nullable=False, default=0, index=True)

    # optional free text (NULL, never "")
    fun_fact: Mapped[str | None] = mapped_column(Text, nullable=True)
    availability: Mapped[str | None] = mapped_column(Text, nullable=True)
    salary_expectation: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    def __repr__(self) -> str:
        return f"<Applicant id={self.id} email={self.email} overall_score={self.overall_score} status={self.status}>"
