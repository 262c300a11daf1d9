# backend/applicant_tracker/seed.py
"""
Seed the database with a fixed set of applicants.

Usage:
  applicant-tracker-seed [--clear] [--create-tables] [--verbose]
  python -m applicant_tracker.seed --clear

Applicants go through ApplicantService, so they are validated and scored
exactly like API traffic. A failing applicant is logged and skipped.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .core.config import load_settings
from .core.errors import ConfigError, ServiceError
from .core.log import configure_logging
from .db.crud import ApplicantRepository
from .db.session import create_db_engine, ensure_tables, make_session_factory
from .schemas import ApplicantIn, ApplicantStatus
from .service.applicants import ApplicantService

logger = logging.getLogger(__name__)

SEED_APPLICANTS: List[ApplicantIn] = [
    ApplicantIn(
        name="Jonathan Søholm-Boesen",
        email="jonathan@infobits.io",
        position="Senior Golang Developer",
        years_experience=10,
        skills=["Go", "gRPC", "Kubernetes", "Being Modest", "Microservices", "Time Travel (minor)"],
        github_stars=1337,
        can_exit_vim=True,
        knows_go=True,
        debugs_in_production=False,
        interview_score=99.8,
        cultural_fit_score=99.9,
        technical_score=99.7,
        status=ApplicantStatus.OBVIOUSLY_THE_BEST,
        fun_fact="Can center a div without Stack Overflow and writes self-documenting code",
        availability="Immediate (time travel helps)",
        salary_expectation="Reasonable (but worth every penny)",
    ),
    ApplicantIn(
        name="Alice Johnson",
        email="alice@example.com",
        position="Senior Golang Developer",
        years_experience=5,
        skills=["Go", "Python", "Docker", "AWS"],
        github_stars=234,
        can_exit_vim=True,
        knows_go=True,
        debugs_in_production=True,
        interview_score=82.5,
        cultural_fit_score=85.0,
        technical_score=80.0,
        status=ApplicantStatus.REVIEWING,
        fun_fact="Prefers tabs over spaces",
        availability="2 weeks notice",
        salary_expectation="Market rate",
    ),
    ApplicantIn(
        name="Bob Smith",
        email="bob@example.com",
        position="Senior Golang Developer",
        years_experience=10,
        skills=["Java", "Spring Boot", "Hibernate", "XML"],
        github_stars=45,
        can_exit_vim=False,
        knows_go=False,
        debugs_in_production=True,
        interview_score=65.0,
        cultural_fit_score=70.0,
        technical_score=60.0,
        status=ApplicantStatus.APPLIED,
        fun_fact="Thinks Go is just Java without semicolons",
        availability="1 month",
        salary_expectation="Java rates + 20%",
    ),
    ApplicantIn(
        name="Charlie Davis",
        email="charlie@example.com",
        position="Senior Golang Developer",
        years_experience=6,
        skills=["Go", "Rust", "React", "PostgreSQL"],
        github_stars=567,
        can_exit_vim=True,
        knows_go=True,
        debugs_in_production=False,
        interview_score=88.0,
        cultural_fit_score=86.0,
        technical_score=89.0,
        status=ApplicantStatus.INTERVIEWED,
        fun_fact="Uses both tabs AND spaces inconsistently",
        availability="3 weeks",
        salary_expectation="Negotiable",
    ),
    ApplicantIn(
        name="Diana Wilson",
        email="diana@example.com",
        position="Senior Golang Developer",
        years_experience=4,
        skills=["JavaScript", "Node.js", "MongoDB", "Express"],
        github_stars=123,
        can_exit_vim=False,
        knows_go=False,
        debugs_in_production=True,
        interview_score=70.0,
        cultural_fit_score=75.0,
        technical_score=68.0,
        status=ApplicantStatus.APPLIED,
        fun_fact="console.log is a valid debugging strategy",
        availability="Immediate",
        salary_expectation="Startup equity",
    ),
    ApplicantIn(
        name="Erik Larsson",
        email="erik@example.com",
        position="Senior Golang Developer",
        years_experience=8,
        skills=["Go", "gRPC", "Docker", "Kubernetes", "Terraform"],
        github_stars=890,
        can_exit_vim=True,
        knows_go=True,
        debugs_in_production=False,
        interview_score=91.0,
        cultural_fit_score=90.0,
        technical_score=92.0,
        status=ApplicantStatus.INTERVIEWED,
        fun_fact="Almost as good as Jonathan, but not quite",
        availability="1 month",
        salary_expectation="Competitive",
    ),
]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed the applicant tracker database")
    parser.add_argument(
        "--clear",
        action="store_true",
        help="Clear existing applicants before seeding",
    )
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create missing tables before seeding",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )
    return parser.parse_args(argv)


def seed(service: ApplicantService, applicants: List[ApplicantIn], clear: bool = False) -> int:
    """Create `applicants` through the service; returns how many were created."""
    if clear:
        logger.info("clearing existing applicants")
        removed = service.clear_applicants()
        logger.info("cleared %d existing applicants", removed)

    logger.info("seeding applicants count=%d", len(applicants))
    created = 0
    for i, req in enumerate(applicants):
        try:
            out = service.create_applicant(req)
        except ServiceError as e:
            logger.error("failed to create applicant index=%d name=%s: %s", i, req.name, e)
            continue
        created += 1
        logger.info("created applicant name=%s email=%s overall_score=%.2f status=%s",
                    out.name, out.email, out.overall_score, out.status.name)

    try:
        best = service.get_best_applicant()
    except ServiceError as e:
        logger.warning("failed to get best applicant: %s", e)
    else:
        logger.info("best applicant confirmed name=%s score=%.2f reason=%s",
                    best.applicant.name, best.applicant.overall_score, best.reason)
    return created


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        settings = load_settings()
    except ConfigError as e:
        print(f"Failed to load config: {e}", file=sys.stderr)
        return 1
    configure_logging(logging.DEBUG if args.verbose else settings.log_level)

    engine = create_db_engine(settings.database_url, echo=settings.db_echo)
    try:
        if args.create_tables:
            ensure_tables(engine)
        service = ApplicantService(ApplicantRepository(make_session_factory(engine)))
        try:
            created = seed(service, SEED_APPLICANTS, clear=args.clear)
        except ServiceError as e:
            logger.error("seeding aborted: %s", e)
            return 1
    finally:
        engine.dispose()

    print(f"Database seeded: {created}/{len(SEED_APPLICANTS)} applicants created")
    return 0


if __name__ == "__main__":
    sys.exit(main())
