# backend/applicant_tracker/service/store.py
"""Persistence capability the operations layer depends on.

ApplicantRepository (db/crud.py) is the SQLAlchemy implementation; tests
substitute an in-memory one. Implementations raise PersistenceError, already
classified, and never leak driver exceptions.
"""

from __future__ import annotations

from typing import Any, List, Optional, Protocol, runtime_checkable

from ..db.crud import ApplicantFields, ApplicantFilters


@runtime_checkable
class ApplicantStore(Protocol):
    def create(self, fields: ApplicantFields) -> Any:
        ...

    def get_by_id(self, applicant_id: int) -> Optional[Any]:
        ...

    def update(self, applicant_id: int, fields: ApplicantFields) -> Optional[Any]:
        ...

    def delete(self, applicant_id: int) -> bool:
        ...

    def delete_all(self) -> int:
        ...

    def list(self, filters: Optional[ApplicantFilters], limit: int, offset: int) -> List[Any]:
        ...

    def count(self, filters: Optional[ApplicantFilters]) -> int:
        ...

    def get_best(self) -> Optional[Any]:
        ...
