from __future__ import annotations

from typing import List, Optional, Protocol

from models.company_record import CompanyRecord


class CompanyStorePort(Protocol):
    """Read side consumed by the analysis services."""

    def fetch_all(self, limit: Optional[int] = None) -> List[CompanyRecord]:
        ...

    def fetch_by_indexed_field(self, field: str, value: str, limit: Optional[int] = None) -> List[CompanyRecord]:
        ...
