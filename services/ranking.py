from __future__ import annotations

from typing import Iterable, List, Optional

from models.company_record import CompanyRecord


DEFAULT_MIN_SUITABILITY = 5
MAX_ACQUISITION_TARGETS = 20


def suitability_score(company: CompanyRecord) -> int:
    # Unscored companies rank as 0
    return company.acquisition_suitability or 0


def rank_acquisition_targets(
    companies: Iterable[CompanyRecord],
    min_score: Optional[int] = None,
    limit: int = MAX_ACQUISITION_TARGETS,
) -> List[CompanyRecord]:
    """Companies scoring at least min_score, best first, capped at limit.

    Equal scores keep their source order.
    """
    threshold = DEFAULT_MIN_SUITABILITY if min_score is None else min_score
    eligible = [c for c in companies if suitability_score(c) >= threshold]
    eligible.sort(key=suitability_score, reverse=True)
    return eligible[:limit]
