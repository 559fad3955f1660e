from __future__ import annotations

from typing import Dict, Iterable, List

from models.analysis import IndustryCount, IndustryStats
from models.company_record import CompanyRecord


TOP_INDUSTRIES_LIMIT = 5


def _bump(counts: Dict[str, int], key: str) -> None:
    counts[key] = counts.get(key, 0) + 1


def top_industries(industries_count: Dict[str, int], limit: int = TOP_INDUSTRIES_LIMIT) -> List[IndustryCount]:
    """Industries by descending count; ties keep first-encountered order."""
    ranked = sorted(industries_count.items(), key=lambda item: item[1], reverse=True)
    return [IndustryCount(industry=industry, count=count) for industry, count in ranked[:limit]]


def compute_industry_stats(companies: Iterable[CompanyRecord]) -> IndustryStats:
    """Industry/sector/funding-stage counts plus average funding over the given companies.

    average_funding stays None when no company has total_funding, so callers can tell
    "no data" apart from a zero average.
    """
    industries_count: Dict[str, int] = {}
    sectors_count: Dict[str, int] = {}
    funding_stages_count: Dict[str, int] = {}
    total_companies = 0
    funding_sum = 0.0
    funding_n = 0

    for company in companies:
        total_companies += 1
        _bump(industries_count, company.industry)
        _bump(sectors_count, company.sector)
        if company.funding_stage is not None:
            _bump(funding_stages_count, company.funding_stage)
        if company.total_funding is not None:
            funding_sum += company.total_funding
            funding_n += 1

    return IndustryStats(
        total_companies=total_companies,
        industries_count=industries_count,
        sectors_count=sectors_count,
        funding_stages_count=funding_stages_count,
        average_funding=funding_sum / funding_n if funding_n > 0 else None,
        top_industries=top_industries(industries_count),
    )
