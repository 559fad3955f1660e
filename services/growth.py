from __future__ import annotations

from typing import Dict, Iterable, List

from models.analysis import GrowthAnalysis, StageFunding
from models.company_record import CompanyRecord


HIGH_GROWTH_THRESHOLD = 150
DEFAULT_GROWTH_LIMIT = 100

# Display colour ladder
VERY_HIGH_GROWTH = 200
HIGH_GROWTH = 100
MODERATE_GROWTH = 50

# Trend icon ladder, a separate scale from the colour ladder
STRONG_UPTREND = 100


def classify_growth_rate(rate: float) -> str:
    if rate > VERY_HIGH_GROWTH:
        return "very high"
    if rate > HIGH_GROWTH:
        return "high"
    if rate > MODERATE_GROWTH:
        return "moderate"
    return "low"


def growth_trend(rate: float) -> str:
    if rate > STRONG_UPTREND:
        return "up-strong"
    if rate > 0:
        return "up"
    if rate < 0:
        return "down"
    return "flat"


def _growth_rate(company: CompanyRecord) -> float:
    return company.growth_rate or 0.0


def group_funding_by_stage(companies: Iterable[CompanyRecord]) -> Dict[str, StageFunding]:
    """Count and total funding per funding stage, largest total first.

    Companies missing either the stage or the funding amount are skipped.
    """
    groups: Dict[str, StageFunding] = {}
    for company in companies:
        if company.funding_stage is None or company.total_funding is None:
            continue
        group = groups.setdefault(company.funding_stage, StageFunding())
        group.count += 1
        group.total_funding += company.total_funding
    ordered = sorted(groups.items(), key=lambda item: item[1].total_funding, reverse=True)
    return dict(ordered)


def analyze_growth(companies: Iterable[CompanyRecord]) -> GrowthAnalysis:
    """Average growth, high-growth companies and funding-by-stage over a company set.

    The average is 0.0 when no company reports a growth rate.
    """
    companies = list(companies)
    with_growth: List[CompanyRecord] = [c for c in companies if c.growth_rate is not None]
    avg = sum(_growth_rate(c) for c in with_growth) / len(with_growth) if with_growth else 0.0
    high_growth = sorted(
        (c for c in with_growth if _growth_rate(c) > HIGH_GROWTH_THRESHOLD),
        key=_growth_rate,
        reverse=True,
    )
    return GrowthAnalysis(
        avg_growth_rate=avg,
        companies_with_growth=with_growth,
        high_growth_companies=high_growth,
        funding_by_stage=group_funding_by_stage(companies),
    )
