from __future__ import annotations

from typing import Iterable

from models.analysis import CompetitiveLandscape
from models.company_record import CompanyRecord


def segment_competitive_landscape(companies: Iterable[CompanyRecord], industry: str) -> CompetitiveLandscape:
    """Split an industry's companies into leaders, challengers and emerging players.

    Only the exact labels "Leader", "Challenger" and "Emerging" are bucketed. Companies
    with no position or any other label are left out of all three lists.
    """
    landscape = CompetitiveLandscape()
    buckets = {
        "Leader": landscape.leaders,
        "Challenger": landscape.challengers,
        "Emerging": landscape.emerging,
    }
    for company in companies:
        if company.industry != industry:
            continue
        bucket = buckets.get(company.competitive_position or "")
        if bucket is not None:
            bucket.append(company)
    return landscape
