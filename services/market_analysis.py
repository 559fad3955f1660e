from __future__ import annotations

import logging
import time
from typing import Iterable, List, Optional

from models.analysis import CompetitiveLandscape, GrowthAnalysis, IndustryStats
from models.company_record import CompanyRecord
from ports.repos import CompanyStorePort
from services.aggregation import compute_industry_stats
from services.growth import DEFAULT_GROWTH_LIMIT, analyze_growth
from services.ranking import rank_acquisition_targets
from services.segmentation import segment_competitive_landscape


logger = logging.getLogger(__name__)


def search_companies(companies: Iterable[CompanyRecord], term: Optional[str]) -> List[CompanyRecord]:
    """Case-insensitive substring match on name or description."""
    companies = list(companies)
    needle = (term or "").strip().lower()
    if not needle:
        return companies
    return [
        c for c in companies
        if needle in c.name.lower() or (c.description is not None and needle in c.description.lower())
    ]


class MarketAnalysisService:
    """Read-only market queries over a company store.

    Every call reads a fresh snapshot from the store and recomputes; nothing is cached.
    """

    def __init__(self, store: CompanyStorePort):
        self.store = store

    def _log(self, op: str, started: float, count: int) -> None:
        duration_ms = int((time.perf_counter() - started) * 1000)
        logger.info(
            "Market query complete",
            extra={"op": op, "status": "ok", "count": count, "duration_ms": duration_ms},
        )

    def get_industry_stats(self) -> IndustryStats:
        started = time.perf_counter()
        stats = compute_industry_stats(self.store.fetch_all())
        self._log("industry_stats", started, stats.total_companies)
        return stats

    def generate_acquisition_targets(
        self, industry: Optional[str] = None, min_score: Optional[int] = None
    ) -> List[CompanyRecord]:
        started = time.perf_counter()
        if industry:
            companies = self.store.fetch_by_indexed_field("industry", industry)
        else:
            companies = self.store.fetch_all()
        targets = rank_acquisition_targets(companies, min_score=min_score)
        self._log("acquisition_targets", started, len(targets))
        return targets

    def get_competitive_landscape(self, industry: str) -> CompetitiveLandscape:
        started = time.perf_counter()
        companies = self.store.fetch_by_indexed_field("industry", industry)
        landscape = segment_competitive_landscape(companies, industry)
        count = len(landscape.leaders) + len(landscape.challengers) + len(landscape.emerging)
        self._log("competitive_landscape", started, count)
        return landscape

    def get_growth_analysis(self, limit: Optional[int] = None) -> GrowthAnalysis:
        started = time.perf_counter()
        companies = self.store.fetch_all(limit=DEFAULT_GROWTH_LIMIT if limit is None else limit)
        analysis = analyze_growth(companies)
        self._log("growth_analysis", started, len(analysis.companies_with_growth))
        return analysis
