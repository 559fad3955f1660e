from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from .company_record import CompanyRecord


class IndustryCount(BaseModel):
    industry: str
    count: int


class IndustryStats(BaseModel):
    """Aggregate counts over the full company set.

    average_funding is None when no company carries funding data.
    """

    total_companies: int = 0
    industries_count: dict[str, int] = Field(default_factory=dict)
    sectors_count: dict[str, int] = Field(default_factory=dict)
    funding_stages_count: dict[str, int] = Field(default_factory=dict)
    average_funding: Optional[float] = None
    top_industries: list[IndustryCount] = Field(default_factory=list)


class CompetitiveLandscape(BaseModel):
    leaders: list[CompanyRecord] = Field(default_factory=list)
    challengers: list[CompanyRecord] = Field(default_factory=list)
    emerging: list[CompanyRecord] = Field(default_factory=list)


class StageFunding(BaseModel):
    count: int = 0
    total_funding: float = 0.0

    @property
    def average_funding(self) -> float:
        # Groups are only created with at least one member
        return self.total_funding / self.count


class GrowthAnalysis(BaseModel):
    """Growth view; avg_growth_rate is 0.0 when no company carries a growth rate."""

    avg_growth_rate: float = 0.0
    companies_with_growth: list[CompanyRecord] = Field(default_factory=list)
    high_growth_companies: list[CompanyRecord] = Field(default_factory=list)
    funding_by_stage: dict[str, StageFunding] = Field(default_factory=dict)
