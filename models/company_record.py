from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


FUNDING_STAGES = (
    "Pre-Seed",
    "Seed",
    "Series A",
    "Series B",
    "Series C",
    "Series D+",
    "IPO",
    "Acquired",
)

COMPETITIVE_POSITIONS = ("Leader", "Challenger", "Emerging")

MIN_YEAR_FOUNDED = 1900


class CompanyRecord(BaseModel):
    """App/DB record shape for a tracked company.

    The analysis services only ever read these; writes go through CompaniesRepo.
    """

    id: Optional[int] = None
    created_at: Optional[str] = None

    name: str = Field(min_length=1)
    industry: str = Field(min_length=1)
    sector: str = Field(min_length=1)

    description: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    year_founded: Optional[int] = None
    headcount: Optional[int] = Field(default=None, gt=0)

    # Funding stage is a recognised vocabulary (FUNDING_STAGES) but any label is kept
    funding_stage: Optional[str] = None
    total_funding: Optional[float] = Field(default=None, ge=0)
    revenue: Optional[float] = Field(default=None, ge=0)
    growth_rate: Optional[float] = None
    employee_growth_rate: Optional[float] = None

    key_technologies: Optional[list[str]] = None
    competitive_position: Optional[str] = None
    acquisition_suitability: Optional[int] = Field(default=None, ge=1, le=10)
    investment_potential: Optional[int] = Field(default=None, ge=1, le=10)
    technical_differentiators: Optional[list[str]] = None
    patents: Optional[int] = Field(default=None, ge=0)

    last_updated: Optional[str] = None
    created_by: Optional[str] = None

    model_config = ConfigDict(extra="ignore")

    @field_validator("name", "industry", "sector", mode="before")
    @classmethod
    def _strip_required(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator(
        "description",
        "website",
        "location",
        "funding_stage",
        "competitive_position",
        mode="before",
    )
    @classmethod
    def _blank_to_none(cls, value):
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    @field_validator("year_founded")
    @classmethod
    def _plausible_year(cls, value: Optional[int]) -> Optional[int]:
        if value is None:
            return value
        current_year = datetime.now(timezone.utc).year
        if value < MIN_YEAR_FOUNDED or value > current_year:
            raise ValueError(f"year_founded must be between {MIN_YEAR_FOUNDED} and {current_year}")
        return value
