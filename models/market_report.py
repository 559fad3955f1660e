from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class MarketReport(BaseModel):
    """App/DB record shape for a written market analysis report."""

    id: Optional[int] = None
    title: str = Field(min_length=1)
    industry: str = Field(min_length=1)
    sector: str = Field(min_length=1)
    summary: str
    key_findings: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    companies_analyzed: list[int] = Field(default_factory=list)
    created_by: Optional[str] = None
    report_date: Optional[str] = None

    model_config = ConfigDict(extra="ignore")
