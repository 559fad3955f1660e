from .company_record import CompanyRecord, COMPETITIVE_POSITIONS, FUNDING_STAGES
from .market_report import MarketReport
from .analysis import (
    CompetitiveLandscape,
    GrowthAnalysis,
    IndustryCount,
    IndustryStats,
    StageFunding,
)

__all__ = [
    "CompanyRecord",
    "COMPETITIVE_POSITIONS",
    "FUNDING_STAGES",
    "MarketReport",
    "CompetitiveLandscape",
    "GrowthAnalysis",
    "IndustryCount",
    "IndustryStats",
    "StageFunding",
]
