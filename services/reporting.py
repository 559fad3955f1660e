from __future__ import annotations

from typing import List, Optional

from models.analysis import CompetitiveLandscape, GrowthAnalysis, IndustryStats
from models.company_record import CompanyRecord
from services.growth import HIGH_GROWTH_THRESHOLD, classify_growth_rate, growth_trend


# The growth screen lists only the first few high-growth companies
HIGH_GROWTH_DISPLAY_LIMIT = 8


def format_funding_millions(amount: Optional[float]) -> str:
    """12_000_000 -> '$12.0M'; '-' when unknown."""
    if amount is None:
        return "-"
    return f"${amount / 1_000_000:.1f}M"


def format_growth(rate: Optional[float]) -> str:
    if rate is None:
        return "-"
    return f"{rate:g}%"


def build_key_findings(stats: IndustryStats, growth: Optional[GrowthAnalysis] = None) -> List[str]:
    """Plain-language observations used as default report findings."""
    findings: List[str] = []
    if stats.top_industries and stats.total_companies:
        top = stats.top_industries[0]
        share = top.count / stats.total_companies * 100
        findings.append(
            f"Industry concentration: the {top.industry} industry leads with {top.count} companies, "
            f"representing {share:.1f}% of the total dataset."
        )
    if stats.average_funding is not None:
        findings.append(
            f"Funding landscape: average funding across companies with funding data is "
            f"{format_funding_millions(stats.average_funding)}."
        )
    findings.append(
        f"Data coverage: tracking {stats.total_companies} companies across "
        f"{len(stats.industries_count)} industries."
    )
    if growth is not None and growth.companies_with_growth:
        findings.append(
            f"Growth: average growth rate is {growth.avg_growth_rate:.1f}% with "
            f"{len(growth.high_growth_companies)} companies above {HIGH_GROWTH_THRESHOLD}%."
        )
    return findings


def _company_line(company: CompanyRecord) -> str:
    parts = [company.name, f"[{company.industry}]"]
    if company.funding_stage:
        parts.append(company.funding_stage)
    if company.total_funding is not None:
        parts.append(f"{format_funding_millions(company.total_funding)} funding")
    return " ".join(parts)


def print_stats_summary(stats: IndustryStats) -> None:
    """Print the market overview block."""
    print("\n" + "="*60)
    print("MARKET OVERVIEW")
    print("="*60)
    print(f"Total Companies: {stats.total_companies}")
    print(f"Industries: {len(stats.industries_count)}")
    print(f"Average Funding: {format_funding_millions(stats.average_funding)}")
    print()
    print("Top Industries:")
    for entry in stats.top_industries:
        print(f"  {entry.industry}: {entry.count}")
    if stats.funding_stages_count:
        print()
        print("Funding Stage Distribution:")
        for stage, count in stats.funding_stages_count.items():
            print(f"  {stage}: {count}")
    print()
    print("Key Insights:")
    for finding in build_key_findings(stats):
        print(f"  - {finding}")
    print("="*60)


def print_targets_summary(targets: List[CompanyRecord]) -> None:
    print("\n" + "="*60)
    print("ACQUISITION TARGETS")
    print("="*60)
    if not targets:
        print("No acquisition targets found.")
    for i, company in enumerate(targets, start=1):
        score = company.acquisition_suitability or 0
        print(f"{i:>2}. {score}/10  {_company_line(company)}")
    print("="*60)


def print_landscape_summary(industry: str, landscape: CompetitiveLandscape) -> None:
    print("\n" + "="*60)
    print(f"COMPETITIVE LANDSCAPE - {industry}")
    print("="*60)
    for title, bucket in (
        ("Market Leaders", landscape.leaders),
        ("Challengers", landscape.challengers),
        ("Emerging Players", landscape.emerging),
    ):
        print(f"{title} ({len(bucket)}):")
        for company in bucket:
            print(f"  {_company_line(company)}")
    print("="*60)


def print_growth_summary(growth: GrowthAnalysis) -> None:
    print("\n" + "="*60)
    print("GROWTH ANALYSIS")
    print("="*60)
    print(f"Average Growth Rate: {growth.avg_growth_rate:.1f}%")
    print(f"High Growth Companies (>{HIGH_GROWTH_THRESHOLD}%): {len(growth.high_growth_companies)}")
    print(f"Companies with Growth Data: {len(growth.companies_with_growth)}")
    if growth.high_growth_companies:
        print()
        print("High Growth Companies:")
        for company in growth.high_growth_companies[:HIGH_GROWTH_DISPLAY_LIMIT]:
            rate = company.growth_rate or 0.0
            print(
                f"  {_company_line(company)}  {format_growth(company.growth_rate)} "
                f"({classify_growth_rate(rate)}, {growth_trend(rate)})"
            )
    print()
    print("Funding by Stage (avg per company):")
    for stage, group in growth.funding_by_stage.items():
        print(f"  {stage}: {group.count} companies, {format_funding_millions(group.average_funding)} avg")
    print("="*60)
