from __future__ import annotations

from models.company_record import CompanyRecord
from services.aggregation import TOP_INDUSTRIES_LIMIT, compute_industry_stats, top_industries


def _c(name, industry="AI", sector="Software", **kw):
    return CompanyRecord(name=name, industry=industry, sector=sector, **kw)


def test_empty_collection_yields_zero_counts():
    stats = compute_industry_stats([])
    assert stats.total_companies == 0
    assert stats.industries_count == {}
    assert stats.sectors_count == {}
    assert stats.funding_stages_count == {}
    assert stats.average_funding is None
    assert stats.top_industries == []


def test_counts_cover_every_company():
    companies = [
        _c("A", industry="AI", sector="Software", funding_stage="Seed"),
        _c("B", industry="AI", sector="Platform"),
        _c("C", industry="IoT", sector="Hardware", funding_stage="Series A"),
        _c("D", industry="Fintech", sector="Software", funding_stage="Seed"),
    ]
    stats = compute_industry_stats(companies)
    assert stats.total_companies == 4
    assert sum(stats.industries_count.values()) == stats.total_companies
    assert stats.industries_count == {"AI": 2, "IoT": 1, "Fintech": 1}
    assert stats.sectors_count == {"Software": 2, "Platform": 1, "Hardware": 1}
    # Only companies with a funding stage contribute
    assert stats.funding_stages_count == {"Seed": 2, "Series A": 1}


def test_average_funding_ignores_companies_without_funding():
    companies = [
        _c("A", total_funding=10_000_000),
        _c("B"),
        _c("C"),
    ]
    stats = compute_industry_stats(companies)
    assert stats.average_funding == 10_000_000


def test_average_funding_is_none_without_funding_data():
    stats = compute_industry_stats([_c("A"), _c("B")])
    assert stats.average_funding is None


def test_zero_funding_counts_as_data():
    stats = compute_industry_stats([_c("A", total_funding=0), _c("B", total_funding=4_000_000)])
    assert stats.average_funding == 2_000_000


def test_top_industries_sorted_and_capped():
    companies = []
    for industry, n in [("AI", 1), ("IoT", 3), ("Fintech", 2), ("Healthtech", 4), ("Edtech", 1), ("Cleantech", 2), ("Other", 1)]:
        companies.extend(_c(f"{industry}-{i}", industry=industry) for i in range(n))
    stats = compute_industry_stats(companies)
    counts = [entry.count for entry in stats.top_industries]
    assert len(stats.top_industries) == TOP_INDUSTRIES_LIMIT
    assert counts == sorted(counts, reverse=True)
    assert [e.industry for e in stats.top_industries[:4]] == ["Healthtech", "IoT", "Fintech", "Cleantech"]


def test_top_industries_ties_keep_first_encountered_order():
    ranked = top_industries({"IoT": 2, "AI": 2, "Fintech": 3, "Edtech": 2})
    assert [(e.industry, e.count) for e in ranked] == [("Fintech", 3), ("IoT", 2), ("AI", 2), ("Edtech", 2)]


def test_top_industries_shorter_than_limit_when_few_industries():
    stats = compute_industry_stats([_c("A", industry="AI"), _c("B", industry="IoT")])
    assert len(stats.top_industries) == 2
