from __future__ import annotations

from data_validator import DataValidator


def test_validate_all_companies_requires_name_industry_sector():
    v = DataValidator()
    companies = [
        {},
        {"name": "Acme", "industry": "AI", "sector": "Software"},
        {"name": "Beta", "industry": "AI"},
        {"name": "  ", "industry": "AI", "sector": "Software"},
    ]
    valid = v.validate_all_companies(companies)
    assert [c["name"] for c in valid] == ["Acme"]
    stats = v.get_validation_stats()
    assert stats["total_companies"] == 4
    assert stats["invalid_companies"] == 3


def test_validate_rejects_out_of_range_scores():
    v = DataValidator()
    result = v.validate_company_data(
        {"name": "Acme", "industry": "AI", "sector": "Software", "acquisition_suitability": 12}
    )
    assert not result["is_valid"]
    assert any("acquisition_suitability" in e for e in result["errors"])


def test_unrecognised_labels_only_warn():
    v = DataValidator()
    result = v.validate_company_data(
        {
            "name": "Acme",
            "industry": "AI",
            "sector": "Software",
            "funding_stage": "Series Z",
            "competitive_position": "Niche",
        }
    )
    assert result["is_valid"]
    assert len(result["warnings"]) == 2


def test_clean_company_data_coerces_form_values():
    v = DataValidator()
    cleaned = v.clean_company_data({
        "name": " Acme ",
        "total_funding": "$12M",
        "revenue": "2,500,000",
        "headcount": "45",
        "growth_rate": "180%",
        "key_technologies": "Neural Networks, Edge Computing, ",
        "website": "acme.io/",
    })
    assert cleaned["name"] == "Acme"
    assert cleaned["total_funding"] == 12_000_000
    assert cleaned["revenue"] == 2_500_000
    assert cleaned["headcount"] == 45
    assert cleaned["growth_rate"] == 180.0
    assert cleaned["key_technologies"] == ["Neural Networks", "Edge Computing"]
    assert cleaned["website"] == "https://acme.io"


def test_remove_company_duplicates_by_name():
    v = DataValidator()
    companies = [
        {"name": "Acme", "industry": "AI"},
        {"name": "ACME ", "industry": "IoT"},
        {"name": "Beta", "industry": "AI"},
    ]
    unique = v.remove_company_duplicates(companies)
    assert [c["industry"] for c in unique] == ["AI", "AI"]


def test_find_unparsable_values_reports_values_cleaned_to_none():
    v = DataValidator()
    raw = {
        "name": "Acme",
        "total_funding": "12MM",
        "growth_rate": "fast",
        "headcount": "45",
        "description": "  ",
        "website": "acme.io",
    }
    cleaned = v.clean_company_data(raw)
    errors = v.find_unparsable_values(raw, cleaned)
    assert errors == [
        "Unparsable value for total_funding: '12MM'",
        "Unparsable value for growth_rate: 'fast'",
    ]
