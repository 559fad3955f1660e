from __future__ import annotations

from models.company_record import CompanyRecord
from services.ranking import (
    DEFAULT_MIN_SUITABILITY,
    MAX_ACQUISITION_TARGETS,
    rank_acquisition_targets,
)


def _c(name, score=None, industry="AI"):
    return CompanyRecord(name=name, industry=industry, sector="Software", acquisition_suitability=score)


def test_filters_and_sorts_by_suitability():
    a, b, c = _c("A", 8), _c("B", 6), _c("C", 9, industry="IoT")
    result = rank_acquisition_targets([a, b, c], min_score=7)
    assert [x.name for x in result] == ["C", "A"]


def test_default_threshold_applies_when_min_score_omitted():
    companies = [_c("low", 4), _c("edge", DEFAULT_MIN_SUITABILITY), _c("none")]
    result = rank_acquisition_targets(companies)
    assert [x.name for x in result] == ["edge"]


def test_unscored_companies_count_as_zero():
    result = rank_acquisition_targets([_c("none"), _c("one", 1)], min_score=0)
    assert [x.name for x in result] == ["one", "none"]


def test_explicit_zero_threshold_is_not_replaced_by_default():
    result = rank_acquisition_targets([_c("two", 2)], min_score=0)
    assert [x.name for x in result] == ["two"]


def test_ties_keep_source_order():
    companies = [_c("first", 7), _c("top", 9), _c("second", 7), _c("third", 7)]
    result = rank_acquisition_targets(companies)
    assert [x.name for x in result] == ["top", "first", "second", "third"]


def test_result_is_capped():
    companies = [_c(f"co-{i}", 5 + i % 5) for i in range(30)]
    result = rank_acquisition_targets(companies)
    assert len(result) == MAX_ACQUISITION_TARGETS
    scores = [x.acquisition_suitability for x in result]
    assert scores == sorted(scores, reverse=True)
    assert all(s >= DEFAULT_MIN_SUITABILITY for s in scores)


def test_empty_input_yields_empty_result():
    assert rank_acquisition_targets([], min_score=1) == []
