from __future__ import annotations

import sqlite3

import pytest
from pydantic import ValidationError

from db import schema
from db.repos.companies_repo import CompaniesRepo, CompanyNotFoundError, NotAuthenticatedError
from models.company_record import CompanyRecord


def _record(name, industry="AI", sector="Software", **kw):
    return CompanyRecord(name=name, industry=industry, sector=sector, **kw)


@pytest.fixture()
def repo(tmp_path):
    db = sqlite3.connect(str(tmp_path / "t.db"))
    schema.bootstrap(db)
    yield CompaniesRepo(db)
    db.close()


def test_create_and_get_round_trips_optional_fields(repo):
    cid = repo.create_company(
        _record(
            "NeuralFlow AI",
            funding_stage="Series A",
            total_funding=12_000_000,
            key_technologies=["Neural Networks", "Edge Computing"],
            technical_differentiators=["Proprietäre Kompression"],
            acquisition_suitability=8,
        ),
        created_by="analyst@example.com",
    )
    rec = repo.get_company(cid)
    assert rec is not None
    assert rec.id == cid
    assert rec.key_technologies == ["Neural Networks", "Edge Computing"]
    assert rec.technical_differentiators == ["Proprietäre Kompression"]
    assert rec.total_funding == 12_000_000
    assert rec.growth_rate is None
    assert rec.created_by == "analyst@example.com"
    assert rec.created_at and rec.last_updated


def test_create_requires_principal(repo):
    with pytest.raises(NotAuthenticatedError):
        repo.create_company(_record("Anon"), created_by=None)
    with pytest.raises(NotAuthenticatedError):
        repo.create_company(_record("Anon"), created_by="  ")
    assert repo.count() == 0


def test_get_missing_returns_none(repo):
    assert repo.get_company(999) is None


def test_update_patches_fields_and_refreshes_last_updated(repo):
    cid = repo.create_company(_record("Acme", headcount=10), created_by="u1")
    before = repo.get_company(cid)
    repo.conn.execute("UPDATE companies SET last_updated = '2000-01-01T00:00:00.000Z' WHERE id = ?", (cid,))
    repo.update_company(cid, {"growth_rate": 180.0, "key_technologies": ["Go"]}, updated_by="u2")
    after = repo.get_company(cid)
    assert after.growth_rate == 180.0
    assert after.key_technologies == ["Go"]
    assert after.headcount == 10
    assert after.created_by == "u1"
    assert after.created_at == before.created_at
    assert after.last_updated != "2000-01-01T00:00:00.000Z"


def test_update_rejects_invalid_scores(repo):
    cid = repo.create_company(_record("Acme"), created_by="u1")
    with pytest.raises(ValidationError):
        repo.update_company(cid, {"acquisition_suitability": 11}, updated_by="u1")
    assert repo.get_company(cid).acquisition_suitability is None


def test_update_rejects_unknown_fields(repo):
    cid = repo.create_company(_record("Acme"), created_by="u1")
    with pytest.raises(ValueError):
        repo.update_company(cid, {"created_by": "someone-else"}, updated_by="u1")


def test_update_and_delete_missing_raise_not_found(repo):
    with pytest.raises(CompanyNotFoundError):
        repo.update_company(42, {"name": "X"}, updated_by="u1")
    with pytest.raises(CompanyNotFoundError):
        repo.delete_company(42, deleted_by="u1")


def test_update_and_delete_require_principal(repo):
    cid = repo.create_company(_record("Acme"), created_by="u1")
    with pytest.raises(NotAuthenticatedError):
        repo.update_company(cid, {"name": "Acme 2"}, updated_by=None)
    with pytest.raises(NotAuthenticatedError):
        repo.delete_company(cid, deleted_by="")
    assert repo.get_company(cid).name == "Acme"


def test_delete_is_permanent(repo):
    cid = repo.create_company(_record("Acme"), created_by="u1")
    repo.delete_company(cid, deleted_by="u1")
    assert repo.get_company(cid) is None
    assert repo.fetch_all() == []


def test_fetch_by_indexed_field_exact_match_in_insertion_order(repo):
    repo.create_company(_record("A", industry="AI"), created_by="u")
    repo.create_company(_record("B", industry="IoT", funding_stage="Seed"), created_by="u")
    repo.create_company(_record("C", industry="AI", funding_stage="Seed"), created_by="u")
    repo.create_company(_record("D", industry="ai"), created_by="u")
    assert [c.name for c in repo.fetch_by_indexed_field("industry", "AI")] == ["A", "C"]
    assert [c.name for c in repo.fetch_by_indexed_field("funding_stage", "Seed")] == ["B", "C"]
    assert [c.name for c in repo.fetch_by_indexed_field("industry", "AI", limit=1)] == ["A"]


def test_fetch_by_unindexed_field_is_rejected(repo):
    with pytest.raises(ValueError):
        repo.fetch_by_indexed_field("name", "A")


def test_list_companies_first_filter_wins_and_limit(repo):
    for i in range(3):
        repo.create_company(_record(f"ai-{i}", industry="AI", sector="Hardware"), created_by="u")
    repo.create_company(_record("iot", industry="IoT", sector="Software"), created_by="u")
    assert len(repo.list_companies()) == 4
    assert len(repo.list_companies(limit=2)) == 2
    # industry takes precedence over sector
    assert [c.name for c in repo.list_companies(industry="IoT", sector="Hardware")] == ["iot"]
    assert [c.name for c in repo.list_companies(sector="Software")] == ["iot"]


def test_find_names(repo):
    repo.insert_company(_record("NeuralFlow AI"))
    assert repo.find_names(["NeuralFlow AI", "Other"]) == ["NeuralFlow AI"]
    assert repo.find_names([]) == []
