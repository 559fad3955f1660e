from __future__ import annotations

import sqlite3

from db import schema
from db.repos.companies_repo import CompaniesRepo
from pipelines.runner import Pipeline, RunContext
from pipelines.seed_demo import seed_demo
from pipelines.steps.load_demo_companies import DEMO_COMPANIES
from pipelines.steps.persist_companies import PersistCompanies
from pipelines.steps.validate_companies import ValidateCompanies
from services.market_analysis import MarketAnalysisService


def test_seed_demo_is_idempotent(tmp_path):
    conn = sqlite3.connect(str(tmp_path / "t.db"))
    try:
        schema.bootstrap(conn)
        first = seed_demo(conn)
        assert first["companies_created"] == len(DEMO_COMPANIES)
        assert first["total_companies"] == len(DEMO_COMPANIES)
        second = seed_demo(conn, created_by="u1")
        assert second["companies_created"] == 0
        assert second["message"] == "Demo companies already exist"
        assert second["total_companies"] == len(DEMO_COMPANIES)
    finally:
        conn.close()


def test_seeded_data_drives_analysis(tmp_path):
    conn = sqlite3.connect(str(tmp_path / "t.db"))
    try:
        schema.bootstrap(conn)
        seed_demo(conn)
        service = MarketAnalysisService(CompaniesRepo(conn))

        stats = service.get_industry_stats()
        assert stats.industries_count == {"AI": 2, "IoT": 2, "Cybersecurity": 2, "Fintech": 2, "Healthtech": 2}
        assert [e.industry for e in stats.top_industries] == ["AI", "IoT", "Cybersecurity", "Fintech", "Healthtech"]
        assert stats.average_funding == 19_550_000

        targets = service.generate_acquisition_targets(min_score=9)
        assert [c.name for c in targets] == ["ConnectEdge Systems", "PayFlow Innovations"]

        landscape = service.get_competitive_landscape("Fintech")
        assert landscape.leaders == []
        assert [c.name for c in landscape.emerging] == ["PayFlow Innovations", "CreditAI Labs"]

        growth = service.get_growth_analysis()
        assert growth.high_growth_companies[0].name == "PayFlow Innovations"
        assert "DataMind Corp" not in [c.name for c in growth.high_growth_companies]
        assert list(growth.funding_by_stage) == ["Series B", "Series A", "Seed"]
    finally:
        conn.close()


def test_validate_and_persist_skip_invalid_companies(tmp_path):
    conn = sqlite3.connect(str(tmp_path / "t.db"))
    try:
        schema.bootstrap(conn)
        ctx = RunContext(created_by="u1")
        ctx.companies = [
            {"name": "Acme", "industry": "AI", "sector": "Software", "total_funding": "3M"},
            {"name": "acme", "industry": "AI", "sector": "Software"},
            {"name": "Broken", "industry": "AI"},
        ]
        out = Pipeline([ValidateCompanies(), PersistCompanies(conn)]).run(ctx)
        assert out.meta["processed_companies"] == 1
        assert out.meta["invalid_companies"] == 1
        rows = CompaniesRepo(conn).fetch_all()
        assert [(r.name, r.total_funding, r.created_by) for r in rows] == [("Acme", 3_000_000, "u1")]
    finally:
        conn.close()
