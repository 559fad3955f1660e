from __future__ import annotations

import sqlite3

import pytest

from db import schema
from db.repos.companies_repo import NotAuthenticatedError
from db.repos.reports_repo import ReportsRepo
from models.market_report import MarketReport


def _report(title, industry="AI"):
    return MarketReport(
        title=title,
        industry=industry,
        sector="Software",
        summary="Summary",
        key_findings=["AI leads"],
        recommendations=["Acquire NeuralFlow"],
        companies_analyzed=[1, 2],
    )


def test_reports_newest_first_and_filtered(tmp_path):
    db = sqlite3.connect(str(tmp_path / "t.db"))
    try:
        schema.bootstrap(db)
        repo = ReportsRepo(db)
        repo.create_report(_report("first"), created_by="u1")
        repo.create_report(_report("iot", industry="IoT"), created_by="u1")
        repo.create_report(_report("second"), created_by="u2")

        titles = [r.title for r in repo.list_reports()]
        assert titles == ["second", "iot", "first"]
        ai = repo.list_reports(industry="AI", limit=1)
        assert [r.title for r in ai] == ["second"]
        assert ai[0].created_by == "u2"
        assert ai[0].key_findings == ["AI leads"]
        assert ai[0].companies_analyzed == [1, 2]
        assert ai[0].report_date
    finally:
        db.close()


def test_create_report_requires_principal(tmp_path):
    db = sqlite3.connect(str(tmp_path / "t.db"))
    try:
        schema.bootstrap(db)
        with pytest.raises(NotAuthenticatedError):
            ReportsRepo(db).create_report(_report("anon"), created_by=None)
    finally:
        db.close()
