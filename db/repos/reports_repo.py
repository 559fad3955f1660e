from __future__ import annotations

import json
import sqlite3
from typing import List, Optional

from db.repos.companies_repo import _now_iso, _require_principal
from models.market_report import MarketReport


_SELECT_SQL = (
    "SELECT id, title, industry, sector, summary, key_findings_json, recommendations_json, "
    "companies_analyzed_json, created_by, report_date FROM market_reports"
)


def _row_to_report(row: tuple) -> MarketReport:
    return MarketReport(
        id=row[0],
        title=row[1],
        industry=row[2],
        sector=row[3],
        summary=row[4],
        key_findings=json.loads(row[5] or "[]"),
        recommendations=json.loads(row[6] or "[]"),
        companies_analyzed=json.loads(row[7] or "[]"),
        created_by=row[8],
        report_date=row[9],
    )


class ReportsRepo:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def create_report(self, report: MarketReport, created_by: Optional[str]) -> int:
        """Persist a market report authored by created_by; returns the report id."""
        principal = _require_principal(created_by, "create market reports")
        cur = self.conn.cursor()
        cur.execute(
            (
                "INSERT INTO market_reports (title, industry, sector, summary, key_findings_json, "
                "recommendations_json, companies_analyzed_json, created_by, report_date) "
                "VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)"
            ),
            (
                report.title,
                report.industry,
                report.sector,
                report.summary,
                json.dumps(report.key_findings, ensure_ascii=False),
                json.dumps(report.recommendations, ensure_ascii=False),
                json.dumps(report.companies_analyzed),
                principal,
                _now_iso(),
            ),
        )
        self.conn.commit()
        return int(cur.lastrowid)

    def list_reports(self, industry: Optional[str] = None, limit: int = 20) -> List[MarketReport]:
        """Newest reports first, optionally for a single industry."""
        cur = self.conn.cursor()
        if industry:
            cur.execute(f"{_SELECT_SQL} WHERE industry = ? ORDER BY id DESC LIMIT ?", (industry, limit))
        else:
            cur.execute(f"{_SELECT_SQL} ORDER BY id DESC LIMIT ?", (limit,))
        return [_row_to_report(row) for row in cur.fetchall()]
