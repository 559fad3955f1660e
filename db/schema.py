from __future__ import annotations

import sqlite3


def _existing_columns(cur: sqlite3.Cursor, table: str) -> set[str]:
    cur.execute(f"PRAGMA table_info({table});")
    return {row[1] for row in cur.fetchall()}


def bootstrap(conn: sqlite3.Connection) -> None:
    """Create companies/reports schema and indexes (idempotent)."""
    cur = conn.cursor()

    # Companies table
    cur.execute(
        (
            "CREATE TABLE IF NOT EXISTS companies (\n"
            "  id INTEGER PRIMARY KEY AUTOINCREMENT,\n"
            "  created_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%fZ', 'now')),\n"
            "  name TEXT NOT NULL,\n"
            "  industry TEXT NOT NULL,\n"
            "  sector TEXT NOT NULL,\n"
            "  description TEXT,\n"
            "  website TEXT,\n"
            "  location TEXT,\n"
            "  year_founded INTEGER,\n"
            "  headcount INTEGER,\n"
            "  funding_stage TEXT,\n"
            "  total_funding REAL,\n"
            "  revenue REAL,\n"
            "  growth_rate REAL,\n"
            "  employee_growth_rate REAL,\n"
            "  key_technologies_json TEXT,\n"
            "  competitive_position TEXT,\n"
            "  acquisition_suitability INTEGER,\n"
            "  investment_potential INTEGER,\n"
            "  technical_differentiators_json TEXT,\n"
            "  patents INTEGER,\n"
            "  last_updated TEXT,\n"
            "  created_by TEXT\n"
            ")"
        )
    )
    # Backfill columns added after the first schema revision
    columns = _existing_columns(cur, "companies")
    if "employee_growth_rate" not in columns:
        cur.execute("ALTER TABLE companies ADD COLUMN employee_growth_rate REAL;")
    if "technical_differentiators_json" not in columns:
        cur.execute("ALTER TABLE companies ADD COLUMN technical_differentiators_json TEXT;")

    # Indexed reads used by the analysis queries
    cur.execute("CREATE INDEX IF NOT EXISTS idx_companies_industry ON companies(industry);")
    cur.execute("CREATE INDEX IF NOT EXISTS idx_companies_sector ON companies(sector);")
    cur.execute("CREATE INDEX IF NOT EXISTS idx_companies_funding_stage ON companies(funding_stage);")
    cur.execute("CREATE INDEX IF NOT EXISTS idx_companies_created_by ON companies(created_by);")
    cur.execute(
        "CREATE INDEX IF NOT EXISTS idx_companies_competitive_position ON companies(competitive_position);"
    )
    cur.execute("CREATE INDEX IF NOT EXISTS idx_companies_name ON companies(name);")

    # Market reports
    cur.execute(
        (
            "CREATE TABLE IF NOT EXISTS market_reports (\n"
            "  id INTEGER PRIMARY KEY AUTOINCREMENT,\n"
            "  title TEXT NOT NULL,\n"
            "  industry TEXT NOT NULL,\n"
            "  sector TEXT NOT NULL,\n"
            "  summary TEXT NOT NULL,\n"
            "  key_findings_json TEXT NOT NULL DEFAULT '[]',\n"
            "  recommendations_json TEXT NOT NULL DEFAULT '[]',\n"
            "  companies_analyzed_json TEXT NOT NULL DEFAULT '[]',\n"
            "  created_by TEXT NOT NULL,\n"
            "  report_date TEXT NOT NULL\n"
            ")"
        )
    )
    cur.execute("CREATE INDEX IF NOT EXISTS idx_market_reports_industry ON market_reports(industry);")
    cur.execute("CREATE INDEX IF NOT EXISTS idx_market_reports_created_by ON market_reports(created_by);")

    conn.commit()
