from __future__ import annotations

import json
import logging
import sqlite3
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from models.company_record import CompanyRecord


logger = logging.getLogger(__name__)

INDEXED_FIELDS = ("industry", "sector", "funding_stage")

# Plain columns in table order; *_json columns hold the list-valued fields
_SCALAR_COLUMNS = [
    "name",
    "industry",
    "sector",
    "description",
    "website",
    "location",
    "year_founded",
    "headcount",
    "funding_stage",
    "total_funding",
    "revenue",
    "growth_rate",
    "employee_growth_rate",
    "competitive_position",
    "acquisition_suitability",
    "investment_potential",
    "patents",
]
_LIST_COLUMNS = {
    "key_technologies": "key_technologies_json",
    "technical_differentiators": "technical_differentiators_json",
}
_MUTABLE_FIELDS = set(_SCALAR_COLUMNS) | set(_LIST_COLUMNS)

_SELECT_SQL = (
    "SELECT id, created_at, " + ", ".join(_SCALAR_COLUMNS) + ", "
    + ", ".join(_LIST_COLUMNS.values()) + ", last_updated, created_by FROM companies"
)


class NotAuthenticatedError(RuntimeError):
    """Raised when a write is attempted without a principal."""


class CompanyNotFoundError(KeyError):
    """Raised when patching or deleting a company id that does not exist."""


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _require_principal(principal: Optional[str], action: str) -> str:
    if not principal or not str(principal).strip():
        raise NotAuthenticatedError(f"Must be authenticated to {action}")
    return str(principal).strip()


def _row_to_record(cur: sqlite3.Cursor, row: tuple) -> CompanyRecord:
    data: Dict[str, Any] = {col[0]: row[i] for i, col in enumerate(cur.description)}
    for field_name, column in _LIST_COLUMNS.items():
        raw = data.pop(column, None)
        data[field_name] = json.loads(raw) if raw else None
    return CompanyRecord.model_validate(data)


def _column_values(record: CompanyRecord) -> Dict[str, Any]:
    values: Dict[str, Any] = {col: getattr(record, col) for col in _SCALAR_COLUMNS}
    for field_name, column in _LIST_COLUMNS.items():
        items = getattr(record, field_name)
        # Preserve non-ASCII characters in stored JSON text
        values[column] = json.dumps(items, ensure_ascii=False) if items is not None else None
    return values


class CompaniesRepo:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    # --- Writes ---
    def insert_company(self, record: CompanyRecord, created_by: Optional[str] = None) -> int:
        """Insert a validated company row and return its id.

        No principal check; used by demo seeding. Use create_company for user writes.
        """
        values = _column_values(record)
        now = _now_iso()
        values["created_at"] = now
        values["last_updated"] = now
        values["created_by"] = created_by
        columns = list(values)
        placeholders = ", ".join("?" for _ in columns)
        cur = self.conn.cursor()
        cur.execute(
            f"INSERT INTO companies ({', '.join(columns)}) VALUES ({placeholders})",
            tuple(values[c] for c in columns),
        )
        self.conn.commit()
        return int(cur.lastrowid)

    def create_company(self, record: CompanyRecord, created_by: Optional[str]) -> int:
        principal = _require_principal(created_by, "create companies")
        company_id = self.insert_company(record, created_by=principal)
        logger.info("Company created", extra={"op": "create_company", "status": "ok", "count": 1})
        return company_id

    def update_company(self, company_id: int, fields: Dict[str, Any], updated_by: Optional[str]) -> None:
        """Patch the given fields on a company and refresh last_updated.

        The merged record is re-validated so score/amount invariants hold after the patch.
        """
        _require_principal(updated_by, "update companies")
        current = self.get_company(company_id)
        if current is None:
            raise CompanyNotFoundError(company_id)
        unknown = set(fields) - _MUTABLE_FIELDS
        if unknown:
            raise ValueError(f"Unsupported company fields: {', '.join(sorted(unknown))}")

        merged = current.model_dump()
        merged.update(fields)
        patched = CompanyRecord.model_validate(merged)

        all_values = _column_values(patched)
        columns: List[str] = []
        values: List[Any] = []
        for key in fields:
            column = _LIST_COLUMNS.get(key, key)
            columns.append(f"{column} = ?")
            values.append(all_values[column])
        columns.append("last_updated = ?")
        values.append(_now_iso())
        values.append(company_id)
        self.conn.execute(f"UPDATE companies SET {', '.join(columns)} WHERE id = ?;", tuple(values))
        self.conn.commit()
        logger.info("Company updated", extra={"op": "update_company", "status": "ok", "count": 1})

    def delete_company(self, company_id: int, deleted_by: Optional[str]) -> None:
        _require_principal(deleted_by, "delete companies")
        cur = self.conn.cursor()
        cur.execute("DELETE FROM companies WHERE id = ?", (company_id,))
        if cur.rowcount == 0:
            raise CompanyNotFoundError(company_id)
        self.conn.commit()
        logger.info("Company deleted", extra={"op": "delete_company", "status": "ok", "count": 1})

    # --- Reads ---
    def get_company(self, company_id: int) -> Optional[CompanyRecord]:
        cur = self.conn.cursor()
        cur.execute(f"{_SELECT_SQL} WHERE id = ?", (company_id,))
        row = cur.fetchone()
        return _row_to_record(cur, row) if row else None

    def fetch_all(self, limit: Optional[int] = None) -> List[CompanyRecord]:
        """All companies in insertion order, optionally capped."""
        sql = f"{_SELECT_SQL} ORDER BY id"
        params: tuple = ()
        if limit is not None:
            sql += " LIMIT ?"
            params = (limit,)
        cur = self.conn.cursor()
        cur.execute(sql, params)
        return [_row_to_record(cur, row) for row in cur.fetchall()]

    def fetch_by_indexed_field(self, field: str, value: str, limit: Optional[int] = None) -> List[CompanyRecord]:
        """Exact-match read on one of INDEXED_FIELDS, insertion order."""
        if field not in INDEXED_FIELDS:
            raise ValueError(f"Field is not indexed: {field}")
        # field is whitelisted above, safe to interpolate
        sql = f"{_SELECT_SQL} WHERE {field} = ? ORDER BY id"
        params: tuple = (value,)
        if limit is not None:
            sql += " LIMIT ?"
            params = (value, limit)
        cur = self.conn.cursor()
        cur.execute(sql, params)
        return [_row_to_record(cur, row) for row in cur.fetchall()]

    def list_companies(
        self,
        industry: Optional[str] = None,
        sector: Optional[str] = None,
        funding_stage: Optional[str] = None,
        limit: int = 50,
    ) -> List[CompanyRecord]:
        """Filtered listing; the first supplied filter wins (industry, sector, funding stage)."""
        if industry:
            return self.fetch_by_indexed_field("industry", industry, limit)
        if sector:
            return self.fetch_by_indexed_field("sector", sector, limit)
        if funding_stage:
            return self.fetch_by_indexed_field("funding_stage", funding_stage, limit)
        return self.fetch_all(limit)

    def find_names(self, names: List[str]) -> List[str]:
        """Return which of the given company names already exist."""
        if not names:
            return []
        placeholders = ", ".join("?" for _ in names)
        cur = self.conn.cursor()
        cur.execute(f"SELECT DISTINCT name FROM companies WHERE name IN ({placeholders})", tuple(names))
        return [row[0] for row in cur.fetchall()]

    def count(self) -> int:
        cur = self.conn.cursor()
        cur.execute("SELECT COUNT(*) FROM companies")
        return int(cur.fetchone()[0])
