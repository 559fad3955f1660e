from __future__ import annotations

import logging
from typing import Dict, List
import sqlite3

from data_validator import DataValidator
from db.repos.companies_repo import CompaniesRepo
from pipelines.runner import RunContext


logger = logging.getLogger(__name__)


class PersistCompanies:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn
        self.validator = DataValidator()

    def run(self, ctx: RunContext) -> RunContext:
        companies: List[Dict] = ctx.companies or []
        repo = CompaniesRepo(self.conn)
        processed = 0
        for c in companies:
            record = self.validator.to_record(c)
            if record is None:
                continue
            repo.insert_company(record, created_by=ctx.created_by)
            processed += 1
        ctx.meta["processed_companies"] = processed
        logger.info("Companies persisted", extra={"op": "persist_companies", "status": "ok", "count": processed})
        return ctx
