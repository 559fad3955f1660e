from __future__ import annotations

import sqlite3
from typing import Any, Dict, Optional

from db.repos.companies_repo import CompaniesRepo
from pipelines.runner import Pipeline, RunContext
from pipelines.steps.load_demo_companies import LoadDemoCompanies
from pipelines.steps.persist_companies import PersistCompanies
from pipelines.steps.validate_companies import ValidateCompanies


def seed_demo(conn: sqlite3.Connection, created_by: Optional[str] = None) -> Dict[str, Any]:
    """Insert the demo company set once; later runs create nothing.

    created_by is optional here; demo seeding is allowed without a principal.
    """
    ctx = RunContext(created_by=created_by)
    pipeline = Pipeline([
        LoadDemoCompanies(conn),
        ValidateCompanies(),
        PersistCompanies(conn),
    ])
    ctx = pipeline.run(ctx)
    created = int(ctx.meta.get("processed_companies") or 0)
    if ctx.meta.get("demo_already_seeded"):
        message = "Demo companies already exist"
    else:
        message = f"Successfully created {created} demo companies"
    return {
        "companies_created": created,
        "message": message,
        "total_companies": CompaniesRepo(conn).count(),
    }
