from __future__ import annotations

from typing import Dict, List

from data_validator import DataValidator
from pipelines.runner import RunContext


class ValidateCompanies:
    def __init__(self) -> None:
        self.validator = DataValidator()

    def run(self, ctx: RunContext) -> RunContext:
        companies: List[Dict] = ctx.companies or []
        if not companies:
            ctx.companies = []
            return ctx

        # Clean first so form-style values ("12M", "A, B") validate as typed fields
        cleaned = [self.validator.clean_company_data(c) for c in companies]
        valid = self.validator.validate_all_companies(cleaned)
        unique = self.validator.remove_company_duplicates(valid)

        ctx.companies = unique
        ctx.meta["invalid_companies"] = self.validator.get_validation_stats()["invalid_companies"]
        return ctx
