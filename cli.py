import argparse
import json
from typing import Any, Dict, List

from pydantic import ValidationError

from config.settings import get_settings
from data_validator import DataValidator
from db.connection import open_store
from db.repos.companies_repo import CompaniesRepo, CompanyNotFoundError, NotAuthenticatedError
from db.repos.reports_repo import ReportsRepo
from models.company_record import CompanyRecord
from models.market_report import MarketReport
from pipelines.seed_demo import seed_demo
from services.growth import classify_growth_rate, growth_trend
from services.market_analysis import MarketAnalysisService, search_companies
from services.reporting import (
    build_key_findings,
    print_growth_summary,
    print_landscape_summary,
    print_stats_summary,
    print_targets_summary,
)
from utils.logging_setup import init_logging


# (flag, field) pairs shared by add-company and update-company
_COMPANY_FIELD_ARGS = [
    ("--description", "description"),
    ("--website", "website"),
    ("--location", "location"),
    ("--year-founded", "year_founded"),
    ("--headcount", "headcount"),
    ("--funding-stage", "funding_stage"),
    ("--total-funding", "total_funding"),
    ("--revenue", "revenue"),
    ("--growth-rate", "growth_rate"),
    ("--employee-growth-rate", "employee_growth_rate"),
    ("--key-technologies", "key_technologies"),
    ("--competitive-position", "competitive_position"),
    ("--acquisition-suitability", "acquisition_suitability"),
    ("--investment-potential", "investment_potential"),
    ("--technical-differentiators", "technical_differentiators"),
    ("--patents", "patents"),
]


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _dump(records) -> List[Dict[str, Any]]:
    return [r.model_dump(mode="json") for r in records]


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: {value}")
    return number


def _fields_from_args(args, names: List[str]) -> Dict[str, Any]:
    return {name: getattr(args, name) for name in names if getattr(args, name, None) is not None}


def _service(args) -> MarketAnalysisService:
    return MarketAnalysisService(CompaniesRepo(open_store(args.db)))


def cmd_bootstrap(args):
    conn = open_store(args.db)
    if get_settings().demo:
        _print_json(seed_demo(conn, created_by=args.user))
        return
    print("Schema ready")


def cmd_add_company(args):
    conn = open_store(args.db)
    validator = DataValidator()
    raw = _fields_from_args(args, ["name", "industry", "sector"] + [f for _, f in _COMPANY_FIELD_ARGS])
    cleaned = validator.clean_company_data(raw)
    unparsable = validator.find_unparsable_values(raw, cleaned)
    if unparsable:
        raise ValueError("; ".join(unparsable))
    result = validator.validate_company_data(cleaned)
    if not result["is_valid"]:
        raise ValueError("; ".join(result["errors"]))
    record = CompanyRecord.model_validate(cleaned)
    company_id = CompaniesRepo(conn).create_company(record, created_by=args.user)
    _print_json({"id": company_id})


def cmd_update_company(args):
    conn = open_store(args.db)
    fields = _fields_from_args(args, ["name", "industry", "sector"] + [f for _, f in _COMPANY_FIELD_ARGS])
    if not fields:
        raise ValueError("Nothing to update")
    validator = DataValidator()
    cleaned = validator.clean_company_data(fields)
    unparsable = validator.find_unparsable_values(fields, cleaned)
    if unparsable:
        raise ValueError("; ".join(unparsable))
    CompaniesRepo(conn).update_company(args.id, cleaned, updated_by=args.user)
    print(f"Updated company {args.id}")


def cmd_delete_company(args):
    conn = open_store(args.db)
    CompaniesRepo(conn).delete_company(args.id, deleted_by=args.user)
    print(f"Deleted company {args.id}")


def cmd_show_company(args):
    conn = open_store(args.db)
    record = CompaniesRepo(conn).get_company(args.id)
    if record is None:
        raise CompanyNotFoundError(args.id)
    _print_json(record.model_dump(mode="json"))


def cmd_list_companies(args):
    conn = open_store(args.db)
    companies = CompaniesRepo(conn).list_companies(
        industry=args.industry,
        sector=args.sector,
        funding_stage=args.funding_stage,
        limit=args.limit,
    )
    _print_json(_dump(search_companies(companies, args.search)))


def cmd_stats(args):
    stats = _service(args).get_industry_stats()
    if args.text:
        print_stats_summary(stats)
        return
    _print_json(stats.model_dump(mode="json"))


def cmd_targets(args):
    targets = _service(args).generate_acquisition_targets(industry=args.industry, min_score=args.min_score)
    if args.text:
        print_targets_summary(targets)
        return
    _print_json(_dump(targets))


def cmd_landscape(args):
    landscape = _service(args).get_competitive_landscape(args.industry)
    if args.text:
        print_landscape_summary(args.industry, landscape)
        return
    _print_json(landscape.model_dump(mode="json"))


def cmd_growth(args):
    growth = _service(args).get_growth_analysis(limit=args.limit)
    if args.text:
        print_growth_summary(growth)
        return
    _print_json({
        "avg_growth_rate": growth.avg_growth_rate,
        "companies_with_growth": len(growth.companies_with_growth),
        "high_growth_companies": [
            {
                **c.model_dump(mode="json"),
                "growth_class": classify_growth_rate(c.growth_rate or 0.0),
                "growth_trend": growth_trend(c.growth_rate or 0.0),
            }
            for c in growth.high_growth_companies
        ],
        "funding_by_stage": {
            stage: {
                "count": group.count,
                "total_funding": group.total_funding,
                "average_funding": group.average_funding,
            }
            for stage, group in growth.funding_by_stage.items()
        },
    })


def cmd_report_draft(args):
    conn = open_store(args.db)
    service = MarketAnalysisService(CompaniesRepo(conn))
    stats = service.get_industry_stats()
    growth = service.get_growth_analysis()
    targets = service.generate_acquisition_targets(industry=args.industry)
    report = MarketReport(
        title=args.title or f"{args.industry} market analysis",
        industry=args.industry,
        sector=args.sector,
        summary=(
            f"{stats.industries_count.get(args.industry, 0)} tracked {args.industry} companies; "
            f"{len(targets)} acquisition targets at the default threshold."
        ),
        key_findings=build_key_findings(stats, growth),
        recommendations=[f"Review {c.name} as an acquisition target" for c in targets[:3]],
        companies_analyzed=[c.id for c in targets if c.id is not None],
    )
    if args.save:
        report.created_by = args.user
        report.id = ReportsRepo(conn).create_report(report, created_by=args.user)
    _print_json(report.model_dump(mode="json"))


def cmd_report_create(args):
    conn = open_store(args.db)
    report = MarketReport(
        title=args.title,
        industry=args.industry,
        sector=args.sector,
        summary=args.summary,
        key_findings=args.finding or [],
        recommendations=args.recommendation or [],
        companies_analyzed=args.company_id or [],
    )
    report_id = ReportsRepo(conn).create_report(report, created_by=args.user)
    _print_json({"id": report_id})


def cmd_report_list(args):
    conn = open_store(args.db)
    reports = ReportsRepo(conn).list_reports(industry=args.industry, limit=args.limit)
    _print_json(_dump(reports))


def cmd_run(args):
    if args.pipeline == "seed-demo":
        conn = open_store(args.db)
        _print_json(seed_demo(conn, created_by=args.user))


def _add_company_field_args(parser: argparse.ArgumentParser) -> None:
    for flag, dest in _COMPANY_FIELD_ARGS:
        parser.add_argument(flag, dest=dest, default=None)


def main():
    settings = get_settings()
    init_logging(settings.log_level)
    parser = argparse.ArgumentParser(description="Market intelligence CLI")
    parser.add_argument("--db", default=settings.db_path, help="Path to SQLite DB (default from settings)")
    parser.add_argument("--user", default=settings.default_user, help="Principal for writes (default: MARKET_USER)")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_boot = sub.add_parser("bootstrap", help="Create tables and indexes")
    p_boot.set_defaults(func=cmd_bootstrap)

    p_add = sub.add_parser("add-company", help="Create a company record")
    p_add.add_argument("--name", required=True)
    p_add.add_argument("--industry", required=True)
    p_add.add_argument("--sector", required=True)
    _add_company_field_args(p_add)
    p_add.set_defaults(func=cmd_add_company)

    p_upd = sub.add_parser("update-company", help="Patch fields of a company record")
    p_upd.add_argument("--id", type=int, required=True)
    p_upd.add_argument("--name", default=None)
    p_upd.add_argument("--industry", default=None)
    p_upd.add_argument("--sector", default=None)
    _add_company_field_args(p_upd)
    p_upd.set_defaults(func=cmd_update_company)

    p_del = sub.add_parser("delete-company", help="Permanently delete a company record")
    p_del.add_argument("--id", type=int, required=True)
    p_del.set_defaults(func=cmd_delete_company)

    p_show = sub.add_parser("show-company", help="Show one company record")
    p_show.add_argument("--id", type=int, required=True)
    p_show.set_defaults(func=cmd_show_company)

    p_list = sub.add_parser("list-companies", help="List companies (first filter given wins)")
    p_list.add_argument("--industry", default=None)
    p_list.add_argument("--sector", default=None)
    p_list.add_argument("--funding-stage", default=None)
    p_list.add_argument("--search", default=None, help="Case-insensitive match on name or description")
    p_list.add_argument("--limit", type=_positive_int, default=settings.default_list_limit)
    p_list.set_defaults(func=cmd_list_companies)

    p_stats = sub.add_parser("stats", help="Industry, sector and funding statistics")
    p_stats.add_argument("--text", action="store_true", help="Print a readable summary instead of JSON")
    p_stats.set_defaults(func=cmd_stats)

    p_tgt = sub.add_parser("targets", help="Rank acquisition targets by suitability")
    p_tgt.add_argument("--industry", default=None)
    p_tgt.add_argument("--min-score", type=int, default=None, help="Minimum suitability (default: 5)")
    p_tgt.add_argument("--text", action="store_true")
    p_tgt.set_defaults(func=cmd_targets)

    p_land = sub.add_parser("landscape", help="Leaders, challengers and emerging players of an industry")
    p_land.add_argument("--industry", required=True)
    p_land.add_argument("--text", action="store_true")
    p_land.set_defaults(func=cmd_landscape)

    p_gro = sub.add_parser("growth", help="Growth rates and funding by stage")
    p_gro.add_argument("--limit", type=_positive_int, default=settings.growth_sample_limit)
    p_gro.add_argument("--text", action="store_true")
    p_gro.set_defaults(func=cmd_growth)

    p_rd = sub.add_parser("report-draft", help="Draft a market report from the current analysis")
    p_rd.add_argument("--industry", required=True)
    p_rd.add_argument("--sector", required=True)
    p_rd.add_argument("--title", default=None)
    p_rd.add_argument("--save", action="store_true", help="Persist the drafted report")
    p_rd.set_defaults(func=cmd_report_draft)

    p_rc = sub.add_parser("report-create", help="Store a market report")
    p_rc.add_argument("--title", required=True)
    p_rc.add_argument("--industry", required=True)
    p_rc.add_argument("--sector", required=True)
    p_rc.add_argument("--summary", required=True)
    p_rc.add_argument("--finding", action="append", help="Key finding (repeatable)")
    p_rc.add_argument("--recommendation", action="append", help="Recommendation (repeatable)")
    p_rc.add_argument("--company-id", type=int, action="append", help="Analyzed company id (repeatable)")
    p_rc.set_defaults(func=cmd_report_create)

    p_rl = sub.add_parser("report-list", help="List market reports, newest first")
    p_rl.add_argument("--industry", default=None)
    p_rl.add_argument("--limit", type=_positive_int, default=settings.default_report_limit)
    p_rl.set_defaults(func=cmd_report_list)

    p_run = sub.add_parser("run", help="Run a named pipeline")
    p_run.add_argument("pipeline", choices=["seed-demo"], help="Pipeline to run")
    p_run.set_defaults(func=cmd_run)

    args = parser.parse_args()
    try:
        args.func(args)
    except NotAuthenticatedError as exc:
        parser.exit(1, f"error: {exc}\n")
    except CompanyNotFoundError as exc:
        parser.exit(1, f"error: company not found: {exc.args[0]}\n")
    except (ValidationError, ValueError) as exc:
        parser.exit(1, f"error: {exc}\n")


if __name__ == "__main__":
    main()
