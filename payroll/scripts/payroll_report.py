#!/usr/bin/env python3
"""Print the salary or log report of a company (demo seed or roster file)."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from payroll.config import settings
from payroll.logic.reports import ReportFactory, export_excel_log, export_excel_salary
from payroll.services.company_registry import CompanyRegistry
from payroll.services.errors import PayrollError, translate_error
from payroll.services.roster_import import load_roster, seed_demo_company


def build_registry(roster: Optional[Path]) -> CompanyRegistry:
    """Load the roster when given, otherwise the demo company."""
    if roster is not None:
        return load_roster(roster)
    registry = CompanyRegistry()
    seed_demo_company(registry)
    return registry


def run_report(kind: str, roster: Optional[Path] = None, excel: Optional[Path] = None) -> str:
    registry = build_registry(roster)
    factory = ReportFactory(registry)
    if kind == "salary":
        report = factory.report_salary()
    else:
        report = factory.report_log()

    if excel is not None:
        excel.parent.mkdir(parents=True, exist_ok=True)
        export = export_excel_salary if kind == "salary" else export_excel_log
        export(registry, excel, report.generated_at)
    return report.render()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Company payroll reports")
    parser.add_argument("kind", choices=["salary", "log"], help="Report to print")
    parser.add_argument("--roster", type=Path, help="CSV or Excel roster to import")
    parser.add_argument("--excel", type=Path, help="Also export the report to this .xlsx file")
    args = parser.parse_args(argv)

    settings.bootstrap_env()

    try:
        text = run_report(args.kind, args.roster, args.excel)
    except (PayrollError, FileNotFoundError) as exc:
        message, solution = translate_error(exc)
        print(f"❌ {message}", file=sys.stderr)
        print(f"   {solution}", file=sys.stderr)
        return 1

    print(text, end="")
    if args.excel is not None:
        print(f"✅ Report exported to {args.excel}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
