#!/usr/bin/env python3
"""
Roster import: build employees and contracts from a CSV or Excel file.

Expected columns (case-insensitive): name, type, rate, hours, salary.
The first row for a name creates the employee, later rows with the same
name add a contract to it. Every row is validated before the registry is
touched, so a faulty roster registers nothing.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import pandas as pd

from payroll.logic.contracts import HourlyTerms, MonthlyTerms, validate_terms
from payroll.logic.employees import Clock, Employee
from payroll.services.company_registry import CompanyRegistry
from payroll.services.errors import PayrollError, RosterImportError
from payroll.utils.parsers import parse_amount, parse_contract_type

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ["name", "type"]
EXCEL_SUFFIXES = {".xlsx", ".xlsm", ".xls"}


def read_roster(path) -> pd.DataFrame:
    """Load a roster file into a DataFrame with lower-cased column names."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Roster file not found: {path}")

    if path.suffix.lower() in EXCEL_SUFFIXES:
        df = pd.read_excel(path, dtype=object)
    else:
        df = pd.read_csv(path, dtype=str, keep_default_na=False)

    df.columns = [str(c).strip().lower() for c in df.columns]
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise RosterImportError(f"Missing required column(s): {', '.join(missing)}")
    return df


def _cell(row, column):
    if column not in row:
        return None
    value = row[column]
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return None
    return value


def _amount(row, column, row_number):
    raw = _cell(row, column)
    value = parse_amount(raw)
    if value is None:
        raise RosterImportError(f"Invalid or missing {column}: {raw!r}", row_number)
    return value


def parse_roster_rows(df: pd.DataFrame) -> list[tuple[str, HourlyTerms | MonthlyTerms]]:
    """Turn roster rows into (name, terms) pairs, in file order."""
    parsed = []
    for position, (_, row) in enumerate(df.iterrows(), 1):
        name = _cell(row, "name")
        name = str(name).strip() if name is not None else ""
        if not name:
            raise RosterImportError("Missing employee name", position)

        kind = parse_contract_type(_cell(row, "type"))
        if kind == "hourly":
            terms = HourlyTerms(
                rate=_amount(row, "rate", position),
                hours=_amount(row, "hours", position),
            )
        elif kind == "monthly":
            terms = MonthlyTerms(salary=_amount(row, "salary", position))
        else:
            raise RosterImportError(
                f"Unknown contract type: {_cell(row, 'type')!r}", position
            )

        try:
            validate_terms(terms)
        except PayrollError as exc:
            raise RosterImportError(str(exc), position) from exc
        parsed.append((name, terms))
    return parsed


def load_roster(
    path,
    registry: Optional[CompanyRegistry] = None,
    clock: Optional[Clock] = None,
) -> CompanyRegistry:
    """Import a roster file into ``registry`` (a new one when omitted)."""
    rows = parse_roster_rows(read_roster(path))
    registry = registry if registry is not None else CompanyRegistry()

    created: dict[str, Employee] = {}
    for name, terms in rows:
        employee = created.get(name)
        if employee is None:
            employee = Employee(name, [terms], clock=clock)
            created[name] = employee
            registry.add_employee(employee)
        else:
            employee.create_contract(terms)

    logger.info(f"Roster {path}: {len(rows)} contract(s) for {len(created)} employee(s)")
    return registry


def seed_demo_company(registry: CompanyRegistry, clock: Optional[Clock] = None) -> Employee:
    """Register the start-up demo employee (one monthly, one hourly contract)."""
    employee = Employee("juyan", [MonthlyTerms(salary=1000)], clock=clock)
    employee.create_contract(HourlyTerms(rate=5, hours=10))
    registry.add_employee(employee)
    return employee
