# logic/reports.py - salary and log reports, text rendering and Excel export
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional, Tuple

import pandas as pd
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from payroll.logic.audit import LogEntry
from payroll.logic.contracts import HourlyTerms, MonthlyTerms
from payroll.logic.formatting import fmt_date, fmt_number, fmt_time, fmt_timestamp
from payroll.services.company_registry import CompanyRegistry

logger = logging.getLogger(__name__)

SALARY_REPORT_TITLE = "salary report"
LOG_REPORT_TITLE = "log report"
NO_LOGS_MARKER = "  No logs available for this employee."

# report table header sits on row 4, under the title and the report header
TABLE_START_ROW = 3
SALARY_MONEY_COLUMNS = ("Rate", "Salary", "Amount")
MONEY_FORMAT = "#,##0.00"


def render_header(title: str, now: datetime) -> str:
    """Header line shared by every report kind."""
    return f"This is the {title} of {fmt_date(now)} {fmt_time(now)}:"


# === Salary report ============================================================
@dataclass(frozen=True)
class SalaryLine:
    contract: int  # 1-based, as displayed
    kind: str
    amount: float


@dataclass(frozen=True)
class EmployeeSalary:
    name: str
    lines: Tuple[SalaryLine, ...]
    total: float


@dataclass(frozen=True)
class SalaryReport:
    generated_at: datetime
    employees: Tuple[EmployeeSalary, ...]
    total: float

    @property
    def header(self) -> str:
        return render_header(SALARY_REPORT_TITLE, self.generated_at)

    def render(self) -> str:
        out = [self.header]
        for emp in self.employees:
            out.append(f"{emp.name}:")
            for line in emp.lines:
                out.append(
                    f"  Contract {line.contract} ({line.kind}): {fmt_number(line.amount)}"
                )
            out.append(f"  Employee Total: {fmt_number(emp.total)}")
            out.append("")
        out.append(f"Overall Total: {fmt_number(self.total)}")
        return "\n".join(out) + "\n"

    def __str__(self):
        return self.render()


def build_salary_report(registry: CompanyRegistry, now: datetime) -> SalaryReport:
    employees = []
    total = 0
    for employee in registry.get_employees():
        employee_total = 0
        lines = []
        for index, contract in enumerate(employee.contracts):
            amount = contract.amount()
            lines.append(SalaryLine(index + 1, contract.kind, amount))
            employee_total += amount
        employees.append(EmployeeSalary(employee.name, tuple(lines), employee_total))
        total += employee_total

    logger.debug(f"Salary report built for {len(employees)} employee(s), total={total}")
    return SalaryReport(generated_at=now, employees=tuple(employees), total=total)


# === Log report ===============================================================
@dataclass(frozen=True)
class EmployeeLog:
    name: str
    entries: Tuple[LogEntry, ...]


@dataclass(frozen=True)
class LogReport:
    generated_at: datetime
    employees: Tuple[EmployeeLog, ...]
    total_worked_hours: float

    @property
    def header(self) -> str:
        return render_header(LOG_REPORT_TITLE, self.generated_at)

    def render(self) -> str:
        out = [self.header]
        for emp in self.employees:
            out.append(f"Employee: {emp.name}")
            if emp.entries:
                for i, entry in enumerate(emp.entries, 1):
                    out.append(
                        f"  Log {i}: [{fmt_timestamp(entry.timestamp)}] "
                        f"{entry.action.value} - {entry.details}"
                    )
            else:
                out.append(NO_LOGS_MARKER)
            out.append("")
        out.append(f"Total Worked Hours: {fmt_number(self.total_worked_hours)}")
        return "\n".join(out) + "\n"

    def __str__(self):
        return self.render()


def build_log_report(registry: CompanyRegistry, now: datetime) -> LogReport:
    employees = []
    total_hours = 0
    for employee in registry.get_employees():
        employees.append(EmployeeLog(employee.name, employee.get_log()))
        for _, contract in employee.hourly_contracts():
            total_hours += contract.terms.hours

    logger.debug(f"Log report built for {len(employees)} employee(s), hours={total_hours}")
    return LogReport(
        generated_at=now, employees=tuple(employees), total_worked_hours=total_hours
    )


# === Factory ==================================================================
class AbstractReportFactory(ABC):
    """Creates every kind of report; callers never build report types directly."""

    @abstractmethod
    def report_salary(self) -> SalaryReport:
        pass

    @abstractmethod
    def report_log(self) -> LogReport:
        pass


class ReportFactory(AbstractReportFactory):
    def __init__(
        self,
        registry: Optional[CompanyRegistry] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.registry = registry if registry is not None else CompanyRegistry.get_instance()
        self.clock = clock or datetime.now

    def report_salary(self) -> SalaryReport:
        report = build_salary_report(self.registry, self.clock())
        logger.info(f"Salary report generated (total={fmt_number(report.total)})")
        return report

    def report_log(self) -> LogReport:
        report = build_log_report(self.registry, self.clock())
        logger.info(
            f"Log report generated (worked hours={fmt_number(report.total_worked_hours)})"
        )
        return report


# === Tabular views ============================================================
def salary_dataframe(registry: CompanyRegistry) -> pd.DataFrame:
    rows = []
    for employee in registry.get_employees():
        for index, contract in enumerate(employee.contracts):
            terms = contract.terms
            rows.append(
                {
                    "Employee": employee.name,
                    "Contract": index + 1,
                    "Type": contract.kind,
                    "Rate": terms.rate if isinstance(terms, HourlyTerms) else None,
                    "Hours": terms.hours if isinstance(terms, HourlyTerms) else None,
                    "Salary": terms.salary if isinstance(terms, MonthlyTerms) else None,
                    "Amount": contract.amount(),
                }
            )
    return pd.DataFrame(
        rows,
        columns=["Employee", "Contract", "Type", "Rate", "Hours", "Salary", "Amount"],
    )


def log_dataframe(registry: CompanyRegistry) -> pd.DataFrame:
    rows = [
        {
            "Employee": employee.name,
            "Log": i,
            "Timestamp": fmt_timestamp(entry.timestamp),
            "Action": entry.action.value,
            "Details": entry.details,
        }
        for employee in registry.get_employees()
        for i, entry in enumerate(employee.get_log(), 1)
    ]
    return pd.DataFrame(rows, columns=["Employee", "Log", "Timestamp", "Action", "Details"])


def export_excel_salary(registry, filepath, now=None):
    now = now or datetime.now()
    df = salary_dataframe(registry)
    if not df.empty:
        total = build_salary_report(registry, now).total
        total_row = pd.DataFrame([{"Employee": "Overall Total", "Amount": total}])
        df = pd.concat([df, total_row], ignore_index=True)
        # contract numbers stay whole, the total row leaves them blank
        df["Contract"] = df["Contract"].astype("Int64")
    _write_report_sheet(
        df,
        filepath,
        "Salary report",
        render_header(SALARY_REPORT_TITLE, now),
        money_columns=SALARY_MONEY_COLUMNS,
        total_row=not df.empty,
    )


def export_excel_log(registry, filepath, now=None):
    now = now or datetime.now()
    df = log_dataframe(registry)
    _write_report_sheet(df, filepath, "Log report", render_header(LOG_REPORT_TITLE, now))


def _write_report_sheet(df, filepath, title, header_line, money_columns=(), total_row=False):
    """Write one report to the ``Rapport`` sheet: title, report header, table.

    ``money_columns`` get a two-decimal format; with ``total_row`` the last
    table row is the company total and is set in bold.
    """
    if df.empty:
        df = pd.DataFrame({"Info": ["No data available"]})
        total_row = False

    first_data_row = TABLE_START_ROW + 2
    last_data_row = first_data_row + len(df) - 1

    with pd.ExcelWriter(filepath, engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name="Rapport", index=False, startrow=TABLE_START_ROW)
        ws = writer.sheets["Rapport"]

        ws.cell(1, 1, title).font = Font(size=14, bold=True)
        ws.cell(2, 1, header_line).font = Font(italic=True)

        for col_idx, col_name in enumerate(df.columns, 1):
            letter = get_column_letter(col_idx)
            ws.column_dimensions[letter].width = min(
                max(len(str(col_name)), int(df[col_name].astype(str).str.len().max())) + 2,
                50,
            )
            if col_name in money_columns:
                for (cell,) in ws[f"{letter}{first_data_row}:{letter}{last_data_row}"]:
                    cell.number_format = MONEY_FORMAT

        if total_row:
            for cell in ws[last_data_row]:
                cell.font = Font(bold=True)

    logger.info(f"{title} exported to {filepath} ({len(df)} row(s))")
