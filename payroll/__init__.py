"""Company payroll: employees, hourly/monthly contracts, audit trail and reports."""

from payroll.logic.contracts import Contract, HourlyTerms, MonthlyTerms, compute_amount
from payroll.logic.employees import Employee, create_employee
from payroll.logic.reports import ReportFactory, render_header
from payroll.services.company_registry import CompanyRegistry, get_instance
from payroll.services.errors import (
    EmployeeNotFound,
    InvalidIndex,
    NotHourlyContract,
    PayrollError,
)

__version__ = "0.1.0"

__all__ = [
    "CompanyRegistry",
    "Contract",
    "Employee",
    "EmployeeNotFound",
    "HourlyTerms",
    "InvalidIndex",
    "MonthlyTerms",
    "NotHourlyContract",
    "PayrollError",
    "ReportFactory",
    "compute_amount",
    "create_employee",
    "get_instance",
    "render_header",
]
