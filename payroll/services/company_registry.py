# services/company_registry.py
"""Company-wide collection of employees.

A registry is an ordinary object: build as many as needed (tests do) and
pass it to whatever needs it. ``get_instance()`` keeps a lazily created
process default for drivers that want a single shared company.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional, Tuple

from payroll.logic.employees import Employee
from payroll.services.errors import EmployeeNotFound

logger = logging.getLogger(__name__)


class CompanyRegistry:
    """Ordered employees of one company.

    Names are not unique; lookups return the first employee registered
    under a name.
    """

    _instance: Optional["CompanyRegistry"] = None
    _instance_lock = threading.Lock()

    def __init__(self, name: str = ""):
        self.name = name
        self._employees: list[Employee] = []
        self._lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> "CompanyRegistry":
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
                logger.debug("Default company registry created")
            return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the process default (the next get_instance() builds a new one)."""
        with cls._instance_lock:
            cls._instance = None

    def add_employee(self, employee: Employee) -> None:
        with self._lock:
            self._employees.append(employee)
        logger.info(f"Employee {employee.name} registered ({len(self._employees)} total)")

    def get_employees(self) -> Tuple[Employee, ...]:
        return tuple(self._employees)

    def employee_names(self) -> list[str]:
        return [e.name for e in self._employees]

    def find_employee_by_name(self, name: str) -> Optional[Employee]:
        return next((e for e in self._employees if e.name == name), None)

    def get_employee(self, name: str) -> Employee:
        employee = self.find_employee_by_name(name)
        if employee is None:
            logger.warning(f"Employee not found: {name!r}")
            raise EmployeeNotFound(name)
        return employee

    def total_salary(self) -> float:
        return sum(e.get_salary() for e in self._employees)

    def total_worked_hours(self) -> float:
        return sum(e.worked_hours() for e in self._employees)

    def __len__(self):
        return len(self._employees)


def get_instance() -> CompanyRegistry:
    return CompanyRegistry.get_instance()
