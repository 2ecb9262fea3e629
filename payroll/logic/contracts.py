# logic/contracts.py - contract terms (hourly / monthly) and amount computation
from __future__ import annotations

import json
import math
from dataclasses import asdict, dataclass, replace
from typing import Union, assert_never

from payroll.logic.formatting import fmt_number
from payroll.services.errors import InvalidContractTerms


@dataclass(frozen=True)
class HourlyTerms:
    """Pay accrued as ``rate * hours``."""

    rate: float
    hours: float = 0


@dataclass(frozen=True)
class MonthlyTerms:
    """Fixed monthly salary."""

    salary: float


ContractTerms = Union[HourlyTerms, MonthlyTerms]


def _check_amount(field_name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidContractTerms(f"{field_name} must be a number, got {value!r}")
    if not math.isfinite(value) or value < 0:
        raise InvalidContractTerms(
            f"{field_name} must be a finite non-negative number, got {value!r}"
        )


def validate_terms(terms: ContractTerms) -> None:
    """Raise InvalidContractTerms unless every amount is finite and >= 0."""
    if isinstance(terms, MonthlyTerms):
        _check_amount("salary", terms.salary)
    elif isinstance(terms, HourlyTerms):
        _check_amount("rate", terms.rate)
        _check_amount("hours", terms.hours)
    else:
        raise InvalidContractTerms(f"Unsupported contract terms: {terms!r}")


def compute_amount(terms: ContractTerms) -> float:
    if isinstance(terms, MonthlyTerms):
        return terms.salary
    if isinstance(terms, HourlyTerms):
        return terms.rate * terms.hours
    assert_never(terms)


def kind_label(terms: ContractTerms) -> str:
    if isinstance(terms, MonthlyTerms):
        return "Monthly"
    if isinstance(terms, HourlyTerms):
        return "Hourly"
    assert_never(terms)


def describe_terms(terms: ContractTerms) -> str:
    """Human-readable snapshot, e.g. ``Hourly, Rate = 5, Hours = 10``."""
    if isinstance(terms, MonthlyTerms):
        return f"Monthly, Salary = {fmt_number(terms.salary)}"
    if isinstance(terms, HourlyTerms):
        return (
            f"Hourly, Rate = {fmt_number(terms.rate)}, "
            f"Hours = {fmt_number(terms.hours)}"
        )
    assert_never(terms)


def terms_to_json(terms: ContractTerms) -> str:
    return json.dumps(asdict(terms))


class Contract:
    """One pay arrangement of an employee.

    The kind of terms never changes; only the hours of an hourly contract
    move, and only through ``Employee.log_work``.
    """

    __slots__ = ("_terms",)

    def __init__(self, terms: ContractTerms):
        validate_terms(terms)
        self._terms = terms

    @property
    def terms(self) -> ContractTerms:
        return self._terms

    @property
    def is_hourly(self) -> bool:
        return isinstance(self._terms, HourlyTerms)

    @property
    def kind(self) -> str:
        return kind_label(self._terms)

    def amount(self) -> float:
        return compute_amount(self._terms)

    def describe(self) -> str:
        return describe_terms(self._terms)

    def _add_hours(self, delta: float) -> None:
        terms = self._terms
        if not isinstance(terms, HourlyTerms):
            raise TypeError("hours can only be added to an hourly contract")
        self._terms = replace(terms, hours=terms.hours + delta)

    def __repr__(self):
        return f"Contract({self._terms!r})"
