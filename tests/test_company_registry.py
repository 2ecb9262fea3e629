import pytest

from payroll.logic.contracts import HourlyTerms, MonthlyTerms
from payroll.logic.employees import create_employee
from payroll.services.company_registry import CompanyRegistry, get_instance
from payroll.services.errors import EmployeeNotFound


def test_get_instance_returns_same_registry():
    assert get_instance() is get_instance()
    assert CompanyRegistry.get_instance() is get_instance()


def test_independent_registries(registry, clock):
    other = CompanyRegistry()
    registry.add_employee(create_employee("Alice", clock=clock))
    assert len(registry) == 1
    assert len(other) == 0


def test_add_and_list_in_order(registry, clock):
    for name in ["Alice", "Bob", "Carol"]:
        registry.add_employee(create_employee(name, clock=clock))
    assert registry.employee_names() == ["Alice", "Bob", "Carol"]
    assert [e.name for e in registry.get_employees()] == ["Alice", "Bob", "Carol"]


def test_get_employees_is_a_read_view(registry, clock):
    registry.add_employee(create_employee("Alice", clock=clock))
    view = registry.get_employees()
    assert isinstance(view, tuple)
    registry.add_employee(create_employee("Bob", clock=clock))
    assert len(view) == 1


def test_duplicate_names_return_first_match(registry, clock):
    first = create_employee("Sam", [MonthlyTerms(salary=1)], clock=clock)
    second = create_employee("Sam", [MonthlyTerms(salary=2)], clock=clock)
    registry.add_employee(first)
    registry.add_employee(second)

    assert len(registry) == 2
    assert registry.find_employee_by_name("Sam") is first
    assert registry.get_employee("Sam") is first


def test_lookup_miss(registry):
    assert registry.find_employee_by_name("Nobody") is None
    with pytest.raises(EmployeeNotFound) as excinfo:
        registry.get_employee("Nobody")
    assert excinfo.value.name == "Nobody"


def test_lookup_is_exact(registry, clock):
    registry.add_employee(create_employee("Alice", clock=clock))
    assert registry.find_employee_by_name("alice") is None
    assert registry.find_employee_by_name("Alice ") is None


def test_company_totals(registry, clock):
    alice = create_employee("Alice", [HourlyTerms(rate=5, hours=16)], clock=clock)
    bob = create_employee("Bob", [MonthlyTerms(salary=500)], clock=clock)
    registry.add_employee(alice)
    registry.add_employee(bob)

    assert registry.total_salary() == alice.get_salary() + bob.get_salary() == 580
    assert registry.total_worked_hours() == 16
