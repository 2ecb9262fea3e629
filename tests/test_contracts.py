import pytest

from payroll.logic.contracts import (
    Contract,
    HourlyTerms,
    MonthlyTerms,
    compute_amount,
    describe_terms,
    terms_to_json,
)
from payroll.services.errors import InvalidContractTerms


@pytest.mark.parametrize("salary", [0, 500, 1000.5])
def test_monthly_amount_is_salary(salary):
    assert compute_amount(MonthlyTerms(salary=salary)) == salary


@pytest.mark.parametrize("rate,hours", [(5, 10), (12.5, 3.5), (0, 40), (20, 0)])
def test_hourly_amount_is_rate_times_hours(rate, hours):
    assert compute_amount(HourlyTerms(rate=rate, hours=hours)) == pytest.approx(rate * hours)


def test_describe_terms():
    assert describe_terms(MonthlyTerms(salary=1000)) == "Monthly, Salary = 1000"
    assert describe_terms(MonthlyTerms(salary=1000.0)) == "Monthly, Salary = 1000"
    assert describe_terms(HourlyTerms(rate=5, hours=10.5)) == "Hourly, Rate = 5, Hours = 10.5"


def test_terms_to_json():
    assert terms_to_json(HourlyTerms(rate=5, hours=10)) == '{"rate": 5, "hours": 10}'
    assert terms_to_json(MonthlyTerms(salary=1000)) == '{"salary": 1000}'


def test_contract_kind_and_amount():
    hourly = Contract(HourlyTerms(rate=5, hours=10))
    monthly = Contract(MonthlyTerms(salary=800))

    assert hourly.is_hourly and hourly.kind == "Hourly"
    assert not monthly.is_hourly and monthly.kind == "Monthly"
    assert hourly.amount() == 50
    assert monthly.amount() == 800


@pytest.mark.parametrize(
    "terms",
    [
        MonthlyTerms(salary=-1),
        HourlyTerms(rate=-5, hours=1),
        HourlyTerms(rate=5, hours=-1),
        HourlyTerms(rate=float("nan"), hours=1),
        MonthlyTerms(salary="1000"),
        MonthlyTerms(salary=True),
    ],
)
def test_invalid_terms_rejected(terms):
    with pytest.raises(InvalidContractTerms):
        Contract(terms)


def test_unknown_terms_rejected():
    with pytest.raises(InvalidContractTerms):
        Contract({"salary": 1000})
