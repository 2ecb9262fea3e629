"""Error kinds raised by the payroll core, and their user-facing translation.

Every error is recoverable: an operation that raises one of these has not
mutated any employee, contract or audit log.
"""

from __future__ import annotations

from typing import Optional, Tuple


class PayrollError(Exception):
    """Base class for every error raised by the payroll core."""


class InvalidIndex(PayrollError, IndexError):
    """Contract index outside the current bounds of an employee's contracts."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(
            f"Invalid contract index: {index} (employee has {size} contract(s))"
        )


class NotHourlyContract(PayrollError):
    """Work logged against a contract that is not hourly."""

    def __init__(self, index: int):
        self.index = index
        super().__init__("Selected contract is not an hourly contract")


class EmployeeNotFound(PayrollError, LookupError):
    """Name lookup miss in the company registry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Employee not found: {name!r}")


class InvalidContractTerms(PayrollError, ValueError):
    """Rate, hours or salary that is not a finite non-negative number."""


class RosterImportError(PayrollError):
    """A roster file row that cannot be turned into an employee contract."""

    def __init__(self, message: str, row: Optional[int] = None):
        self.row = row
        if row is not None:
            message = f"Row {row}: {message}"
        super().__init__(message)


def translate_error(
    error: Exception, error_message: Optional[str] = None
) -> Tuple[str, str]:
    """
    Translate an error into a simple user message.

    Args:
        error: raised exception
        error_message: message override (defaults to str(error))

    Returns:
        Tuple (user_message, solution)
    """
    if error_message is None:
        error_message = str(error)

    if isinstance(error, InvalidIndex):
        index = error.index
        # displayed contracts are 1-based
        label = index + 1 if isinstance(index, int) and not isinstance(index, bool) else repr(index)
        return (
            f"Contract {label} does not exist for this employee.",
            "Pick one of the contracts listed for the employee and try again.",
        )

    if isinstance(error, NotHourlyContract):
        return (
            "Selected contract is not an hourly contract.",
            "Work hours can only be logged on hourly contracts.",
        )

    if isinstance(error, EmployeeNotFound):
        return (
            f"No employee named '{error.name}' is registered.",
            "Check the spelling of the name or add the employee first.",
        )

    if isinstance(error, InvalidContractTerms):
        return (
            f"The contract values are not valid: {error_message}",
            "Rates, hours and salaries must be positive numbers or zero.",
        )

    if isinstance(error, RosterImportError):
        return (
            f"The roster file could not be imported. {error_message}",
            "Fix the indicated row of the roster file and import it again.",
        )

    if isinstance(error, FileNotFoundError):
        return (
            "The selected file no longer exists.",
            "Check the file path and try again.",
        )

    return (
        f"An unexpected error occurred: {error_message}",
        "Try again. If the problem persists, check the application logs.",
    )
