# logic/employees.py - employee, contract lifecycle and audit logging
from __future__ import annotations

import logging
import math
from datetime import datetime
from typing import Callable, Iterable, Iterator, Optional, Tuple, Union

from payroll.logic.audit import AuditLog, LogAction, LogEntry
from payroll.logic.contracts import Contract, ContractTerms, terms_to_json
from payroll.logic.formatting import fmt_number
from payroll.services.errors import InvalidContractTerms, InvalidIndex, NotHourlyContract

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _as_contract(item: Union[Contract, ContractTerms]) -> Contract:
    # always a fresh Contract, an employee never shares one with a caller
    if isinstance(item, Contract):
        return Contract(item.terms)
    return Contract(item)


class Employee:
    """An employee, the contracts they hold and their audit trail.

    Contracts are addressed by their 0-based position, in creation order.
    Every failed operation raises before touching contracts or log.
    """

    def __init__(
        self,
        name: str,
        contracts: Optional[Iterable[Union[Contract, ContractTerms]]] = None,
        clock: Optional[Clock] = None,
    ):
        # build every contract first so a bad one leaves nothing half-created
        initial = [_as_contract(c) for c in (contracts or [])]
        self.name = name
        self._contracts: list[Contract] = initial
        self._log = AuditLog()
        self._clock: Clock = clock or datetime.now
        self._log_addition()

    @property
    def contracts(self) -> Tuple[Contract, ...]:
        return tuple(self._contracts)

    def _record(self, action: LogAction, details: str) -> LogEntry:
        return self._log.append(self._clock(), action, details)

    def _log_addition(self) -> None:
        if self._contracts:
            summary = ", ".join(self.describe_contracts())
        else:
            summary = "none"
        self._record(
            LogAction.CREATED,
            f"Employee {self.name} with contracts: {summary} added.",
        )
        logger.info(f"Employee {self.name} created with {len(self._contracts)} contract(s)")

    def _check_index(self, index: int) -> None:
        size = len(self._contracts)
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < size:
            logger.warning(f"{self.name}: invalid contract index {index!r} (size={size})")
            raise InvalidIndex(index, size)

    def create_contract(self, terms: ContractTerms) -> Contract:
        contract = Contract(terms)
        self._contracts.append(contract)
        self._record(
            LogAction.CONTRACT_CREATED,
            f"Created {contract.kind} contract with details: {terms_to_json(contract.terms)}",
        )
        logger.info(f"{self.name}: {contract.kind} contract created ({contract.describe()})")
        return contract

    def cancel_contract(self, index: int) -> None:
        self._check_index(index)
        # snapshot before removal, the contract object is gone afterwards
        snapshot = self._contracts[index].describe()
        del self._contracts[index]
        self._record(
            LogAction.CONTRACT_CANCELLED,
            f"Contract with details: {snapshot} has been cancelled.",
        )
        logger.info(f"{self.name}: contract {index + 1} cancelled ({snapshot})")

    def log_work(self, hours: float, index: int) -> None:
        """Add ``hours`` to the hourly contract at ``index``.

        Raises InvalidIndex for an out-of-range index and NotHourlyContract
        when the target is a monthly contract.
        """
        self._check_index(index)
        contract = self._contracts[index]
        if not contract.is_hourly:
            logger.warning(f"{self.name}: contract {index + 1} is not an hourly contract")
            raise NotHourlyContract(index)
        if isinstance(hours, bool) or not isinstance(hours, (int, float)) or not math.isfinite(hours):
            raise InvalidContractTerms(f"hours worked must be a finite number, got {hours!r}")

        contract._add_hours(hours)
        self._record(
            LogAction.WORK_LOGGED,
            f"{fmt_number(hours)} hours worked on Contract {index + 1}.",
        )
        logger.info(f"{self.name}: {fmt_number(hours)} hours logged on contract {index + 1}")

    def get_salary(self) -> float:
        return sum(c.amount() for c in self._contracts)

    def worked_hours(self) -> float:
        return sum(c.terms.hours for c in self._contracts if c.is_hourly)

    def hourly_contracts(self) -> Iterator[Tuple[int, Contract]]:
        for index, contract in enumerate(self._contracts):
            if contract.is_hourly:
                yield index, contract

    def describe_contracts(self) -> list[str]:
        return [
            f"Contract {i + 1}: {c.describe()}" for i, c in enumerate(self._contracts)
        ]

    def get_log(self) -> Tuple[LogEntry, ...]:
        return self._log.entries()

    def get_work_logs(self) -> Tuple[LogEntry, ...]:
        return self._log.filter(LogAction.WORK_LOGGED)

    def __repr__(self):
        return f"Employee(name={self.name!r}, contracts={len(self._contracts)})"


def create_employee(
    name: str,
    contracts: Optional[Iterable[Union[Contract, ContractTerms]]] = None,
    clock: Optional[Clock] = None,
) -> Employee:
    return Employee(name, contracts, clock=clock)
