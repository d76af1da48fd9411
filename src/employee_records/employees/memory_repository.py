from __future__ import annotations

import itertools
from typing import Callable, Iterable, Optional, Sequence, Union

from ..core.enums import EmployeeField
from ..core.exceptions import DuplicateId, EmployeeNotFound, InvalidArgument
from .fields import FieldUpdate
from .model import Employee, EmployeeId
from .repository import EmployeeRepository


def sequential_ids(start: int = 1) -> Callable[[], int]:
    counter = itertools.count(start)
    return lambda: next(counter)


class InMemoryEmployeeRepository(EmployeeRepository):
    """Records indexed by id, plus an insertion-ordered list for iteration.

    Not safe for unsynchronised concurrent mutation; callers sharing one
    instance across threads must serialise access.
    """

    def __init__(self, id_factory: Optional[Callable[[], EmployeeId]] = None):
        self._next_id = id_factory or sequential_ids()
        self._by_id: dict[EmployeeId, Employee] = {}
        self._order: list[EmployeeId] = []

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, employee_id: object) -> bool:
        return employee_id in self._by_id

    def _fresh_id(self) -> EmployeeId:
        employee_id = self._next_id()
        # Skip values already taken by records added with a pre-set id.
        while employee_id in self._by_id:
            employee_id = self._next_id()
        return employee_id

    def _require(self, employee_id: EmployeeId) -> Employee:
        try:
            return self._by_id[employee_id]
        except (KeyError, TypeError):
            raise EmployeeNotFound(f"Employee with ID {employee_id} not found") from None

    def add(self, employee: Employee) -> EmployeeId:
        if employee is None:
            raise InvalidArgument("Employee cannot be null")
        if employee.employee_id is None:
            employee = employee.with_id(self._fresh_id())
        elif employee.employee_id in self._by_id:
            raise DuplicateId(f"Employee with ID {employee.employee_id} already exists")

        self._by_id[employee.employee_id] = employee
        self._order.append(employee.employee_id)
        return employee.employee_id

    def get(self, employee_id: EmployeeId) -> Employee:
        return self._require(employee_id)

    def remove(self, employee_id: EmployeeId) -> None:
        self._require(employee_id)
        del self._by_id[employee_id]
        self._order.remove(employee_id)

    def update(self, employee_id: EmployeeId, field: Union[str, EmployeeField], value: object) -> Employee:
        self._require(employee_id)
        return self.update_fields(employee_id, [FieldUpdate.of(field, value)])

    def update_fields(self, employee_id: EmployeeId, updates: Iterable[FieldUpdate]) -> Employee:
        current = self._require(employee_id)
        changed = current
        for update in updates:
            changed = changed.apply(update)
        self._by_id[employee_id] = changed
        return changed

    def replace_many(self, employees: Iterable[Employee]) -> None:
        staged = list(employees)
        for employee in staged:
            self._require(employee.employee_id)
        for employee in staged:
            self._by_id[employee.employee_id] = employee

    def list_all(self) -> Sequence[Employee]:
        return [self._by_id[i] for i in self._order]
