from __future__ import annotations

from typing import Iterable, Protocol, Sequence, Union

from ..core.enums import EmployeeField
from .fields import FieldUpdate
from .model import Employee, EmployeeId


class EmployeeRepository(Protocol):
    """Store contract for employee records.

    The service layer depends on this interface, not on a concrete store.
    Records handed out are immutable, so callers cannot change stored state
    behind the store's back.
    """

    def add(self, employee: Employee) -> EmployeeId:
        raise NotImplementedError

    def get(self, employee_id: EmployeeId) -> Employee:
        raise NotImplementedError

    def remove(self, employee_id: EmployeeId) -> None:
        raise NotImplementedError

    def update(self, employee_id: EmployeeId, field: Union[str, EmployeeField], value: object) -> Employee:
        raise NotImplementedError

    def update_fields(self, employee_id: EmployeeId, updates: Iterable[FieldUpdate]) -> Employee:
        raise NotImplementedError

    def replace_many(self, employees: Iterable[Employee]) -> None:
        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError
