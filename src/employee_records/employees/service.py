from __future__ import annotations

from typing import Mapping, Optional, Union

from ..common.validators import require_count, require_department, require_number, round_half_up
from ..core.constants import DEFAULT_EXPERIENCE, DEFAULT_RATING, MAX_RATING, MIN_RATING, SALARY_DECIMALS
from ..core.enums import Department, SortKey
from ..core.exceptions import InvalidArgument
from .fields import updates_from_mapping
from .model import Employee, EmployeeId
from .repository import EmployeeRepository


def _require_min_rating(value: object) -> float:
    rating = require_number(value, "Minimum rating", InvalidArgument)
    if rating < MIN_RATING or rating > MAX_RATING:
        raise InvalidArgument(f"Rating must be between {MIN_RATING:g} and {MAX_RATING:g}")
    return rating


def _require_percentage(value: object) -> float:
    percentage = require_number(value, "Percentage", InvalidArgument)
    if percentage < 0:
        raise InvalidArgument("Percentage cannot be negative")
    return percentage


def _raised(employee: Employee, percentage: float) -> Employee:
    return employee.with_salary(employee.salary * (1 + percentage / 100))


class EmployeeService:
    """Use case: query, sort and bulk-update employee records.

    Holds no state of its own; every call reads the repository it was
    built with. Results are fresh lists of immutable records.
    """

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    # CRUD

    def add_employee(
        self,
        *,
        name: str,
        department: Union[str, Department],
        salary: float,
        performance_rating: float = DEFAULT_RATING,
        years_of_experience: int = DEFAULT_EXPERIENCE,
        active: bool = True,
    ) -> Employee:
        employee = Employee.create(
            name,
            department,
            salary,
            performance_rating,
            years_of_experience,
            active=active,
        )
        employee_id = self._employees.add(employee)
        return self._employees.get(employee_id)

    def get_employee(self, employee_id: EmployeeId) -> Employee:
        return self._employees.get(employee_id)

    def list_employees(self) -> list[Employee]:
        return list(self._employees.list_all())

    def update_employee(self, employee_id: EmployeeId, changes: Mapping[str, object]) -> Employee:
        """Apply several field changes at once; nothing is stored if any is rejected."""
        current = self._employees.get(employee_id)
        updates = updates_from_mapping(changes)
        if not updates:
            return current
        return self._employees.update_fields(employee_id, updates)

    def remove_employee(self, employee_id: EmployeeId) -> None:
        self._employees.remove(employee_id)

    # Filters

    def by_department(self, department: Union[str, Department]) -> list[Employee]:
        dept = require_department(department)
        return [e for e in self._employees.list_all() if e.department is dept]

    def search_by_name(self, term: Optional[str]) -> list[Employee]:
        """Case-insensitive substring match; a blank term matches everyone."""
        if term is None:
            raise InvalidArgument("Search term cannot be null")
        if not isinstance(term, str):
            raise InvalidArgument("Search term must be a string")
        if not term.strip():
            return list(self._employees.list_all())
        needle = term.casefold()
        return [e for e in self._employees.list_all() if needle in e.name.casefold()]

    def by_performance(self, min_rating: float) -> list[Employee]:
        threshold = _require_min_rating(min_rating)
        return [e for e in self._employees.list_all() if e.performance_rating >= threshold]

    def by_salary_range(self, min_salary: float, max_salary: float) -> list[Employee]:
        low = require_number(min_salary, "Minimum salary", InvalidArgument)
        high = require_number(max_salary, "Maximum salary", InvalidArgument)
        if low < 0 or high < 0:
            raise InvalidArgument("Salary range cannot be negative")
        if low > high:
            raise InvalidArgument("Minimum salary cannot be greater than maximum salary")
        return [e for e in self._employees.list_all() if low <= e.salary <= high]

    # Sorting (stable, descending; ties keep store order)

    def sort_by_experience(self) -> list[Employee]:
        return sorted(self._employees.list_all(), key=lambda e: e.years_of_experience, reverse=True)

    def sort_by_salary(self) -> list[Employee]:
        return sorted(self._employees.list_all(), key=lambda e: e.salary, reverse=True)

    def sort_by_performance(self) -> list[Employee]:
        return sorted(self._employees.list_all(), key=lambda e: e.performance_rating, reverse=True)

    def sort_by(self, key: Union[str, SortKey]) -> list[Employee]:
        try:
            sort_key = SortKey(key.strip().lower() if isinstance(key, str) else key)
        except ValueError:
            valid = ", ".join(k.value for k in SortKey)
            raise InvalidArgument(f"Invalid sort key '{key}'. Valid keys are: {valid}") from None
        return {
            SortKey.EXPERIENCE: self.sort_by_experience,
            SortKey.SALARY: self.sort_by_salary,
            SortKey.PERFORMANCE: self.sort_by_performance,
        }[sort_key]()

    # Salary analytics

    def top_paid(self, count: int) -> list[Employee]:
        return self.sort_by_salary()[:require_count(count, InvalidArgument)]

    def average_salary(self, department: Union[str, Department]) -> float:
        members = self.by_department(department)
        if not members:
            return 0.0
        return round_half_up(sum(e.salary for e in members) / len(members), SALARY_DECIMALS)

    def give_raise(self, percentage: float, min_rating: float) -> list[Employee]:
        """Raise every salary whose rating is at least ``min_rating``.

        All new records are built before any is stored, so a rejected
        salary leaves the whole store unchanged.
        """
        pct = _require_percentage(percentage)
        threshold = _require_min_rating(min_rating)

        qualifying = [e for e in self._employees.list_all() if e.performance_rating >= threshold]
        raised = [_raised(e, pct) for e in qualifying]
        self._employees.replace_many(raised)
        return raised

    def raise_salary(self, employee_id: EmployeeId, percentage: float) -> Employee:
        pct = _require_percentage(percentage)
        employee = _raised(self._employees.get(employee_id), pct)
        self._employees.replace_many([employee])
        return employee
