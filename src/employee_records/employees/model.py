from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Optional, Union

from ..common.validators import (
    require_department,
    require_experience,
    require_flag,
    require_name,
    require_rating,
    require_salary,
)
from ..core.constants import DEFAULT_EXPERIENCE, DEFAULT_RATING
from ..core.enums import Department, EmployeeField
from .fields import FieldUpdate

EmployeeId = Union[int, str]


@dataclass(frozen=True)
class Employee:
    """Domain entity: one employee.

    Instances are immutable; every ``with_*`` call validates its argument
    and returns a new record, leaving the original untouched when the
    value is rejected. Construction runs the same checks, so a record
    can never hold an invalid field.
    """

    employee_id: Optional[EmployeeId]
    name: str
    department: Department
    salary: float
    performance_rating: float = DEFAULT_RATING
    years_of_experience: int = DEFAULT_EXPERIENCE
    active: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", require_name(self.name))
        object.__setattr__(self, "department", require_department(self.department))
        object.__setattr__(self, "salary", require_salary(self.salary))
        object.__setattr__(self, "performance_rating", require_rating(self.performance_rating))
        object.__setattr__(self, "years_of_experience", require_experience(self.years_of_experience))
        object.__setattr__(self, "active", require_flag(self.active))

    @classmethod
    def create(
        cls,
        name: str,
        department: Union[str, Department],
        salary: float,
        performance_rating: float = DEFAULT_RATING,
        years_of_experience: int = DEFAULT_EXPERIENCE,
        *,
        active: bool = True,
        employee_id: Optional[EmployeeId] = None,
    ) -> "Employee":
        return cls(
            employee_id=employee_id,
            name=name,
            department=department,
            salary=salary,
            performance_rating=performance_rating,
            years_of_experience=years_of_experience,
            active=active,
        )

    def with_id(self, employee_id: EmployeeId) -> "Employee":
        return replace(self, employee_id=employee_id)

    def with_name(self, name: str) -> "Employee":
        return replace(self, name=require_name(name))

    def with_department(self, department: Union[str, Department]) -> "Employee":
        return replace(self, department=require_department(department))

    def with_salary(self, salary: float) -> "Employee":
        return replace(self, salary=require_salary(salary))

    def with_performance_rating(self, rating: float) -> "Employee":
        return replace(self, performance_rating=require_rating(rating))

    def with_years_of_experience(self, years: int) -> "Employee":
        return replace(self, years_of_experience=require_experience(years))

    def with_active(self, active: bool) -> "Employee":
        return replace(self, active=require_flag(active))

    def apply(self, update: FieldUpdate) -> "Employee":
        setter = _SETTERS[update.field]
        return setter(self, update.value)

    def to_dict(self) -> dict:
        return {
            "id": self.employee_id,
            "name": self.name,
            "department": self.department.value,
            "salary": self.salary,
            "performance_rating": self.performance_rating,
            "years_of_experience": self.years_of_experience,
            "active": self.active,
        }

    def summary(self) -> str:
        return (
            f"ID: {self.employee_id} | Name: {self.name} | Department: {self.department.value} | "
            f"Salary: ${self.salary:.2f} | Rating: {self.performance_rating:.1f} | "
            f"Experience: {self.years_of_experience} years | Status: {'Active' if self.active else 'Inactive'}"
        )


_SETTERS: dict[EmployeeField, Callable[[Employee, object], Employee]] = {
    EmployeeField.NAME: Employee.with_name,
    EmployeeField.DEPARTMENT: Employee.with_department,
    EmployeeField.SALARY: Employee.with_salary,
    EmployeeField.PERFORMANCE_RATING: Employee.with_performance_rating,
    EmployeeField.YEARS_OF_EXPERIENCE: Employee.with_years_of_experience,
    EmployeeField.ACTIVE: Employee.with_active,
}
