from __future__ import annotations

from enum import Enum
from typing import Optional


class Department(str, Enum):
    """Departments an employee may belong to."""

    HR = "HR"
    IT = "IT"
    FINANCE = "Finance"
    MARKETING = "Marketing"
    OPERATIONS = "Operations"
    SALES = "Sales"

    @classmethod
    def lookup(cls, value: str) -> Optional["Department"]:
        """Case-insensitive match on the display name; None when unknown."""
        needle = value.strip().casefold()
        for dept in cls:
            if dept.value.casefold() == needle:
                return dept
        return None


class EmployeeField(str, Enum):
    """Fields that can be changed after a record is created."""

    NAME = "name"
    DEPARTMENT = "department"
    SALARY = "salary"
    PERFORMANCE_RATING = "performance_rating"
    YEARS_OF_EXPERIENCE = "years_of_experience"
    ACTIVE = "active"


class SortKey(str, Enum):
    EXPERIENCE = "experience"
    SALARY = "salary"
    PERFORMANCE = "performance"
