from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from numbers import Real
from typing import Type

from ..core.constants import MAX_RATING, MIN_NAME_LENGTH, MIN_RATING, RATING_DECIMALS, SALARY_DECIMALS
from ..core.enums import Department
from ..core.exceptions import (
    DomainError,
    InvalidActive,
    InvalidDepartment,
    InvalidExperience,
    InvalidName,
    InvalidRating,
    InvalidSalary,
)


def round_half_up(value: float, places: int) -> float:
    # Decimal(str(...)) rounds the printed value, so 2.675 -> 2.68.
    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        # Room for every digit of the largest finite float.
        ctx.prec = 320
        return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def require_number(value: object, field_name: str, error: Type[DomainError]) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise error(f"{field_name} must be a number")
    try:
        number = float(value)
    except OverflowError:
        raise error(f"{field_name} must be a finite number") from None
    if math.isnan(number) or math.isinf(number):
        raise error(f"{field_name} must be a finite number")
    return number


def require_name(value: object) -> str:
    if value is None or not isinstance(value, str):
        raise InvalidName("Name cannot be null")
    name = value.strip()
    if not name:
        raise InvalidName("Name cannot be empty")
    if len(name) < MIN_NAME_LENGTH:
        raise InvalidName(f"Name must be at least {MIN_NAME_LENGTH} characters long")
    return name


def require_department(value: object, error: Type[DomainError] = InvalidDepartment) -> Department:
    if isinstance(value, Department):
        return value
    if value is None or not isinstance(value, str) or not value.strip():
        raise error("Department cannot be null or empty")
    dept = Department.lookup(value)
    if dept is None:
        valid = ", ".join(d.value for d in Department)
        raise error(f"Invalid department '{value}'. Valid departments are: {valid}")
    return dept


def require_salary(value: object) -> float:
    salary = require_number(value, "Salary", InvalidSalary)
    if salary < 0:
        raise InvalidSalary("Salary cannot be negative")
    return round_half_up(salary, SALARY_DECIMALS)


def require_rating(value: object, error: Type[DomainError] = InvalidRating) -> float:
    rating = require_number(value, "Performance rating", error)
    if rating < MIN_RATING or rating > MAX_RATING:
        raise error(f"Performance rating must be between {MIN_RATING:g} and {MAX_RATING:g}")
    return round_half_up(rating, RATING_DECIMALS)


def require_experience(value: object) -> int:
    # JSON clients may send 5.0 for 5.
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidExperience("Years of experience must be an integer")
    if value < 0:
        raise InvalidExperience("Years of experience cannot be negative")
    return int(value)


def require_count(value: object, error: Type[DomainError]) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise error("Count must be an integer")
    if value <= 0:
        raise error("Count must be positive")
    return value


def require_flag(value: object) -> bool:
    if not isinstance(value, bool):
        raise InvalidActive("Active flag must be true or false")
    return value
