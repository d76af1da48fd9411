import dataclasses

import pytest

from employee_records.core.enums import Department, EmployeeField
from employee_records.core.exceptions import (
    InvalidActive,
    InvalidDepartment,
    InvalidExperience,
    InvalidName,
    InvalidRating,
    InvalidSalary,
)
from employee_records.employees.fields import FieldUpdate
from employee_records.employees.model import _SETTERS, Employee


def _jane(**kwargs) -> Employee:
    fields = dict(name="Jane Smith", department="IT", salary=50000)
    fields.update(kwargs)
    return Employee.create(**fields)


def test_create_applies_defaults_and_normalisation():
    e = Employee.create("  Jane Smith ", "it", 50000.126)

    assert e.employee_id is None
    assert e.name == "Jane Smith"
    assert e.department is Department.IT
    assert e.salary == 50000.13
    assert e.performance_rating == 0.0
    assert e.years_of_experience == 0
    assert e.active is True


def test_create_rounds_rating_to_one_decimal():
    assert _jane(performance_rating=3.96).performance_rating == 4.0


@pytest.mark.parametrize(
    "kwargs, error",
    [
        ({"name": "J"}, InvalidName),
        ({"department": "Engineering"}, InvalidDepartment),
        ({"salary": -5}, InvalidSalary),
        ({"performance_rating": 6}, InvalidRating),
        ({"years_of_experience": -1}, InvalidExperience),
        ({"active": "yes"}, InvalidActive),
    ],
)
def test_create_rejects_invalid_fields(kwargs, error):
    with pytest.raises(error):
        _jane(**kwargs)


def test_records_are_immutable():
    e = _jane()
    with pytest.raises(dataclasses.FrozenInstanceError):
        e.salary = 1  # type: ignore[misc]


def test_with_salary_returns_new_record():
    e = _jane()
    raised = e.with_salary(55000.555)

    assert raised.salary == 55000.56
    assert e.salary == 50000.0


def test_failed_setter_leaves_record_unchanged():
    e = _jane(performance_rating=4.0)
    with pytest.raises(InvalidRating):
        e.with_performance_rating(9)
    with pytest.raises(InvalidSalary):
        e.with_salary(-1)

    assert e.performance_rating == 4.0
    assert e.salary == 50000.0


def test_replace_cannot_bypass_validation():
    with pytest.raises(InvalidSalary):
        dataclasses.replace(_jane(), salary=-1)


def test_apply_dispatches_every_field():
    assert set(_SETTERS) == set(EmployeeField)

    e = _jane()
    e = e.apply(FieldUpdate(EmployeeField.NAME, "Jane Doe"))
    e = e.apply(FieldUpdate(EmployeeField.DEPARTMENT, "sales"))
    e = e.apply(FieldUpdate(EmployeeField.SALARY, 61000))
    e = e.apply(FieldUpdate(EmployeeField.PERFORMANCE_RATING, 4.2))
    e = e.apply(FieldUpdate(EmployeeField.YEARS_OF_EXPERIENCE, 9))
    e = e.apply(FieldUpdate(EmployeeField.ACTIVE, False))

    assert e == Employee(
        employee_id=None,
        name="Jane Doe",
        department=Department.SALES,
        salary=61000.0,
        performance_rating=4.2,
        years_of_experience=9,
        active=False,
    )


def test_to_dict_and_summary():
    e = _jane(performance_rating=4.5, years_of_experience=3).with_id(7)

    assert e.to_dict() == {
        "id": 7,
        "name": "Jane Smith",
        "department": "IT",
        "salary": 50000.0,
        "performance_rating": 4.5,
        "years_of_experience": 3,
        "active": True,
    }
    assert e.summary() == (
        "ID: 7 | Name: Jane Smith | Department: IT | Salary: $50000.00 | "
        "Rating: 4.5 | Experience: 3 years | Status: Active"
    )
