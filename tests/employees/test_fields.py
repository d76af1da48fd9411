import pytest

from employee_records.core.enums import EmployeeField
from employee_records.core.exceptions import InvalidField
from employee_records.employees.fields import FieldUpdate, parse_field, updates_from_mapping


@pytest.mark.parametrize(
    "name, expected",
    [
        ("salary", EmployeeField.SALARY),
        ("Salary", EmployeeField.SALARY),
        ("performanceRating", EmployeeField.PERFORMANCE_RATING),
        ("performancerating", EmployeeField.PERFORMANCE_RATING),
        ("performance_rating", EmployeeField.PERFORMANCE_RATING),
        ("yearsOfExperience", EmployeeField.YEARS_OF_EXPERIENCE),
        ("isActive", EmployeeField.ACTIVE),
        ("rating", EmployeeField.PERFORMANCE_RATING),
        (EmployeeField.NAME, EmployeeField.NAME),
    ],
)
def test_parse_field_accepts_known_spellings(name, expected):
    assert parse_field(name) is expected


@pytest.mark.parametrize("name", ["bonus", "", "id", "employeeId", None])
def test_parse_field_rejects_unknown_or_read_only(name):
    with pytest.raises(InvalidField):
        parse_field(name)


def test_updates_from_mapping_keeps_order():
    updates = updates_from_mapping({"salary": 1.0, "name": "Al"})
    assert updates == [
        FieldUpdate(EmployeeField.SALARY, 1.0),
        FieldUpdate(EmployeeField.NAME, "Al"),
    ]
