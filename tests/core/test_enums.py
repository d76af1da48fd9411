from employee_records.core.enums import Department, EmployeeField
from employee_records.core.exceptions import DomainError, InvalidArgument, InvalidField, InvalidSalary, ValidationError


def test_department_lookup():
    assert Department.lookup("MARKETING") is Department.MARKETING
    assert Department.lookup("operations ") is Department.OPERATIONS
    assert Department.lookup("Engineering") is None


def test_department_compares_with_display_name():
    assert Department.IT == "IT"
    assert [d.value for d in Department] == ["HR", "IT", "Finance", "Marketing", "Operations", "Sales"]


def test_employee_field_members():
    assert {f.value for f in EmployeeField} == {
        "name",
        "department",
        "salary",
        "performance_rating",
        "years_of_experience",
        "active",
    }


def test_error_hierarchy_and_codes():
    assert issubclass(InvalidSalary, ValidationError)
    assert issubclass(InvalidField, InvalidArgument)
    assert issubclass(InvalidArgument, DomainError)
    assert InvalidSalary.code == "invalid_salary"
    assert InvalidField("x").code == "invalid_field"
