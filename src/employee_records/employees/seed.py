from __future__ import annotations

from .service import EmployeeService

DEMO_EMPLOYEES = (
    {"name": "John Doe", "department": "IT", "salary": 60000, "performance_rating": 4.5, "years_of_experience": 5},
    {"name": "Jane Smith", "department": "Marketing", "salary": 55000, "performance_rating": 4.0, "years_of_experience": 3},
    {"name": "Amir Haddad", "department": "Finance", "salary": 72000, "performance_rating": 3.8, "years_of_experience": 8},
    {"name": "Mei Lin", "department": "HR", "salary": 48000, "performance_rating": 4.2, "years_of_experience": 2},
    {"name": "Carlos Ruiz", "department": "Operations", "salary": 51000, "performance_rating": 3.1, "years_of_experience": 6},
    {"name": "Priya Nair", "department": "Sales", "salary": 58500, "performance_rating": 4.8, "years_of_experience": 4},
)


def seed_demo_employees(service: EmployeeService) -> int:
    """Load the demo roster into an empty store. Returns how many were added."""
    if service.list_employees():
        return 0
    for row in DEMO_EMPLOYEES:
        service.add_employee(**row)
    return len(DEMO_EMPLOYEES)
