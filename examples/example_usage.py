"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the business rules live in the services.
"""

import importlib

from config import get_settings_module

from employee_records.container import build_container
from employee_records.employees.seed import seed_demo_employees


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(id_strategy=getattr(settings, "ID_STRATEGY", "sequential"))
    service = container.employee_service
    seed_demo_employees(service)

    for employee in service.top_paid(3):
        print(employee.summary())
    print("IT average:", service.average_salary("IT"))


if __name__ == "__main__":
    main()
