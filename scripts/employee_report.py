from __future__ import annotations

import argparse
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from employee_records.container import build_container
from employee_records.core.enums import Department, SortKey
from employee_records.core.exceptions import DomainError
from employee_records.employees.seed import seed_demo_employees


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print a salary report over the demo roster.")
    parser.add_argument("--sort", choices=[k.value for k in SortKey], default=SortKey.SALARY.value)
    parser.add_argument("--raise-pct", type=float, default=None, help="apply a raise before reporting")
    parser.add_argument("--min-rating", type=float, default=0.0)
    args = parser.parse_args(argv)

    service = build_container().employee_service
    seed_demo_employees(service)

    try:
        if args.raise_pct is not None:
            raised = service.give_raise(args.raise_pct, args.min_rating)
            print(f"Raised {len(raised)} salaries by {args.raise_pct}%")
        rows = service.sort_by(args.sort)
    except DomainError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    for employee in rows:
        print(employee.summary())
    print()
    for dept in Department:
        print(f"{dept.value:<12} average salary: {service.average_salary(dept):>10.2f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
