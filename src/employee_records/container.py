from __future__ import annotations

import threading
import uuid
from dataclasses import dataclass, field
from typing import Callable

from .employees.memory_repository import InMemoryEmployeeRepository, sequential_ids
from .employees.model import EmployeeId
from .employees.service import EmployeeService


@dataclass(frozen=True)
class Container:
    employees_repo: InMemoryEmployeeRepository
    employee_service: EmployeeService

    # The store is not thread-safe; request handlers hold this while using it.
    lock: threading.Lock = field(default_factory=threading.Lock)


def _uuid_ids() -> EmployeeId:
    return str(uuid.uuid4())


def id_factory_for(strategy: str) -> Callable[[], EmployeeId]:
    strategy = (strategy or "sequential").strip().lower()
    if strategy == "sequential":
        return sequential_ids()
    if strategy == "uuid":
        return _uuid_ids
    raise ValueError(f"Unknown ID_STRATEGY: {strategy!r} (expected 'sequential' or 'uuid')")


def build_container(*, id_strategy: str = "sequential") -> Container:
    employees_repo = InMemoryEmployeeRepository(id_factory=id_factory_for(id_strategy))
    employee_service = EmployeeService(employees_repo)

    return Container(
        employees_repo=employees_repo,
        employee_service=employee_service,
    )
