from __future__ import annotations

import logging
import sys
from functools import wraps

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from ..common.validators import require_count
from ..container import Container
from ..core.enums import Department
from ..core.exceptions import DomainError, DuplicateId, EmployeeNotFound, InvalidArgument
from .model import EmployeeId

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (EmployeeNotFound, 404),
    (DuplicateId, 409),
)


def _status_for(error: DomainError) -> int:
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status
    return 400


def _parse_id(raw: str) -> EmployeeId:
    # Sequential ids travel as digits in the URL; uuid ids stay strings.
    return int(raw) if raw.isdigit() else raw


def _json_body() -> dict:
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise InvalidArgument("Request body must be a JSON object")
    return body


def _float_arg(name: str, default: float | None = None) -> float:
    raw = request.args.get(name)
    if raw is None:
        if default is None:
            raise InvalidArgument(f"Missing query parameter: {name}")
        return default
    try:
        return float(raw)
    except ValueError:
        raise InvalidArgument(f"Query parameter '{name}' must be a number") from None


def _int_arg(name: str) -> int:
    raw = request.args.get(name, "")
    try:
        return int(raw)
    except ValueError:
        raise InvalidArgument(f"Query parameter '{name}' must be an integer") from None


def _rows(employees) -> list[dict]:
    return [e.to_dict() for e in employees]


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    def serialized(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            with container.lock:
                return view(*args, **kwargs)

        return wrapper

    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        status = _status_for(e)
        logger.warning("%s %s rejected (%s): %s", request.method, request.path, e.code, e)
        return jsonify({"error": e.code, "message": str(e)}), status

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        if e.code is None or e.code < 400:
            return e
        code = (e.name or "error").lower().replace(" ", "_")
        return jsonify({"error": code, "message": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        message = str(e) if app.config.get("DEBUG") else "Internal server error"
        return jsonify({"error": "internal_error", "message": message}), 500

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok", "employees": len(container.employees_repo)})

    @app.route("/employees", methods=["GET"], endpoint="list_employees")
    @serialized
    def list_employees():
        args = request.args
        top = require_count(_int_arg("top"), InvalidArgument) if "top" in args else None
        if args.get("sort"):
            rows = service.sort_by(args["sort"])
        elif top is not None:
            rows = service.sort_by_salary()
        else:
            rows = service.list_employees()

        matches: list[set] = []
        if "department" in args:
            matches.append({e.employee_id for e in service.by_department(args["department"])})
        if "name" in args:
            matches.append({e.employee_id for e in service.search_by_name(args["name"])})
        if "min_rating" in args:
            matches.append({e.employee_id for e in service.by_performance(_float_arg("min_rating"))})
        if "min_salary" in args or "max_salary" in args:
            low = _float_arg("min_salary", 0.0)
            high = _float_arg("max_salary", sys.float_info.max)
            matches.append({e.employee_id for e in service.by_salary_range(low, high)})

        for ids in matches:
            rows = [e for e in rows if e.employee_id in ids]
        if top is not None:
            rows = rows[:top]
        return jsonify(_rows(rows))

    @app.route("/employees/top", methods=["GET"], endpoint="top_paid_employees")
    @serialized
    def top_paid_employees():
        return jsonify(_rows(service.top_paid(_int_arg("n"))))

    @app.route("/employees", methods=["POST"], endpoint="add_employee")
    @serialized
    def add_employee():
        body = _json_body()
        employee = service.add_employee(
            name=body.get("name"),
            department=body.get("department"),
            salary=body.get("salary"),
            performance_rating=body.get("performance_rating", 0.0),
            years_of_experience=body.get("years_of_experience", 0),
            active=body.get("active", True),
        )
        logger.info("Added employee %s (%s)", employee.employee_id, employee.department.value)
        return jsonify(employee.to_dict()), 201

    @app.route("/employees/<employee_id>", methods=["GET"], endpoint="get_employee")
    @serialized
    def get_employee(employee_id: str):
        return jsonify(service.get_employee(_parse_id(employee_id)).to_dict())

    @app.route("/employees/<employee_id>", methods=["PUT"], endpoint="update_employee")
    @serialized
    def update_employee(employee_id: str):
        changes = _json_body()
        employee = service.update_employee(_parse_id(employee_id), changes)
        logger.info("Updated employee %s: %s", employee.employee_id, ", ".join(changes))
        return jsonify(employee.to_dict())

    @app.route("/employees/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @serialized
    def delete_employee(employee_id: str):
        service.remove_employee(_parse_id(employee_id))
        logger.info("Removed employee %s", employee_id)
        return "", 204

    @app.route("/employees/<employee_id>/raise", methods=["POST"], endpoint="raise_employee_salary")
    @serialized
    def raise_employee_salary(employee_id: str):
        body = _json_body()
        employee = service.raise_salary(_parse_id(employee_id), body.get("percentage"))
        logger.info("Raised salary of employee %s by %s%%", employee.employee_id, body.get("percentage"))
        return jsonify(employee.to_dict())

    @app.route("/employees/raise", methods=["POST"], endpoint="give_raise")
    @serialized
    def give_raise():
        body = _json_body()
        raised = service.give_raise(body.get("percentage"), body.get("min_rating", 0.0))
        logger.info(
            "Raised %d salaries by %s%% (min rating %s)",
            len(raised),
            body.get("percentage"),
            body.get("min_rating", 0.0),
        )
        return jsonify({"updated": len(raised), "employees": _rows(raised)})

    @app.route("/departments", methods=["GET"], endpoint="list_departments")
    def list_departments():
        return jsonify([d.value for d in Department])

    @app.route("/departments/<department>/average-salary", methods=["GET"], endpoint="department_average_salary")
    @serialized
    def department_average_salary(department: str):
        average = service.average_salary(department)
        return jsonify({"department": Department.lookup(department).value, "average_salary": average})
