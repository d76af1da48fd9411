from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Mapping, Union

from ..core.enums import EmployeeField
from ..core.exceptions import InvalidField


def _normalize(name: str) -> str:
    return re.sub(r"[\s_\-]", "", name).casefold()


_ALIASES = {
    "rating": EmployeeField.PERFORMANCE_RATING,
    "experience": EmployeeField.YEARS_OF_EXPERIENCE,
    "isactive": EmployeeField.ACTIVE,
}

_LOOKUP = {_normalize(f.value): f for f in EmployeeField}
_LOOKUP.update(_ALIASES)

_READ_ONLY = {"id", "employeeid"}


def parse_field(name: Union[str, EmployeeField]) -> EmployeeField:
    """Resolve a field name from an outer surface.

    Accepts snake_case, camelCase and the legacy lower-cased names
    (``performancerating``, ``isactive``).
    """
    if isinstance(name, EmployeeField):
        return name
    if not isinstance(name, str):
        raise InvalidField(f"Invalid field: {name!r}")
    key = _normalize(name)
    if key in _READ_ONLY:
        raise InvalidField("Employee id cannot be updated")
    try:
        return _LOOKUP[key]
    except KeyError:
        raise InvalidField(f"Invalid field: {name}") from None


@dataclass(frozen=True)
class FieldUpdate:
    """One pending change to one field of a record."""

    field: EmployeeField
    value: object

    @classmethod
    def of(cls, name: Union[str, EmployeeField], value: object) -> "FieldUpdate":
        return cls(field=parse_field(name), value=value)


def updates_from_mapping(changes: Mapping[str, object]) -> list[FieldUpdate]:
    return [FieldUpdate.of(name, value) for name, value in changes.items()]
