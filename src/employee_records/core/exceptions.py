class DomainError(Exception):
    """Base exception for business rule violations."""

    code = "domain_error"


class ValidationError(DomainError):
    """Raised when a field value violates the record's constraints."""

    code = "validation_error"


class InvalidName(ValidationError):
    code = "invalid_name"


class InvalidDepartment(ValidationError):
    code = "invalid_department"


class InvalidSalary(ValidationError):
    code = "invalid_salary"


class InvalidRating(ValidationError):
    code = "invalid_rating"


class InvalidExperience(ValidationError):
    code = "invalid_experience"


class InvalidActive(ValidationError):
    code = "invalid_active"


class EmployeeNotFound(DomainError):
    """Raised when no record exists for an id."""

    code = "not_found"


class DuplicateId(DomainError):
    """Raised when adding a record whose id is already stored."""

    code = "duplicate_id"


class InvalidArgument(DomainError):
    """Raised when query or batch parameters are malformed."""

    code = "invalid_argument"


class InvalidField(InvalidArgument):
    """Raised when an update names a field that cannot be updated."""

    code = "invalid_field"
