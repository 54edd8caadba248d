"""
Typed exception hierarchy for the villa reconciliation kernel.

Every error carries a ``code`` class attribute (machine-readable, API-safe)
and stores its context as attributes rather than only in the message, so
callers catch by type and render by field:

    try:
        reports = service.range_report(company_id, start, end)
    except RangeReportError as e:
        api_response(code=e.code, failed_date=e.failed_date)

Hierarchy:

    VillaKernelError (base)
    |
    +-- ParameterError
    |   +-- MissingParameterError
    |   +-- InvalidParameterError
    |
    +-- CollaboratorError
    |   +-- CollaboratorQueryError
    |
    +-- ReportError
    |   +-- RangeReportError
    |
    +-- ConfigError
        +-- ConfigLoadError

Codes:

Category      | Code                       | When Raised
--------------|----------------------------|------------------------------------------
Parameter     | MISSING_PARAMETER          | Required input (e.g. company id) absent
              | INVALID_PARAMETER          | Input present but unusable
--------------|----------------------------|------------------------------------------
Collaborator  | COLLABORATOR_QUERY_FAILED  | A read store could not execute a query
--------------|----------------------------|------------------------------------------
Report        | RANGE_REPORT_FAILED        | One day of a range report failed
--------------|----------------------------|------------------------------------------
Config        | CONFIG_INVALID             | Configuration file missing or malformed

Nothing in the kernel retries. ParameterError is raised before any store is
queried; CollaboratorError and ReportError abort the whole call with no
partial result.
"""


class VillaKernelError(Exception):
    """
    Base exception for all villa kernel errors.

    All subclasses must define a ``code`` class attribute.
    """

    code: str = "VILLA_KERNEL_ERROR"


# Parameter errors


class ParameterError(VillaKernelError):
    """Base exception for rejected caller input."""

    code: str = "PARAMETER_ERROR"


class MissingParameterError(ParameterError):
    """A required parameter was not supplied."""

    code: str = "MISSING_PARAMETER"

    def __init__(self, parameter: str):
        self.parameter = parameter
        super().__init__(f"Missing required parameter: {parameter}")


class InvalidParameterError(ParameterError):
    """A parameter was supplied but cannot be used."""

    code: str = "INVALID_PARAMETER"

    def __init__(self, parameter: str, value: object, reason: str):
        self.parameter = parameter
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {parameter} {value!r}: {reason}")


# Collaborator (read store) errors


class CollaboratorError(VillaKernelError):
    """Base exception for failures in an external read store."""

    code: str = "COLLABORATOR_ERROR"


class CollaboratorQueryError(CollaboratorError):
    """A read store could not execute its query."""

    code: str = "COLLABORATOR_QUERY_FAILED"

    def __init__(self, store: str, detail: str):
        self.store = store
        self.detail = detail
        super().__init__(f"Query against {store} store failed: {detail}")


# Report errors


class ReportError(VillaKernelError):
    """Base exception for report assembly failures."""

    code: str = "REPORT_ERROR"


class RangeReportError(ReportError):
    """A single day of a range report failed, so the range failed."""

    code: str = "RANGE_REPORT_FAILED"

    def __init__(self, failed_date: str, start_date: str, end_date: str):
        self.failed_date = failed_date
        self.start_date = start_date
        self.end_date = end_date
        super().__init__(
            f"Range report {start_date}..{end_date} failed on {failed_date}"
        )


# Configuration errors


class ConfigError(VillaKernelError):
    """Base exception for configuration problems."""

    code: str = "CONFIG_ERROR"


class ConfigLoadError(ConfigError):
    """Configuration could not be loaded or parsed."""

    code: str = "CONFIG_INVALID"

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid configuration in {source}: {reason}")
