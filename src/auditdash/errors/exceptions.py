"""Custom exception classes for the audit dashboard API."""


class AuditDashError(Exception):
    """Base exception for auditdash."""

    def __init__(self, code: str, message: str, status_code: int = 500):
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ValidationError(AuditDashError):
    """Request cannot be satisfied with the given parameters."""

    def __init__(self, message: str):
        super().__init__("VALIDATION_ERROR", message, status_code=400)


class NotFoundError(AuditDashError):
    """Date directory or agent file not found.

    The client-facing message is always ``Not found``; the resource that was
    looked up is kept on the exception for logging.
    """

    def __init__(self, resource: str, resource_id: str, message: str = "Not found"):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__("NOT_FOUND", message, status_code=404)


class ReportParseError(AuditDashError):
    """A single agent file exists but is not valid JSON."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__("REPORT_PARSE_ERROR", reason, status_code=500)
