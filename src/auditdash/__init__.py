"""auditdash: dashboard over daily audit-agent reports."""

__version__ = "1.0.0"
