"""Exceptions raised around the analysis engine (never by the scoring code)."""


class AuditError(Exception):
    """Base class for audit failures the API reports to the caller."""


class FetchError(AuditError):
    """The page could not be fetched or parsed."""
