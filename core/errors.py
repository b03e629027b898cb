# core/errors.py

from fastapi import HTTPException

from core.logging_config import logger


class WorkflowError(Exception):
    """
    Error for request-workflow endpoints (renewals, registrations, signups,
    join requests, notifications). Rendered by main.py as
    `{"success": false, "error": ...}` plus any keyword extras,
    e.g. `errors=` for field messages or `allowedValues=` for status enums.
    """

    def __init__(self, status_code: int, error: str, **extra):
        super().__init__(error)
        self.status_code = status_code
        self.error = error
        self.extra = extra

    def to_body(self) -> dict:
        return {"success": False, "error": self.error, **self.extra}


# Postgres / PostgREST wording → (status, client-facing suffix)
KNOWN_DB_ERRORS = [
    (("duplicate", "unique"), 400, "Record already exists"),
    (("foreign key",), 400, "Invalid reference"),
    (("not found", "does not exist"), 404, "Resource not found"),
]


def extract_supabase_error(error: Exception) -> str:
    """Readable text of a PostgREST APIError (`.message`) or any exception."""
    message = getattr(error, "message", None)
    if message:
        return str(message)
    if error.args:
        return str(error.args[0])
    return str(error) or type(error).__name__


def supabase_error(error: Exception, message: str = "Supabase error"):
    """Raise a 500 carrying the database's own message (reads and deletes)."""
    raise HTTPException(status_code=500, detail=f"{message}: {extract_supabase_error(error)}")


def handle_supabase_error(error: Exception, operation: str = "Database operation", status_code: int = 500) -> HTTPException:
    """
    Map a write failure to an HTTPException without raising it.
    Constraint violations become 4xx; anything else hides the raw detail.
    """
    if isinstance(error, HTTPException):
        return error

    detail = extract_supabase_error(error)
    logger.error(f"{operation}: {detail}")

    lowered = detail.lower()
    for needles, code, suffix in KNOWN_DB_ERRORS:
        if any(n in lowered for n in needles):
            return HTTPException(status_code=code, detail=f"{operation}: {suffix}")
    return HTTPException(status_code=status_code, detail=f"{operation} failed")
