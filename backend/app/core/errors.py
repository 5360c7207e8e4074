"""Domain errors raised by the store and resource services.

Routers never catch these; ``app.main`` registers handlers that turn each one
into a structured JSON response.
"""


class OrganizerError(Exception):
    status_code = 500
    code = "error"

    def __init__(self, detail):
        super().__init__(detail)
        self.detail = detail


class ValidationError(OrganizerError):
    """Input rejected before any mutation."""

    status_code = 400
    code = "validation_error"


class NotFound(OrganizerError):
    status_code = 404
    code = "not_found"

    def __init__(self, label: str, entity_id: str | None = None):
        super().__init__(f"{label} not found")
        self.entity_id = entity_id


class StorageFailure(OrganizerError):
    """The database was unreachable or the transaction was rolled back."""

    status_code = 500
    code = "storage_failure"
