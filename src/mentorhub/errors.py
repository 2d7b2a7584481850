"""Error kinds shared by every layer.

Learn: services raise these instead of HTTPException so business logic
stays independent of the web framework. main.create_app() registers one
exception handler that renders any MentorHubError as

    {"error": <kind>, "message": <human-readable text>}

with the matching status code. Anything that is NOT a MentorHubError is
caught by the boundary handler and reported as a generic 500.
"""


class MentorHubError(Exception):
    """Base class. Subclasses pin the kind and HTTP status."""

    kind = "internal"
    status_code = 500
    default_message = "Internal server error."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"error": self.kind, "message": self.message}


class BadRequest(MentorHubError):
    kind = "bad_request"
    status_code = 400
    default_message = "Bad request."


class Unauthenticated(MentorHubError):
    kind = "unauthenticated"
    status_code = 401
    default_message = "Access denied. No token provided."


class Forbidden(MentorHubError):
    kind = "forbidden"
    status_code = 403
    default_message = "Access denied."


class NotFound(MentorHubError):
    kind = "not_found"
    status_code = 404
    default_message = "Not found."


class Conflict(MentorHubError):
    """Duplicate resource. Reported as 400, not 409, for client compatibility."""

    kind = "conflict"
    status_code = 400
    default_message = "Resource already exists."


class Internal(MentorHubError):
    pass
