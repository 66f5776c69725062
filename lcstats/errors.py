class StatsError(Exception):
    """Base for errors that map onto a client-facing JSON error."""

    status_code = 500
    public_message = "Server error"


class UserNotFound(StatsError):
    status_code = 404
    public_message = "User not found"

    def __init__(self, username: str) -> None:
        super().__init__(f"no such user: {username!r}")
        self.username = username


class UpstreamError(StatsError):
    """Network failure, timeout, non-2xx or unusable payload from the GraphQL API."""

    def __init__(self, operation: str, reason: str, status: int = 0) -> None:
        super().__init__(f"{operation}: {reason}")
        self.operation = operation
        self.reason = reason
        self.status = status
