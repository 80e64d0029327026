"""Error taxonomy for the dashboard."""


class DashboardError(Exception):
    """Base class for dashboard errors."""


class FetchFailure(DashboardError):
    """A city could not be resolved.

    Covers network errors, unknown cities and malformed responses alike.
    """

    def __init__(self, city: str):
        super().__init__(f"Could not fetch weather for {city!r}")
        self.city = city


class SearchError(DashboardError):
    """A user-initiated search failed; the message is shown to the user."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DashboardBusy(DashboardError):
    """An operation of the same kind is already in flight."""

    def __init__(self, operation: str):
        super().__init__(f"A {operation} is already in progress")
        self.operation = operation
