"""Errors surfaced to the user when a journey cannot be planned."""

from journey_planner.domain.models.error_details import ErrorDetails


class RoutePlanningError(Exception):
    """Base class for failures that prevent building a journey."""

    def __init__(
        self, reason: str, status_code: int | None = None, retryable: bool = False
    ) -> None:
        super().__init__(reason)
        self.details = ErrorDetails(reason=reason, status_code=status_code, retryable=retryable)

    @property
    def user_message(self) -> str:
        """Message suitable for showing to the traveller."""
        return self.details.reason


class RouteTimeoutError(RoutePlanningError):
    """The backend did not answer within the request timeout."""

    def __init__(self, timeout_seconds: float) -> None:
        super().__init__(
            f"Route request timed out after {timeout_seconds:g}s. Please try again.",
            retryable=True,
        )
        self.timeout_seconds = timeout_seconds


class BackendHttpError(RoutePlanningError):
    """The backend answered with a non-success HTTP status."""


class BackendRejectedError(RoutePlanningError):
    """The backend answered with success=false."""


class EmptyItineraryError(RoutePlanningError):
    """The backend reported success but returned no segments."""


class MalformedResponseError(RoutePlanningError):
    """The backend body could not be decoded into the expected shape."""
