"""Error details domain model."""

from pydantic import BaseModel, ConfigDict


class ErrorDetails(BaseModel):
    """Why a journey could not be planned.

    ``retryable`` marks transient failures (timeouts, unreachable or failing
    backend) where repeating the same request may succeed.
    """

    model_config = ConfigDict(frozen=True)

    reason: str
    status_code: int | None = None
    retryable: bool = False
