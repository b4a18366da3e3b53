"""Error details domain model."""

from pydantic import BaseModel, ConfigDict


class ErrorDetails(BaseModel):
    """Details about a failed upstream call, including HTTP status code if applicable."""

    model_config = ConfigDict(frozen=True)

    status_code: int | None = None
    reason: str

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.reason} (HTTP {self.status_code})"
        return self.reason
