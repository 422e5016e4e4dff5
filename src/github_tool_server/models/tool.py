# Tool input models
# Each registered tool validates its parameters against one of these

from typing import Any

from pydantic import BaseModel, Field, field_validator


class GetPopularRepositoriesInput(BaseModel):
    """Parameters accepted by the getPopularRepositories tool."""

    count: int = Field(
        10,
        ge=1,
        le=100,
        description="The number of popular repositories to return (default: 10, max: 100).",
    )
    language: str | None = Field(
        None,
        description="An optional programming language to filter the repositories by.",
    )

    @field_validator("count", mode="before")
    @classmethod
    def validate_count_is_number(cls, v: Any) -> Any:
        """Accept JSON numbers only; integral floats like 5.0 pass, 2.5 does not."""
        if isinstance(v, (bool, str)):
            raise ValueError("Expected number")
        return v
