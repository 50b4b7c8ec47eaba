"""Pagination request parameters."""

from enum import Enum

from pydantic import BaseModel, Field


class PageDirection(str, Enum):
    """Sort direction for paginated requests."""

    ASCENDING = "asc"
    DESCENDING = "desc"

    def __str__(self) -> str:
        return self.value


class PageParams(BaseModel):
    """Standard ``direction``/``page``/``per_page`` query parameters.

    ``str(params)`` renders them in that fixed order, e.g.
    ``direction=desc&page=1&per_page=20``.
    """

    direction: PageDirection = PageDirection.DESCENDING
    page: int = Field(default=1, ge=1)
    per_page: int = Field(default=20, gt=0)

    model_config = {"frozen": True}

    def to_query(self) -> dict[str, str | int]:
        """Return the parameters as an ordered mapping of wire names to values."""
        return {"direction": self.direction.value, "page": self.page, "per_page": self.per_page}

    def __str__(self) -> str:
        return "&".join(f"{name}={value}" for name, value in self.to_query().items())
