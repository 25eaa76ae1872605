"""
Pydantic models for the GitHub search API and the AWTRIX custom-app payload.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ValidationError

from ulanzi_monitor.errors import DecodeError


class PullRequestItem(BaseModel):
    """One issue-search hit for an open pull request."""

    id: int
    title: str
    html_url: str
    state: str
    draft: bool = False
    repository_url: str


class PullRequestSearchResponse(BaseModel):
    """Response body of /search/issues."""

    total_count: int
    items: list[PullRequestItem]


class CommitPerson(BaseModel):
    date: datetime


class CommitDetail(BaseModel):
    committer: CommitPerson


class CommitItem(BaseModel):
    """One commit-search hit; only the committer date is used."""

    commit: CommitDetail


class CommitSearchResponse(BaseModel):
    """Response body of /search/commits."""

    total_count: int | None = None
    items: list[CommitItem]


class TextFragment(BaseModel):
    """A colored run of text on the display."""

    t: str
    c: str


class UlanziPayload(BaseModel):
    """Body posted to the AWTRIX /api/custom endpoint."""

    text: str | list[TextFragment] | None = None
    icon: str | None = None
    duration: int | None = None
    draw: list[dict[str, list[Any]]] | None = None

    def to_json(self) -> dict:
        """Serialise without unset fields."""
        return self.model_dump(exclude_none=True)


def decode(model: type[BaseModel], data: Any, source: str):
    """
    Validate decoded JSON against a model.

    Raises:
        DecodeError: If the data does not match the model
    """
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise DecodeError(f"Unexpected response shape from {source}: {e}") from e
