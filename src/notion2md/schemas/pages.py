"""Page models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class PageRef(BaseModel):
    """A page selected for export."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str


class Page(BaseModel):
    """Final rendered page."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    content: str
