"""Pydantic models for the preview server."""

from pydantic import BaseModel, Field


class CloudRequest(BaseModel):
    """Request to build a cloud from posted text."""

    text: str
    count: int = Field(ge=1)
    seed: int | None = None  # None = random colors
    clamp: bool = False
    keep_empty: bool = False


class CloudEntryModel(BaseModel):
    """A rendered word with its font size and color classes."""

    word: str
    count: int
    font_size: int


class CloudResponse(BaseModel):
    """Selected words and the rendered page."""

    title: str
    cloud_class: str
    entries: list[CloudEntryModel]
    html: str


class PreviewState(BaseModel):
    """Current preview server state."""

    page_path: str | None = None
    page_exists: bool = False
