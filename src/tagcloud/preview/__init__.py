"""FastAPI server for previewing generated word clouds.

- models.py: Pydantic models for API request/response
- state.py: Page being previewed
- endpoints.py: HTTP endpoints
"""

from pathlib import Path

from fastapi import FastAPI

from . import state
from .endpoints import router
from .models import CloudEntryModel, CloudRequest, CloudResponse, PreviewState

app = FastAPI(title="tagcloud preview")
app.include_router(router)


def configure(page_path: Path | None = None) -> None:
    """Configure the server with the page to preview."""
    state.configure(page=page_path)


__all__ = [
    "app",
    "configure",
    "CloudEntryModel",
    "CloudRequest",
    "CloudResponse",
    "PreviewState",
]
