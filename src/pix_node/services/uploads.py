"""Simulated image uploads for portfolio items."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol
from uuid import uuid4

from pix_node.services.simulation import Sleeper

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int], None]

PROGRESS_STEP = 10


class UploadClient(Protocol):
    """Interface for storing an image and returning its public URL."""

    async def upload(self, filename: str, on_progress: ProgressCallback) -> str:
        """Upload a file, reporting progress percentages, and return its URL."""


@dataclass
class SimulatedUploadClient(UploadClient):
    """Upload client that advances progress on a fixed tick."""

    sleeper: Sleeper
    tick_seconds: float
    base_url: str

    async def upload(self, filename: str, on_progress: ProgressCallback) -> str:
        """Report progress in fixed steps and return a generated URL."""
        on_progress(0)
        for progress in range(PROGRESS_STEP, 101, PROGRESS_STEP):
            await self.sleeper.sleep(self.tick_seconds)
            on_progress(progress)
        url = f"{self.base_url.rstrip('/')}/{uuid4().hex}-{filename}"
        logger.info("Upload completed", extra={"upload_filename": filename})
        return url


@dataclass
class UploadTracker:
    """Progress and preview state for one image input."""

    progress: int | None = None
    preview_url: str | None = None

    @property
    def in_progress(self) -> bool:
        """Return True while an upload has started but not finished."""
        return self.progress is not None and self.progress < 100

    @property
    def status_text(self) -> str | None:
        if not self.in_progress:
            return None
        return f"Uploading: {self.progress}%"

    def start(self, filename: str) -> None:
        self.preview_url = f"preview://{filename}"
        self.progress = 0

    def update(self, progress: int) -> None:
        self.progress = min(max(progress, 0), 100)

    def finish(self, url: str) -> None:
        self.progress = 100
        self.preview_url = url
