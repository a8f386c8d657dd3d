"""Portfolio page: gallery browsing and the item editor."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol
from uuid import uuid4

from pix_node.domain.forms import SubmitOutcome
from pix_node.domain.models import PortfolioItem, UserRole
from pix_node.domain.session import SessionContext
from pix_node.domain.views import FormView, GalleryView
from pix_node.services.form_definitions import (
    PORTFOLIO_ITEM_FORM,
    portfolio_form_values,
)
from pix_node.services.forms import (
    Clock,
    FormBusyError,
    FormMachine,
    SubmitHandler,
    utcnow,
)
from pix_node.services.gallery import PortfolioGallery
from pix_node.services.uploads import UploadClient, UploadTracker

logger = logging.getLogger(__name__)


class PortfolioRepository(Protocol):
    """Persistence interface for portfolio items."""

    def list_items(self, photographer_id: str) -> list[PortfolioItem]:
        """Return a photographer's items in display order."""

    def add_item(self, item: PortfolioItem) -> PortfolioItem:
        """Store a new item and return it."""


class PortfolioAccessError(PermissionError):
    """Raised when editing a portfolio the session does not own."""


@dataclass
class PortfolioItemEditor:
    """Portfolio item form paired with a simulated image upload.

    ``image_url`` cannot be typed in; it is filled once an upload reaches
    100%, and submitting is blocked while an upload is running.
    """

    uploader: UploadClient
    on_save: SubmitHandler
    initial: PortfolioItem | None = None
    clock: Clock = utcnow
    upload: UploadTracker = field(default_factory=UploadTracker)
    form: FormMachine = field(init=False)

    def __post_init__(self) -> None:
        self.form = FormMachine(
            definition=PORTFOLIO_ITEM_FORM,
            on_submit=self.on_save,
            initial=portfolio_form_values(self.initial) if self.initial else None,
            clock=self.clock,
        )
        if self.initial is not None:
            self.upload.preview_url = self.initial.image_url

    def edit(self, name: str, value: object) -> None:
        """Update a typed field."""
        if name == "image_url":
            raise ValueError("image_url is set by uploading an image")
        self.form.edit(name, value)

    def edit_many(self, values: Mapping[str, object]) -> None:
        for name, value in values.items():
            self.edit(name, value)

    async def upload_image(self, filename: str) -> str:
        """Upload an image and store its URL on the form once complete."""
        if self.upload.in_progress or self.form.is_disabled:
            raise FormBusyError("Portfolio item form is busy")
        self.upload.start(filename)
        url = await self.uploader.upload(filename, self.upload.update)
        self.attach_image(url)
        return url

    def attach_image(self, url: str) -> None:
        """Use an already uploaded image for this item."""
        if self.upload.in_progress:
            raise FormBusyError("Image upload in progress")
        self.upload.finish(url)
        self.form.edit("image_url", url)

    async def submit(self) -> SubmitOutcome:
        """Submit the item unless an upload is still running."""
        if self.upload.in_progress:
            raise FormBusyError("Image upload in progress")
        return await self.form.submit()

    def render(self) -> FormView:
        return self.form.render(submit_blocked=self.upload.in_progress)


@dataclass
class PortfolioPage:
    """A photographer's portfolio, editable by its owner."""

    session: SessionContext
    photographer_id: str
    repository: PortfolioRepository
    uploader: UploadClient
    clock: Clock = utcnow
    gallery: PortfolioGallery = field(init=False)
    editor: PortfolioItemEditor | None = None
    saved: list[PortfolioItem] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.gallery = PortfolioGallery(items=[])
        self.refresh()

    @property
    def can_edit(self) -> bool:
        """Return True when a photographer is viewing their own portfolio."""
        return self.session.role is UserRole.PHOTOGRAPHER and self.session.owns(
            self.photographer_id
        )

    def refresh(self) -> None:
        """Reload items into the gallery, keeping the active tag."""
        self.gallery.items = self.repository.list_items(self.photographer_id)

    def start_new_item(self) -> PortfolioItemEditor:
        """Open an empty item editor."""
        if not self.can_edit:
            raise PortfolioAccessError(self.photographer_id)
        self.editor = PortfolioItemEditor(
            uploader=self.uploader, on_save=self._save_item, clock=self.clock
        )
        return self.editor

    async def _save_item(self, data: dict[str, object]) -> None:
        date = data.get("date")
        item = PortfolioItem(
            id=f"item-{uuid4()}",
            photographer_id=self.photographer_id,
            title=str(data["title"]),
            image_url=str(data["image_url"]),
            date=date if isinstance(date, datetime) else self.clock(),
            tags=list(data.get("tags") or []),
            description=str(data.get("description") or "") or None,
            featured=bool(data.get("featured")),
        )
        self.saved.append(self.repository.add_item(item))
        logger.info("Portfolio item saved", extra={"item_id": item.id})
        self.refresh()

    def render(self) -> GalleryView:
        return self.gallery.render()
