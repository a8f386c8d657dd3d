"""Portfolio gallery with tag filtering."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

from pix_node.domain.models import PortfolioItem
from pix_node.domain.views import GalleryCard, GalleryView, TagChip

EMPTY_TITLE = "No portfolio items"
EMPTY_MESSAGE = "Add items to your portfolio to showcase your work."
CARD_TAG_LIMIT = 2


def format_date(value: datetime) -> str:
    """Format a date like ``Jan 15, 2025``."""
    return f"{value:%b} {value.day}, {value.year}"


def distinct_tags(items: list[PortfolioItem]) -> list[str]:
    """Return every tag used across items, sorted for stable display."""
    return sorted({tag for item in items for tag in item.tags})


def filter_by_tag(items: list[PortfolioItem], tag: str | None) -> list[PortfolioItem]:
    """Return the items carrying ``tag`` in original order, or all items."""
    if tag is None:
        return list(items)
    return [item for item in items if tag in item.tags]


@dataclass
class PortfolioGallery:
    """Gallery component holding the active tag selection."""

    items: list[PortfolioItem]
    on_item_click: Callable[[PortfolioItem], None] | None = None
    active_tag: str | None = field(default=None)

    @property
    def all_tags(self) -> list[str]:
        return distinct_tags(self.items)

    @property
    def visible_items(self) -> list[PortfolioItem]:
        return filter_by_tag(self.items, self.active_tag)

    def click_tag(self, tag: str) -> None:
        """Activate a tag, or clear the filter when it is already active."""
        self.active_tag = None if tag == self.active_tag else tag

    def clear_filter(self) -> None:
        self.active_tag = None

    def click_item(self, item: PortfolioItem) -> None:
        """Forward an item click to the caller, if it listens."""
        if self.on_item_click is not None:
            self.on_item_click(item)

    def render(self) -> GalleryView:
        """Render tag chips and cards, or the empty state."""
        if not self.items:
            return GalleryView(
                cards=[],
                tags=[],
                show_clear_filter=False,
                empty_title=EMPTY_TITLE,
                empty_message=EMPTY_MESSAGE,
            )
        return GalleryView(
            cards=[_card(item) for item in self.visible_items],
            tags=[
                TagChip(name=tag, active=tag == self.active_tag)
                for tag in self.all_tags
            ],
            show_clear_filter=self.active_tag is not None,
        )


def _card(item: PortfolioItem) -> GalleryCard:
    return GalleryCard(
        id=item.id,
        title=item.title,
        image_url=item.image_url,
        date_label=format_date(item.date),
        featured=item.featured,
        description=item.description or None,
        tags=item.tags[:CARD_TAG_LIMIT],
        extra_tag_count=max(len(item.tags) - CARD_TAG_LIMIT, 0),
    )
