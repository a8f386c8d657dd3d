"""Photographer directory for clients browsing the marketplace."""

from dataclasses import dataclass
from typing import Protocol

from pix_node.domain.models import PhotographerListing


class DirectoryRepository(Protocol):
    """Source of photographer listings."""

    def list_photographers(self) -> list[PhotographerListing]:
        """Return every listing in display order."""


@dataclass
class PhotographerDirectory:
    """Application service for browsing photographers."""

    repository: DirectoryRepository

    def search(self, query: str | None = None) -> list[PhotographerListing]:
        """Return listings matching name, location or a specialty."""
        listings = self.repository.list_photographers()
        if not query or not query.strip():
            return listings
        needle = query.strip().lower()
        return [listing for listing in listings if _matches(listing, needle)]


def _matches(listing: PhotographerListing, needle: str) -> bool:
    haystack = [listing.name, listing.location, *listing.specialties]
    return any(needle in value.lower() for value in haystack)
