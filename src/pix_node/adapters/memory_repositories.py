"""In-memory repositories backing the mocked marketplace data."""

from dataclasses import dataclass, field
from typing import TypeVar

from pix_node.domain.models import (
    ClientProfile,
    PhotographerListing,
    PhotographerProfile,
    PortfolioItem,
    User,
)
from pix_node.services.auth import AccountStore
from pix_node.services.directory import DirectoryRepository
from pix_node.services.portfolio import PortfolioRepository
from pix_node.services.profile_pages import ProfileRepository, UserRepository

ProfileT = TypeVar("ProfileT", ClientProfile, PhotographerProfile)


@dataclass
class InMemoryUserRepository(UserRepository, AccountStore):
    """User lookups served from a dict."""

    users: dict[str, User] = field(default_factory=dict)

    def get_user(self, user_id: str) -> User | None:
        """Return a user by id, if present."""
        return self.users.get(user_id)

    def add_user(self, user: User) -> None:
        self.users[user.id] = user


@dataclass
class InMemoryProfileRepository(ProfileRepository[ProfileT]):
    """Profiles keyed by user id."""

    profiles: dict[str, ProfileT] = field(default_factory=dict)

    def get_profile(self, user_id: str) -> ProfileT | None:
        """Return the profile for a user, if present."""
        return self.profiles.get(user_id)

    def save_profile(self, profile: ProfileT) -> ProfileT:
        """Store a profile, replacing any previous version."""
        self.profiles[profile.user_id] = profile
        return profile


@dataclass
class InMemoryPortfolioRepository(PortfolioRepository):
    """Portfolio items in insertion order."""

    items: list[PortfolioItem] = field(default_factory=list)

    def list_items(self, photographer_id: str) -> list[PortfolioItem]:
        """Return a photographer's items in the order they were added."""
        return [item for item in self.items if item.photographer_id == photographer_id]

    def add_item(self, item: PortfolioItem) -> PortfolioItem:
        """Append an item and return it."""
        self.items.append(item)
        return item


@dataclass
class InMemoryDirectoryRepository(DirectoryRepository):
    """Static photographer listings."""

    listings: list[PhotographerListing] = field(default_factory=list)

    def list_photographers(self) -> list[PhotographerListing]:
        """Return every listing."""
        return list(self.listings)
