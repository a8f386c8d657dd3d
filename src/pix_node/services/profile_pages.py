"""Profile pages: load the session user's profile and apply updates."""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar

from pix_node.domain.models import ClientProfile, PhotographerProfile, User
from pix_node.domain.session import SessionContext
from pix_node.domain.views import ProfileView
from pix_node.services.form_definitions import (
    apply_client_update,
    apply_photographer_update,
)
from pix_node.services.profiles import (
    ProfileComponent,
    client_profile_component,
    photographer_profile_component,
)
from pix_node.services.simulation import Sleeper

logger = logging.getLogger(__name__)

ProfileT = TypeVar("ProfileT", ClientProfile, PhotographerProfile)

LOAD_ERROR = "Failed to load profile. Please try again later."


class ProfileUpdateError(RuntimeError):
    """Raised when a profile update cannot be applied."""


class UserRepository(Protocol):
    """Lookup interface for user accounts."""

    def get_user(self, user_id: str) -> User | None:
        """Return a user by id, if present."""


class ProfileRepository(Protocol[ProfileT]):
    """Persistence interface for role-specific profiles."""

    def get_profile(self, user_id: str) -> ProfileT | None:
        """Return the profile for a user, if present."""

    def save_profile(self, profile: ProfileT) -> ProfileT:
        """Store a profile and return it."""


@dataclass
class ProfilePage(Generic[ProfileT]):
    """Owns the loaded user and profile and re-supplies them to the view."""

    session: SessionContext
    users: UserRepository
    profiles: ProfileRepository[ProfileT]
    sleeper: Sleeper
    delay_seconds: float
    component: ProfileComponent[ProfileT]
    apply_update: Callable[[str, Mapping[str, object], ProfileT | None], ProfileT]
    user: User | None = None
    profile: ProfileT | None = None
    is_loading: bool = True
    error: str | None = None

    def __post_init__(self) -> None:
        self.component.on_update = self.update_profile
        self._push()

    @property
    def subtitle(self) -> str:
        if self.is_loading:
            return "Loading profile information..."
        return "View and manage your profile"

    async def load(self) -> None:
        """Fetch the session user's account and profile."""
        self.is_loading = True
        self.error = None
        self._push()
        try:
            await self.sleeper.sleep(self.delay_seconds)
            user_id = self.session.user_id
            user = self.users.get_user(user_id) if user_id else None
            profile = self.profiles.get_profile(user_id) if user_id else None
        except Exception:
            logger.exception("Failed to load profile")
            self.error = LOAD_ERROR
        else:
            self.user = user
            self.profile = profile
        finally:
            self.is_loading = False
            self._push()

    async def update_profile(self, data: dict[str, object]) -> None:
        """Merge a partial update into the stored profile."""
        user_id = self.session.user_id
        if user_id is None:
            raise ProfileUpdateError("No signed-in user")
        try:
            await self.sleeper.sleep(self.delay_seconds)
            updated = self.apply_update(user_id, data, self.profile)
            self.profile = self.profiles.save_profile(updated)
        except Exception as exc:
            logger.exception("Failed to update profile", extra={"user_id": user_id})
            raise ProfileUpdateError("Failed to update profile") from exc
        logger.info("Profile updated", extra={"user_id": user_id})
        self._push()

    def render(self) -> ProfileView:
        return self.component.render()

    def _push(self) -> None:
        self.component.is_owner = self.user is not None and self.session.owns(
            self.user.id
        )
        self.component.receive(
            user=self.user,
            profile=self.profile,
            is_loading=self.is_loading,
            error=self.error,
        )


def photographer_profile_page(
    session: SessionContext,
    users: UserRepository,
    profiles: ProfileRepository[PhotographerProfile],
    sleeper: Sleeper,
    delay_seconds: float,
) -> ProfilePage[PhotographerProfile]:
    """Build the photographer profile page."""
    return ProfilePage(
        session=session,
        users=users,
        profiles=profiles,
        sleeper=sleeper,
        delay_seconds=delay_seconds,
        component=photographer_profile_component(),
        apply_update=apply_photographer_update,
    )


def client_profile_page(
    session: SessionContext,
    users: UserRepository,
    profiles: ProfileRepository[ClientProfile],
    sleeper: Sleeper,
    delay_seconds: float,
) -> ProfilePage[ClientProfile]:
    """Build the client profile page."""
    return ProfilePage(
        session=session,
        users=users,
        profiles=profiles,
        sleeper=sleeper,
        delay_seconds=delay_seconds,
        component=client_profile_component(),
        apply_update=apply_client_update,
    )
