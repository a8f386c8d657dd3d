"""Navigation surface of the marketplace."""

from dataclasses import dataclass
from enum import Enum

from pix_node.domain.models import UserRole


@dataclass(frozen=True)
class Page:
    """Declarative route definition."""

    path: str
    title: str


class Route(Enum):
    """Enum of routes (single source of truth)."""

    LOGIN = Page("/auth/login", "Log in")
    REGISTER = Page("/auth/register", "Sign up")
    FORGOT_PASSWORD = Page("/forgot", "Reset password")
    PHOTOGRAPHER_PROFILE = Page("/photographer/profile", "Photographer profile")
    CLIENT_PROFILE = Page("/client/profile", "Client profile")
    CLIENT_CREATE_PROFILE = Page("/client/create-profile", "Create client profile")
    PHOTOGRAPHER_CREATE_PROFILE = Page(
        "/photographer/create-profile", "Create photographer profile"
    )
    PHOTOGRAPHERS = Page("/photographers", "Find photographers")
    PORTFOLIO = Page("/portfolio", "Portfolio")

    @property
    def path(self) -> str:
        return self.value.path


def navigation_entries() -> list[dict[str, str]]:
    """Return routes formatted for the navigation endpoint."""
    return [
        {
            "name": entry.name.lower(),
            "path": entry.value.path,
            "title": entry.value.title,
        }
        for entry in Route
    ]


def profile_route(role: UserRole) -> Route:
    """Return the profile route a user lands on after signing in."""
    if role is UserRole.CLIENT:
        return Route.CLIENT_PROFILE
    return Route.PHOTOGRAPHER_PROFILE
