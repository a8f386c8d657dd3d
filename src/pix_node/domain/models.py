"""Domain models for the photographer marketplace."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum


class UserRole(StrEnum):
    """Roles a marketplace account can hold."""

    CLIENT = "client"
    PHOTOGRAPHER = "photographer"
    ADMIN = "admin"


@dataclass(frozen=True)
class User:
    """Represents a marketplace account."""

    id: str
    email: str
    name: str
    role: UserRole
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class SocialLinks:
    """Social media handles shown on a photographer profile."""

    instagram: str | None = None
    facebook: str | None = None
    twitter: str | None = None
    linkedin: str | None = None


@dataclass(frozen=True)
class PhotographerProfile:
    """Photographer specific profile information."""

    user_id: str
    bio: str
    specialties: list[str]
    years_of_experience: int
    location: str
    available: bool = True
    hourly_rate: float | None = None
    website: str | None = None
    social_links: SocialLinks = field(default_factory=SocialLinks)


@dataclass(frozen=True)
class ClientProfile:
    """Client specific profile information."""

    user_id: str
    location: str
    company_name: str | None = None
    industry: str | None = None
    description: str | None = None
    website: str | None = None


@dataclass(frozen=True)
class PortfolioItem:
    """A single showcased work entry."""

    id: str
    photographer_id: str
    title: str
    image_url: str
    date: datetime
    tags: list[str] = field(default_factory=list)
    description: str | None = None
    featured: bool = False


@dataclass(frozen=True)
class PhotographerListing:
    """Directory card for browsing photographers."""

    id: str
    name: str
    location: str
    specialties: list[str]
    rate: str
    bio: str
    image_url: str
