"""Pydantic models for the HTTP surface.

Field names are snake_case in Python and camelCase on the wire.
"""

from dataclasses import asdict
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from pix_node.domain.forms import SubmissionState
from pix_node.domain.models import (
    ClientProfile,
    PhotographerListing,
    PhotographerProfile,
    PortfolioItem,
    User,
    UserRole,
)
from pix_node.domain.views import FormView, GalleryView, ProfileView, ProfileViewMode


class ApiModel(BaseModel):
    """Base model serialising to camelCase and accepting either casing."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LoginRequest(ApiModel):
    """Login form input."""

    email: str = ""
    password: str = ""


class RegisterRequest(ApiModel):
    """Registration form input."""

    name: str = ""
    email: str = ""
    password: str = ""
    confirm_password: str = ""
    role: str = ""


class ForgotPasswordRequest(ApiModel):
    """Password reset request input."""

    email: str = ""


class ClientProfileRequest(ApiModel):
    """Client profile edit input; omitted fields keep their current value."""

    company_name: str | None = None
    industry: str | None = None
    description: str | None = None
    location: str | None = None
    website: str | None = None


class PhotographerProfileRequest(ApiModel):
    """Photographer profile edit input; omitted fields keep their current value."""

    bio: str | None = None
    specialties: str | list[str] | None = None
    years_of_experience: str | int | float | None = None
    hourly_rate: str | int | float | None = None
    location: str | None = None
    available: bool | None = None
    website: str | None = None
    instagram: str | None = None
    facebook: str | None = None
    twitter: str | None = None
    linkedin: str | None = None


class UploadRequest(ApiModel):
    """Image upload input."""

    filename: str


class PortfolioItemRequest(ApiModel):
    """New portfolio item input."""

    title: str = ""
    description: str = ""
    image_url: str = ""
    tags: str | list[str] = ""
    date: datetime | None = None
    featured: bool = False


def form_values(request: BaseModel) -> dict[str, object]:
    """Return only the fields a client actually sent, keyed by form field."""
    return request.model_dump(exclude_unset=True)


class UserModel(ApiModel):
    """Public view of an account."""

    id: str
    email: str
    name: str
    role: UserRole
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserModel":
        return cls.model_validate(asdict(user))


class SocialLinksModel(ApiModel):
    instagram: str | None = None
    facebook: str | None = None
    twitter: str | None = None
    linkedin: str | None = None


class PhotographerProfileModel(ApiModel):
    """Stored photographer profile."""

    user_id: str
    bio: str
    specialties: list[str]
    years_of_experience: int
    location: str
    available: bool
    hourly_rate: float | None = None
    website: str | None = None
    social_links: SocialLinksModel

    @classmethod
    def from_domain(cls, profile: PhotographerProfile) -> "PhotographerProfileModel":
        return cls.model_validate(asdict(profile))


class ClientProfileModel(ApiModel):
    """Stored client profile."""

    user_id: str
    location: str
    company_name: str | None = None
    industry: str | None = None
    description: str | None = None
    website: str | None = None

    @classmethod
    def from_domain(cls, profile: ClientProfile) -> "ClientProfileModel":
        return cls.model_validate(asdict(profile))


class DetailModel(ApiModel):
    label: str
    value: str


class FieldModel(ApiModel):
    name: str
    label: str
    value: Any = None
    error: str | None = None
    disabled: bool = False


class FormModel(ApiModel):
    """Rendered form state."""

    name: str
    fields: list[FieldModel]
    submit_label: str
    submit_disabled: bool
    state: SubmissionState
    error: str | None = None

    @classmethod
    def from_view(cls, view: FormView) -> "FormModel":
        return cls.model_validate(asdict(view))


class ProfileViewModel(ApiModel):
    """Rendered profile component."""

    mode: ProfileViewMode
    message: str | None = None
    heading: str | None = None
    details: list[DetailModel] = []
    actions: list[str] = []
    form: FormModel | None = None
    update_error: str | None = None
    link: str | None = None

    @classmethod
    def from_view(cls, view: ProfileView) -> "ProfileViewModel":
        return cls(
            mode=view.mode,
            message=view.message,
            heading=view.heading,
            details=[
                DetailModel(label=label, value=value) for label, value in view.details
            ],
            actions=list(view.actions),
            form=FormModel.from_view(view.form) if view.form else None,
            update_error=view.update_error,
            link=view.link,
        )


class PhotographerProfileResponse(ApiModel):
    user: UserModel
    profile: PhotographerProfileModel
    view: ProfileViewModel


class ClientProfileResponse(ApiModel):
    user: UserModel
    profile: ClientProfileModel
    view: ProfileViewModel


class AuthResponse(ApiModel):
    """Signed-in account and the page to continue to."""

    user: UserModel
    redirect_to: str


class ForgotPasswordResponse(ApiModel):
    message: str
    login_path: str


class ListingModel(ApiModel):
    id: str
    name: str
    location: str
    specialties: list[str]
    rate: str
    bio: str
    image_url: str

    @classmethod
    def from_domain(cls, listing: PhotographerListing) -> "ListingModel":
        return cls.model_validate(asdict(listing))


class DirectoryResponse(ApiModel):
    photographers: list[ListingModel]


class PortfolioItemModel(ApiModel):
    """Stored portfolio item."""

    id: str
    photographer_id: str
    title: str
    image_url: str
    date: datetime
    tags: list[str]
    description: str | None = None
    featured: bool = False

    @classmethod
    def from_domain(cls, item: PortfolioItem) -> "PortfolioItemModel":
        return cls.model_validate(asdict(item))


class TagChipModel(ApiModel):
    name: str
    active: bool


class GalleryCardModel(ApiModel):
    id: str
    title: str
    image_url: str
    date_label: str
    featured: bool
    description: str | None = None
    tags: list[str]
    extra_tag_count: int


class GalleryModel(ApiModel):
    """Rendered gallery."""

    cards: list[GalleryCardModel]
    tags: list[TagChipModel]
    show_clear_filter: bool
    empty_title: str | None = None
    empty_message: str | None = None

    @classmethod
    def from_view(cls, view: GalleryView) -> "GalleryModel":
        return cls.model_validate(asdict(view))


class PortfolioResponse(ApiModel):
    photographer_id: str
    can_edit: bool
    gallery: GalleryModel


class UploadResponse(ApiModel):
    """Finished upload with the progress reported along the way."""

    image_url: str
    progress: list[int]
