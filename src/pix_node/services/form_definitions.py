"""Form definitions for every marketplace screen."""

from collections.abc import Mapping
from dataclasses import asdict
from datetime import datetime

from pix_node.domain.models import (
    ClientProfile,
    PhotographerProfile,
    PortfolioItem,
    SocialLinks,
)
from pix_node.domain.parsing import (
    join_csv,
    parse_bool,
    parse_date,
    parse_number,
    parse_optional_number,
    split_csv,
    text,
)
from pix_node.domain.validation import (
    EmailShape,
    MatchesField,
    Minimum,
    MinItems,
    MinLength,
    Numeric,
    OneOf,
    Required,
    WellFormedUrl,
    WholeNumber,
)
from pix_node.services.forms import FieldSpec, FormDefinition

SOCIAL_NETWORKS = ("instagram", "facebook", "twitter", "linkedin")

_INVALID_EMAIL = "Invalid email format"
_INVALID_URL = "Please enter a valid URL"

PROFILE_UPDATE_ERROR = "Failed to update profile. Please try again."


def _prepare_login(values: Mapping[str, object], now: datetime) -> dict[str, object]:
    return {
        "email": text(values.get("email")).strip(),
        "password": text(values.get("password")),
    }


def _prepare_register(
    values: Mapping[str, object], now: datetime
) -> dict[str, object]:
    return {
        "name": text(values.get("name")).strip(),
        "email": text(values.get("email")).strip(),
        "password": text(values.get("password")),
        "confirm_password": text(values.get("confirm_password")),
        "role": text(values.get("role")).strip().lower(),
    }


def _prepare_forgot_password(
    values: Mapping[str, object], now: datetime
) -> dict[str, object]:
    return {"email": text(values.get("email")).strip()}


def _prepare_client_profile(
    values: Mapping[str, object], now: datetime
) -> dict[str, object]:
    return {
        name: text(values.get(name)).strip()
        for name in ("company_name", "industry", "description", "location", "website")
    }


def _prepare_photographer_profile(
    values: Mapping[str, object], now: datetime
) -> dict[str, object]:
    return {
        "bio": text(values.get("bio")).strip(),
        "specialties": split_csv(values.get("specialties")),
        "years_of_experience": parse_number(values.get("years_of_experience")),
        "hourly_rate": parse_optional_number(values.get("hourly_rate")),
        "location": text(values.get("location")).strip(),
        "available": parse_bool(values.get("available"), default=True),
        "website": text(values.get("website")).strip(),
        "social_links": {
            network: text(values.get(network)).strip() for network in SOCIAL_NETWORKS
        },
    }


def _prepare_portfolio_item(
    values: Mapping[str, object], now: datetime
) -> dict[str, object]:
    return {
        "title": text(values.get("title")).strip(),
        "description": text(values.get("description")).strip(),
        "image_url": text(values.get("image_url")).strip(),
        "tags": split_csv(values.get("tags"), lower=True),
        "date": parse_date(values.get("date"), fallback=now),
        "featured": parse_bool(values.get("featured"), default=False),
    }


LOGIN_FORM = FormDefinition(
    name="login",
    fields=(
        FieldSpec("email", "Email"),
        FieldSpec("password", "Password"),
    ),
    schema={
        "email": (Required("Email is required"), EmailShape(_INVALID_EMAIL)),
        "password": (Required("Password is required"),),
    },
    prepare=_prepare_login,
    submit_label="Log in",
    busy_label="Logging in...",
)

REGISTER_FORM = FormDefinition(
    name="register",
    fields=(
        FieldSpec("name", "Name"),
        FieldSpec("email", "Email"),
        FieldSpec("password", "Password"),
        FieldSpec("confirm_password", "Confirm Password"),
        FieldSpec("role", "I am a"),
    ),
    schema={
        "name": (Required("Name is required"),),
        "email": (Required("Email is required"), EmailShape(_INVALID_EMAIL)),
        "password": (
            Required("Password is required"),
            MinLength(8, "Password must be at least 8 characters"),
        ),
        "confirm_password": (
            Required("Please confirm your password"),
            MatchesField("password", "Passwords do not match"),
        ),
        "role": (
            Required("Please select a role"),
            OneOf(frozenset({"photographer", "client"}), "Please select a role"),
        ),
    },
    prepare=_prepare_register,
    submit_label="Register",
    busy_label="Registering...",
    ui_only=frozenset({"confirm_password"}),
)

FORGOT_PASSWORD_FORM = FormDefinition(
    name="forgot_password",
    fields=(FieldSpec("email", "Email address"),),
    schema={
        "email": (
            Required("Email is required"),
            EmailShape("Please enter a valid email address"),
        ),
    },
    prepare=_prepare_forgot_password,
    submit_label="Send Reset Link",
    busy_label="Sending...",
)

CLIENT_PROFILE_FORM = FormDefinition(
    name="client_profile",
    fields=(
        FieldSpec("company_name", "Company Name (optional)"),
        FieldSpec("industry", "Industry (optional)"),
        FieldSpec("description", "Description (optional)"),
        FieldSpec("location", "Location"),
        FieldSpec("website", "Website (optional)"),
    ),
    schema={
        "location": (Required("Location is required"),),
        "website": (WellFormedUrl(_INVALID_URL),),
    },
    prepare=_prepare_client_profile,
    submit_label="Save Profile",
    busy_label="Saving...",
    failure_message=PROFILE_UPDATE_ERROR,
)

PHOTOGRAPHER_PROFILE_FORM = FormDefinition(
    name="photographer_profile",
    fields=(
        FieldSpec("bio", "Bio"),
        FieldSpec("specialties", "Specialties"),
        FieldSpec("years_of_experience", "Years of Experience", default="0"),
        FieldSpec("hourly_rate", "Hourly Rate (optional)"),
        FieldSpec("location", "Location"),
        FieldSpec("available", "Available for hire", default=True),
        FieldSpec("website", "Website (optional)"),
        FieldSpec("instagram", "Instagram"),
        FieldSpec("facebook", "Facebook"),
        FieldSpec("twitter", "Twitter"),
        FieldSpec("linkedin", "LinkedIn"),
    ),
    schema={
        "bio": (Required("Bio is required"),),
        "specialties": (
            Required("Please select at least one specialty"),
            MinItems(1, "Please select at least one specialty"),
        ),
        "years_of_experience": (
            Required("Years of experience is required"),
            Numeric("Experience must be a number"),
            WholeNumber("Experience must be a whole number"),
            Minimum(0, "Experience must be a positive number"),
        ),
        "hourly_rate": (Minimum(0, "Hourly rate must be a positive number"),),
        "location": (Required("Location is required"),),
        "website": (WellFormedUrl(_INVALID_URL),),
    },
    prepare=_prepare_photographer_profile,
    submit_label="Save Profile",
    busy_label="Saving...",
    failure_message=PROFILE_UPDATE_ERROR,
)

PORTFOLIO_ITEM_FORM = FormDefinition(
    name="portfolio_item",
    fields=(
        FieldSpec("title", "Title"),
        FieldSpec("description", "Description (optional)"),
        FieldSpec("image_url", "Upload Image"),
        FieldSpec("tags", "Tags (optional)"),
        FieldSpec("date", "Date", default=None),
        FieldSpec("featured", "Featured", default=False),
    ),
    schema={
        "title": (Required("Title is required"),),
        "image_url": (Required("Image is required"),),
    },
    prepare=_prepare_portfolio_item,
    submit_label="Save",
    busy_label="Saving...",
)


def client_form_values(profile: ClientProfile) -> dict[str, object]:
    """Return raw input values pre-filled from a client profile."""
    return {
        "company_name": profile.company_name or "",
        "industry": profile.industry or "",
        "description": profile.description or "",
        "location": profile.location,
        "website": profile.website or "",
    }


def photographer_form_values(profile: PhotographerProfile) -> dict[str, object]:
    """Return raw input values pre-filled from a photographer profile."""
    values: dict[str, object] = {
        "bio": profile.bio,
        "specialties": join_csv(profile.specialties),
        "years_of_experience": str(profile.years_of_experience),
        "hourly_rate": "" if profile.hourly_rate is None else str(profile.hourly_rate),
        "location": profile.location,
        "available": profile.available,
        "website": profile.website or "",
    }
    links = asdict(profile.social_links)
    for network in SOCIAL_NETWORKS:
        values[network] = links.get(network) or ""
    return values


def portfolio_form_values(item: PortfolioItem) -> dict[str, object]:
    """Return raw input values pre-filled from an existing portfolio item."""
    return {
        "title": item.title,
        "description": item.description or "",
        "image_url": item.image_url,
        "tags": join_csv(item.tags),
        "date": item.date,
        "featured": item.featured,
    }


def _optional(value: object) -> str | None:
    cleaned = text(value).strip()
    return cleaned or None


def apply_client_update(
    user_id: str,
    payload: Mapping[str, object],
    current: ClientProfile | None = None,
) -> ClientProfile:
    """Merge a client profile payload into the stored profile."""
    merged: dict[str, object] = asdict(current) if current else {}
    merged.update(payload)
    return ClientProfile(
        user_id=current.user_id if current else user_id,
        location=text(merged.get("location")).strip(),
        company_name=_optional(merged.get("company_name")),
        industry=_optional(merged.get("industry")),
        description=_optional(merged.get("description")),
        website=_optional(merged.get("website")),
    )


def apply_photographer_update(
    user_id: str,
    payload: Mapping[str, object],
    current: PhotographerProfile | None = None,
) -> PhotographerProfile:
    """Merge a photographer profile payload into the stored profile."""
    merged: dict[str, object] = asdict(current) if current else {}
    merged.update(payload)
    raw_links = merged.get("social_links") or {}
    links = raw_links if isinstance(raw_links, Mapping) else {}
    years = parse_optional_number(merged.get("years_of_experience")) or 0
    if not float(years).is_integer():
        raise ValueError(f"years_of_experience must be a whole number, got {years}")
    return PhotographerProfile(
        user_id=current.user_id if current else user_id,
        bio=text(merged.get("bio")),
        specialties=split_csv(merged.get("specialties")),
        years_of_experience=round(years),
        location=text(merged.get("location")).strip(),
        available=parse_bool(merged.get("available"), default=True),
        hourly_rate=parse_optional_number(merged.get("hourly_rate")),
        website=_optional(merged.get("website")),
        social_links=SocialLinks(
            **{network: _optional(links.get(network)) for network in SOCIAL_NETWORKS}
        ),
    )
