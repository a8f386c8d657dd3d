"""Tests for the per-screen form definitions."""

import asyncio
from datetime import UTC, datetime

import pytest

from pix_node.adapters.mock_data import seed_client_profiles, seed_photographer_profiles
from pix_node.domain.models import SocialLinks
from pix_node.services.form_definitions import (
    CLIENT_PROFILE_FORM,
    FORGOT_PASSWORD_FORM,
    LOGIN_FORM,
    PHOTOGRAPHER_PROFILE_FORM,
    PORTFOLIO_ITEM_FORM,
    REGISTER_FORM,
    apply_client_update,
    apply_photographer_update,
    photographer_form_values,
)
from pix_node.services.forms import FormDefinition, FormMachine
from tests.conftest import FIXED_NOW, RecordingSubmit, fixed_clock


def _submit(
    definition: FormDefinition, values: dict[str, object]
) -> tuple[FormMachine, RecordingSubmit]:
    submit = RecordingSubmit()
    form = FormMachine(definition=definition, on_submit=submit, clock=fixed_clock)
    form.edit_many(values)
    asyncio.run(form.submit())
    return form, submit


@pytest.mark.parametrize(
    ("definition", "required"),
    [
        (LOGIN_FORM, {"email", "password"}),
        (REGISTER_FORM, {"name", "email", "password", "confirm_password", "role"}),
        (FORGOT_PASSWORD_FORM, {"email"}),
        (CLIENT_PROFILE_FORM, {"location"}),
        (PHOTOGRAPHER_PROFILE_FORM, {"bio", "specialties", "location"}),
        (PORTFOLIO_ITEM_FORM, {"title", "image_url"}),
    ],
)
def test_empty_required_fields_each_get_one_error(
    definition: FormDefinition, required: set[str]
) -> None:
    form, submit = _submit(definition, {})

    assert set(form.errors) == required
    assert all(isinstance(message, str) for message in form.errors.values())
    assert submit.payloads == []


def test_register_rejects_mismatched_passwords() -> None:
    form, submit = _submit(
        REGISTER_FORM,
        {
            "name": "Jane",
            "email": "jane@example.com",
            "password": "password123",
            "confirm_password": "password124",
            "role": "client",
        },
    )

    assert form.errors == {"confirm_password": "Passwords do not match"}
    assert submit.payloads == []


def test_register_payload_excludes_password_confirmation() -> None:
    _, submit = _submit(
        REGISTER_FORM,
        {
            "name": "Jane",
            "email": "jane@example.com",
            "password": "password123",
            "confirm_password": "password123",
            "role": "photographer",
        },
    )

    assert submit.payloads == [
        {
            "name": "Jane",
            "email": "jane@example.com",
            "password": "password123",
            "role": "photographer",
        }
    ]


def test_register_enforces_password_length_and_role() -> None:
    form, _ = _submit(
        REGISTER_FORM,
        {
            "name": "Jane",
            "email": "jane@example.com",
            "password": "short",
            "confirm_password": "short",
            "role": "admin",
        },
    )

    assert form.errors == {
        "password": "Password must be at least 8 characters",
        "role": "Please select a role",
    }


def test_photographer_specialties_are_parsed_in_order() -> None:
    _, submit = _submit(
        PHOTOGRAPHER_PROFILE_FORM,
        {
            "bio": "Natural light portraits",
            "specialties": "Portrait, Event",
            "years_of_experience": "5",
            "location": "New York, NY",
        },
    )

    payload = submit.payloads[0]
    assert payload["specialties"] == ["Portrait", "Event"]
    assert payload["years_of_experience"] == 5
    assert payload["available"] is True


def test_photographer_numeric_rules() -> None:
    base = {
        "bio": "Bio",
        "specialties": "Portrait",
        "location": "Boston, MA",
    }

    form, _ = _submit(
        PHOTOGRAPHER_PROFILE_FORM, {**base, "years_of_experience": "many"}
    )
    assert form.errors == {"years_of_experience": "Experience must be a number"}

    form, _ = _submit(PHOTOGRAPHER_PROFILE_FORM, {**base, "years_of_experience": "-1"})
    assert form.errors == {
        "years_of_experience": "Experience must be a positive number"
    }

    form, _ = _submit(PHOTOGRAPHER_PROFILE_FORM, {**base, "hourly_rate": "-5"})
    assert form.errors == {"hourly_rate": "Hourly rate must be a positive number"}


def test_photographer_non_numeric_rate_becomes_absent() -> None:
    _, submit = _submit(
        PHOTOGRAPHER_PROFILE_FORM,
        {
            "bio": "Bio",
            "specialties": "Portrait",
            "location": "Boston, MA",
            "hourly_rate": "negotiable",
        },
    )

    assert submit.payloads[0]["hourly_rate"] is None


def test_photographer_website_must_be_well_formed() -> None:
    form, _ = _submit(
        PHOTOGRAPHER_PROFILE_FORM,
        {
            "bio": "Bio",
            "specialties": "Portrait",
            "location": "Boston, MA",
            "website": "not a url",
        },
    )

    assert form.errors == {"website": "Please enter a valid URL"}


def test_client_payload_keeps_blank_optional_fields() -> None:
    _, submit = _submit(CLIENT_PROFILE_FORM, {"location": "Chicago, IL"})

    assert submit.payloads == [
        {
            "company_name": "",
            "industry": "",
            "description": "",
            "location": "Chicago, IL",
            "website": "",
        }
    ]


def test_client_website_validated_when_present() -> None:
    form, submit = _submit(
        CLIENT_PROFILE_FORM, {"location": "Chicago, IL", "website": "smith"}
    )

    assert form.errors == {"website": "Please enter a valid URL"}
    assert submit.payloads == []


def test_portfolio_tags_are_lowercased_and_date_defaults_to_now() -> None:
    _, submit = _submit(
        PORTFOLIO_ITEM_FORM,
        {
            "title": "Rooftop",
            "image_url": "https://cdn.test/rooftop.jpg",
            "tags": " Urban, NIGHT, urban ,",
        },
    )

    payload = submit.payloads[0]
    assert payload["tags"] == ["urban", "night"]
    assert payload["date"] == FIXED_NOW
    assert payload["featured"] is False


def test_forgot_password_uses_its_own_email_message() -> None:
    form, _ = _submit(FORGOT_PASSWORD_FORM, {"email": "jane"})

    assert form.errors == {"email": "Please enter a valid email address"}


def test_photographer_form_values_prefill_inputs() -> None:
    profile = seed_photographer_profiles()[0]

    values = photographer_form_values(profile)

    assert values["specialties"] == "Portrait, Event, Wedding"
    assert values["years_of_experience"] == "5"
    assert values["hourly_rate"] == "100"
    assert values["instagram"] == "johndoephoto"


def test_apply_client_update_normalises_blanks_to_absent() -> None:
    current = seed_client_profiles()[0]

    updated = apply_client_update(
        current.user_id,
        {
            "company_name": "",
            "industry": "Retail",
            "description": "",
            "location": "Chicago, IL",
            "website": "",
        },
        current,
    )

    assert updated.company_name is None
    assert updated.industry == "Retail"
    assert updated.location == "Chicago, IL"
    assert updated.website is None


def test_apply_photographer_update_merges_partial_payload() -> None:
    current = seed_photographer_profiles()[0]

    updated = apply_photographer_update(
        current.user_id,
        {
            "bio": "New bio",
            "social_links": {"instagram": "newhandle", "facebook": ""},
        },
        current,
    )

    assert updated.bio == "New bio"
    assert updated.specialties == current.specialties
    assert updated.years_of_experience == 5
    assert updated.social_links == SocialLinks(instagram="newhandle")


def test_apply_photographer_update_creates_profile_when_missing() -> None:
    created = apply_photographer_update(
        "user-9",
        {
            "bio": "Bio",
            "specialties": ["Travel"],
            "years_of_experience": 2,
            "location": "Denver, CO",
        },
    )

    assert created.user_id == "user-9"
    assert created.available is True
    assert created.hourly_rate is None
    assert created.social_links == SocialLinks()


def test_portfolio_date_input_is_respected() -> None:
    _, submit = _submit(
        PORTFOLIO_ITEM_FORM,
        {
            "title": "Rooftop",
            "image_url": "https://cdn.test/rooftop.jpg",
            "date": datetime(2024, 12, 31, tzinfo=UTC),
        },
    )

    assert submit.payloads[0]["date"] == datetime(2024, 12, 31, tzinfo=UTC)


def test_photographer_experience_must_be_whole_years() -> None:
    form, submit = _submit(
        PHOTOGRAPHER_PROFILE_FORM,
        {
            "bio": "Bio",
            "specialties": "Portrait",
            "location": "Boston, MA",
            "years_of_experience": "2.7",
        },
    )

    assert form.errors == {"years_of_experience": "Experience must be a whole number"}
    assert submit.payloads == []


def test_apply_photographer_update_rejects_fractional_years() -> None:
    current = seed_photographer_profiles()[0]

    with pytest.raises(ValueError):
        apply_photographer_update(
            current.user_id, {"years_of_experience": 2.7}, current
        )

    updated = apply_photographer_update(
        current.user_id, {"years_of_experience": "3.0"}, current
    )
    assert updated.years_of_experience == 3
    assert isinstance(updated.years_of_experience, int)
