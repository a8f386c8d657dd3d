"""Shared request helpers for the API routers."""

from collections.abc import Mapping

from fastapi import Request

from pix_node.containers import AppContainer
from pix_node.domain.forms import SubmitOutcome


class FormValidationError(Exception):
    """Raised when submitted form values fail validation."""

    def __init__(self, errors: Mapping[str, str]) -> None:
        super().__init__("Form validation failed")
        self.errors = dict(errors)


def get_container(request: Request) -> AppContainer:
    """Return the container attached to the running app."""
    return request.app.state.container


def raise_for_errors(outcome: SubmitOutcome) -> None:
    """Turn field errors from a submit attempt into a 422 response."""
    if outcome.errors:
        raise FormValidationError(outcome.errors)
