"""View models rendered by components and page controllers."""

from dataclasses import dataclass, field
from enum import StrEnum

from pix_node.domain.forms import SubmissionState


@dataclass(frozen=True)
class FieldView:
    """One rendered form input."""

    name: str
    label: str
    value: object
    error: str | None = None
    disabled: bool = False


@dataclass(frozen=True)
class FormView:
    """A rendered form with its submit control."""

    name: str
    fields: list[FieldView]
    submit_label: str
    submit_disabled: bool
    state: SubmissionState
    error: str | None = None

    def field(self, name: str) -> FieldView:
        """Return the rendered field with the given name."""
        for entry in self.fields:
            if entry.name == name:
                return entry
        raise KeyError(name)

    @property
    def labels(self) -> list[str]:
        return [entry.label for entry in self.fields]


class ProfileViewMode(StrEnum):
    """Mutually exclusive renderings of a profile component."""

    LOADING = "loading"
    ERROR = "error"
    MISSING = "missing"
    EDIT = "edit"
    DISPLAY = "display"


@dataclass(frozen=True)
class ProfileView:
    """Rendered profile component."""

    mode: ProfileViewMode
    message: str | None = None
    heading: str | None = None
    details: list[tuple[str, str]] = field(default_factory=list)
    actions: list[str] = field(default_factory=list)
    form: FormView | None = None
    update_error: str | None = None
    link: str | None = None


@dataclass(frozen=True)
class TagChip:
    """Tag filter button."""

    name: str
    active: bool


@dataclass(frozen=True)
class GalleryCard:
    """Rendered portfolio item."""

    id: str
    title: str
    image_url: str
    date_label: str
    featured: bool
    description: str | None
    tags: list[str]
    extra_tag_count: int


@dataclass(frozen=True)
class GalleryView:
    """Rendered portfolio gallery."""

    cards: list[GalleryCard]
    tags: list[TagChip]
    show_clear_filter: bool
    empty_title: str | None = None
    empty_message: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.empty_title is not None
