"""Tests for the portfolio page, item editor and simulated upload."""

import asyncio
import logging

import pytest

from pix_node.adapters.memory_repositories import InMemoryPortfolioRepository
from pix_node.adapters.mock_data import (
    DEMO_CLIENT,
    DEMO_PHOTOGRAPHER,
    seed_portfolio_items,
)
from pix_node.domain.forms import SubmissionState
from pix_node.domain.session import SessionContext
from pix_node.services.forms import FormBusyError
from pix_node.services.portfolio import (
    PortfolioAccessError,
    PortfolioItemEditor,
    PortfolioPage,
)
from pix_node.services.uploads import SimulatedUploadClient, UploadTracker
from tests.conftest import (
    FIXED_NOW,
    GateSleeper,
    InstantSleeper,
    RecordingSubmit,
    fixed_clock,
)


def _uploader(sleeper) -> SimulatedUploadClient:
    return SimulatedUploadClient(
        sleeper=sleeper, tick_seconds=0.3, base_url="https://cdn.test/uploads/"
    )


def _page(session: SessionContext, sleeper: InstantSleeper) -> PortfolioPage:
    return PortfolioPage(
        session=session,
        photographer_id=DEMO_PHOTOGRAPHER.id,
        repository=InMemoryPortfolioRepository(items=seed_portfolio_items()),
        uploader=_uploader(sleeper),
        clock=fixed_clock,
    )


def test_upload_reports_progress_in_ten_percent_steps(
    sleeper: InstantSleeper,
) -> None:
    progress: list[int] = []

    url = asyncio.run(_uploader(sleeper).upload("beach.jpg", progress.append))

    assert progress == [0, 10, 20, 30, 40, 50, 60, 70, 80, 90, 100]
    assert sleeper.calls == [0.3] * 10
    assert url.startswith("https://cdn.test/uploads/")
    assert url.endswith("-beach.jpg")


def test_upload_tracker_status_text() -> None:
    tracker = UploadTracker()
    assert tracker.status_text is None

    tracker.start("beach.jpg")
    tracker.update(40)

    assert tracker.in_progress
    assert tracker.status_text == "Uploading: 40%"
    assert tracker.preview_url == "preview://beach.jpg"


def test_image_url_is_set_only_after_progress_completes(
    sleeper: InstantSleeper, submit: RecordingSubmit
) -> None:
    editor = PortfolioItemEditor(uploader=_uploader(sleeper), on_save=submit)
    seen: list[tuple[int, object]] = []
    original_update = editor.upload.update

    def spy(progress: int) -> None:
        original_update(progress)
        seen.append((progress, editor.form.values["image_url"]))

    editor.upload.update = spy

    url = asyncio.run(editor.upload_image("beach.jpg"))

    assert all(value == "" for _, value in seen)
    assert seen[-1][0] == 100
    assert editor.form.values["image_url"] == url
    assert editor.upload.preview_url == url


def test_submit_is_blocked_while_uploading(submit: RecordingSubmit) -> None:
    async def scenario() -> None:
        sleeper = GateSleeper()
        editor = PortfolioItemEditor(uploader=_uploader(sleeper), on_save=submit)
        editor.edit("title", "Beach")
        task = asyncio.create_task(editor.upload_image("beach.jpg"))
        await asyncio.sleep(0)

        assert editor.upload.in_progress
        assert editor.upload.status_text == "Uploading: 0%"
        assert editor.render().submit_disabled
        with pytest.raises(FormBusyError):
            await editor.submit()
        with pytest.raises(FormBusyError):
            await editor.upload_image("second.jpg")

        sleeper.open()
        await task

        assert not editor.render().submit_disabled
        outcome = await editor.submit()
        assert outcome.state is SubmissionState.SUCCESS

    asyncio.run(scenario())
    assert len(submit.payloads) == 1


def test_image_url_cannot_be_typed(
    sleeper: InstantSleeper, submit: RecordingSubmit
) -> None:
    editor = PortfolioItemEditor(uploader=_uploader(sleeper), on_save=submit)

    with pytest.raises(ValueError):
        editor.edit("image_url", "https://example.com/x.jpg")


def test_owner_can_add_item_to_gallery(sleeper: InstantSleeper) -> None:
    page = _page(SessionContext.for_user(DEMO_PHOTOGRAPHER), sleeper)
    assert page.can_edit

    editor = page.start_new_item()
    editor.edit_many({"title": "Beach Day", "tags": "Beach, Summer"})
    asyncio.run(editor.upload_image("beach.jpg"))
    outcome = asyncio.run(editor.submit())

    assert outcome.accepted
    saved = page.saved[0]
    assert saved.title == "Beach Day"
    assert saved.tags == ["beach", "summer"]
    assert saved.date == FIXED_NOW
    assert saved.description is None
    assert saved.id.startswith("item-")
    assert [card.id for card in page.render().cards][-1] == saved.id


def test_new_item_tags_join_the_filter(sleeper: InstantSleeper) -> None:
    page = _page(SessionContext.for_user(DEMO_PHOTOGRAPHER), sleeper)
    editor = page.start_new_item()
    editor.edit("title", "Beach Day")
    editor.attach_image("https://cdn.test/uploads/beach.jpg")
    editor.edit("tags", "beach")
    asyncio.run(editor.submit())

    page.gallery.click_tag("beach")

    assert [card.title for card in page.render().cards] == ["Beach Day"]


def test_missing_image_blocks_save(sleeper: InstantSleeper) -> None:
    page = _page(SessionContext.for_user(DEMO_PHOTOGRAPHER), sleeper)
    editor = page.start_new_item()
    editor.edit("title", "No image")

    outcome = asyncio.run(editor.submit())

    assert outcome.errors == {"image_url": "Image is required"}
    assert page.saved == []


def test_non_owner_cannot_add_items(sleeper: InstantSleeper) -> None:
    page = _page(SessionContext.for_user(DEMO_CLIENT), sleeper)

    assert not page.can_edit
    with pytest.raises(PortfolioAccessError):
        page.start_new_item()


def test_editor_prefills_from_existing_item(
    sleeper: InstantSleeper, submit: RecordingSubmit
) -> None:
    item = seed_portfolio_items()[1]

    editor = PortfolioItemEditor(
        uploader=_uploader(sleeper), on_save=submit, initial=item
    )
    view = editor.render()

    assert view.field("title").value == "Corporate Headshots"
    assert view.field("tags").value == "corporate, studio, headshot"
    assert editor.upload.preview_url == item.image_url
    assert not editor.upload.in_progress


def test_upload_completion_is_logged_with_the_filename(
    sleeper: InstantSleeper,
) -> None:
    records: list[logging.LogRecord] = []

    class ListHandler(logging.Handler):
        def emit(self, record: logging.LogRecord) -> None:
            records.append(record)

    logger = logging.getLogger("pix_node.services.uploads")
    handler = ListHandler()
    previous_level = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    try:
        url = asyncio.run(_uploader(sleeper).upload("beach.jpg", lambda _: None))
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous_level)

    assert url.endswith("-beach.jpg")
    assert [record.upload_filename for record in records] == ["beach.jpg"]
