"""Portfolio and photographer directory endpoints."""

from fastapi import APIRouter, Depends, Header, HTTPException, Query, status

from pix_node.api.dependencies import get_container, raise_for_errors
from pix_node.api.models import (
    DirectoryResponse,
    GalleryModel,
    ListingModel,
    PortfolioItemModel,
    PortfolioItemRequest,
    PortfolioResponse,
    UploadRequest,
    UploadResponse,
    form_values,
)
from pix_node.containers import AppContainer
from pix_node.services.portfolio import PortfolioAccessError, PortfolioPage

router = APIRouter(tags=["portfolio"])


def _portfolio_page(
    container: AppContainer, user_id: str | None, photographer_id: str | None
) -> PortfolioPage:
    demo_id = container.settings.demo_photographer_id
    session = container.session_for(user_id or demo_id)
    return PortfolioPage(
        session=session,
        photographer_id=photographer_id or session.user_id or demo_id,
        repository=container.portfolio_repository,
        uploader=container.upload_client,
        clock=container.clock,
    )


@router.get("/photographers")
async def list_photographers(
    q: str | None = None, container: AppContainer = Depends(get_container)
) -> DirectoryResponse:
    """Return photographers matching an optional search query."""
    listings = container.directory.search(q)
    return DirectoryResponse(
        photographers=[ListingModel.from_domain(listing) for listing in listings]
    )


@router.get("/portfolio")
async def get_portfolio(
    photographer_id: str | None = Query(default=None, alias="photographerId"),
    tag: str | None = None,
    x_user_id: str | None = Header(default=None),
    container: AppContainer = Depends(get_container),
) -> PortfolioResponse:
    """Return a rendered portfolio gallery, optionally filtered by tag."""
    page = _portfolio_page(container, x_user_id, photographer_id)
    if tag:
        page.gallery.click_tag(tag)
    return PortfolioResponse(
        photographer_id=page.photographer_id,
        can_edit=page.can_edit,
        gallery=GalleryModel.from_view(page.render()),
    )


@router.post("/portfolio/uploads", status_code=status.HTTP_201_CREATED)
async def upload_image(
    payload: UploadRequest, container: AppContainer = Depends(get_container)
) -> UploadResponse:
    """Upload an image and return its URL once progress reaches 100%."""
    progress: list[int] = []
    url = await container.upload_client.upload(payload.filename, progress.append)
    return UploadResponse(image_url=url, progress=progress)


@router.post("/portfolio/items", status_code=status.HTTP_201_CREATED)
async def create_portfolio_item(
    payload: PortfolioItemRequest,
    x_user_id: str | None = Header(default=None),
    container: AppContainer = Depends(get_container),
) -> PortfolioItemModel:
    """Add an item to the requesting photographer's portfolio."""
    page = _portfolio_page(container, x_user_id, None)
    try:
        editor = page.start_new_item()
    except PortfolioAccessError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN) from exc
    values = form_values(payload)
    image_url = values.pop("image_url", "")
    if image_url:
        editor.attach_image(str(image_url))
    editor.edit_many(values)
    raise_for_errors(await editor.submit())
    if not page.saved:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY, detail=editor.render().error
        )
    return PortfolioItemModel.from_domain(page.saved[-1])
