"""Video embed endpoints used by the portfolio pages."""

from fastapi import APIRouter, Query

from doublevisuals.content import resolve_embed, works_by_category
from doublevisuals.models.site import EmbedResolution, WorksResponse
from doublevisuals.utils.logging import get_logger

router = APIRouter(prefix="/api")
logger = get_logger(__name__)


@router.get("/embed")
async def get_embed(
    url: str = Query("", description="Pasted video or post URL"),
    title: str = Query("", description="Title shown with the embed"),
) -> EmbedResolution:
    """
    Resolves a pasted URL into its embed descriptor.

    Always succeeds: unrecognized URLs come back as external links and an
    empty URL as a placeholder.
    """
    resolution = resolve_embed(url, title)
    logger.info(
        "embed_resolved",
        platform=resolution.source.platform.value,
        kind=resolution.embed.kind.value,
    )
    return resolution


@router.get("/works")
async def get_works() -> WorksResponse:
    """Portfolio catalog grouped by category."""
    return WorksResponse(sections=works_by_category())
