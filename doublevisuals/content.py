"""Portfolio catalog shown on the experience page."""

from doublevisuals.models.site import EmbedResolution, VideoWork, WorkCategory, WorkEntry
from doublevisuals.video import build, preview_uri, resolve

WORKS: tuple[VideoWork, ...] = (
    VideoWork(
        title="ThriveEsports - Loadout Video",
        url="https://www.youtube.com/shorts/hXNxZlzDl7c",
        category=WorkCategory.SHORTFORM,
    ),
    VideoWork(
        title="iiisAndmaniii Short Form Reel",
        url="https://www.youtube.com/shorts/s97VTmWW8uU",
        category=WorkCategory.SHORTFORM,
    ),
    VideoWork(
        title="Southside Roleplay Ad",
        url="https://youtube.com/shorts/RQhwNwBKOSM",
        category=WorkCategory.SHORTFORM,
    ),
    VideoWork(title="Valify Video - NOT POSTED YET", url="", category=WorkCategory.LONGFORM),
    VideoWork(
        title="Skiourakic Bingo Challenge",
        url="https://www.youtube.com/watch?v=oVif9j-DyrQ",
        category=WorkCategory.LONGFORM,
    ),
    VideoWork(
        title="Επαιξα 1V1 με τον @McpcmStavros...",
        url="https://www.youtube.com/watch?v=ceCb8VJQLz8",
        category=WorkCategory.LONGFORM,
    ),
    VideoWork(
        title="FN Preview (Seryx Style)",
        url="https://youtu.be/4EUAtuRWlPk",
        category=WorkCategory.HIGHLIGHTS,
    ),
    VideoWork(
        title="FN Preview (Old Zerox Style)",
        url="https://www.youtube.com/watch?v=GmuX2Q4SbyU",
        category=WorkCategory.HIGHLIGHTS,
    ),
)


def resolve_embed(url: str | None, title: str) -> EmbedResolution:
    """Runs a URL through the resolver and builder, with hover-preview URIs."""
    source = resolve(url)
    embed = build(source, title)
    return EmbedResolution(
        source=source,
        embed=embed,
        preview_uri=preview_uri(embed, hovered=False),
        hover_uri=preview_uri(embed, hovered=True),
    )


def works_by_category(works: tuple[VideoWork, ...] = WORKS) -> dict[WorkCategory, list[WorkEntry]]:
    """Catalog grouped in page order, every category present even when empty."""
    sections: dict[WorkCategory, list[WorkEntry]] = {category: [] for category in WorkCategory}
    for work in works:
        sections[work.category].append(
            WorkEntry(
                title=work.title,
                category=work.category,
                resolution=resolve_embed(work.url, work.title),
            )
        )
    return sections
