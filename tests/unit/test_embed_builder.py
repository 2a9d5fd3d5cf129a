import pytest
from pydantic import ValidationError

from doublevisuals.models.video import EmbedKind, Platform, VideoSource
from doublevisuals.video.embed import GENERIC_LINK_LABEL, PLACEHOLDER_LABEL, build, preview_uri
from doublevisuals.video.resolver import resolve


@pytest.mark.parametrize("url", [None, "", "  "])
def test_empty_url_builds_placeholder(url):
    descriptor = build(resolve(url), "Valify Video")
    assert descriptor.kind is EmbedKind.PLACEHOLDER
    assert descriptor.uri is None
    assert descriptor.label == PLACEHOLDER_LABEL


@pytest.mark.parametrize(
    "url",
    [
        "https://youtu.be/4EUAtuRWlPk",
        "https://www.youtube.com/shorts/4EUAtuRWlPk",
        "https://www.youtube.com/watch?v=4EUAtuRWlPk&t=12",
    ],
)
def test_youtube_variants_are_playable(url):
    descriptor = build(resolve(url), "FN Preview")
    assert descriptor.kind is EmbedKind.PLAYABLE
    assert descriptor.uri == "https://www.youtube.com/embed/4EUAtuRWlPk"
    assert descriptor.label == "FN Preview"


def test_playable_uri_has_no_forced_flags():
    descriptor = build(resolve("https://youtu.be/abc"), "t")
    assert "?" not in descriptor.uri


def test_social_post_is_external_link_to_original():
    url = "https://x.com/user/status/123"
    descriptor = build(resolve(url), "Clip")
    assert descriptor.kind is EmbedKind.EXTERNAL_LINK
    assert descriptor.uri == url
    assert descriptor.label == "View on X"


def test_instagram_label():
    descriptor = build(resolve("https://www.instagram.com/reel/abc/"), "Reel")
    assert descriptor.label == "View on Instagram"


def test_unrecognized_url_is_generic_external_link():
    url = "https://vimeo.com/12345"
    descriptor = build(resolve(url), "Vimeo cut")
    assert descriptor.kind is EmbedKind.EXTERNAL_LINK
    assert descriptor.uri == url
    assert descriptor.label == GENERIC_LINK_LABEL


def test_preview_uri_flags_follow_hover():
    descriptor = build(resolve("https://youtu.be/abc"), "t")
    assert preview_uri(descriptor, hovered=False) == (
        "https://www.youtube.com/embed/abc?autoplay=0&mute=1&controls=0&loop=1"
    )
    assert preview_uri(descriptor, hovered=True).startswith(
        "https://www.youtube.com/embed/abc?autoplay=1&"
    )


def test_preview_uri_leaves_other_kinds_alone():
    link = build(resolve("https://x.com/a/status/1"), "t")
    placeholder = build(resolve(""), "t")
    assert preview_uri(link, hovered=True) == "https://x.com/a/status/1"
    assert preview_uri(placeholder, hovered=True) is None


def test_video_source_is_immutable():
    source = resolve("https://youtu.be/abc")
    with pytest.raises(ValidationError):
        source.id = "other"


def test_video_source_rejects_id_on_social_post():
    with pytest.raises(ValidationError):
        VideoSource(platform=Platform.SOCIAL_POST, id="123", original_url="https://x.com/a")


def test_video_source_requires_id_for_youtube():
    with pytest.raises(ValidationError):
        VideoSource(platform=Platform.YOUTUBE_WATCH, id=None, original_url="https://youtube.com")
