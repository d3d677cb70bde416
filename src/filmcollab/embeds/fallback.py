"""Plain link fallback for links without a native embed."""

from filmcollab.embeds.base import render_external_link


def render_link_fallback(url: str | None) -> str:
    """Render a "View Video" button link, or nothing when there is no URL."""
    if not url:
        return ""
    return (
        '<div class="video-embed video-embed--link">'
        f'{render_external_link(url, "View Video", css_class="button button--outline")}'
        "</div>"
    )
