"""Compact video preview for dense lists."""

from __future__ import annotations

from collections.abc import Callable

from filmcollab.embeds.base import render_icon, render_label
from filmcollab.utils.url_parser import ParsedVideo, parse_video_url


class VideoPreview:
    """Icon and label affordance for a social link.

    Holds no load state and never renders an embed; clicking it hands
    control to the caller's handler.
    """

    def __init__(
        self,
        url: str | None,
        on_click: Callable[[ParsedVideo], None] | None = None,
    ) -> None:
        self.url = url
        self.parsed: ParsedVideo | None = parse_video_url(url)
        self.on_click = on_click

    def render(self) -> str:
        parsed = self.parsed
        if parsed is None or not parsed.is_embeddable:
            return ""
        return (
            f'<button type="button" class="video-preview" data-provider="{parsed.provider.value}">'
            f"{render_icon(parsed.provider)}{render_label(parsed.provider)}"
            "</button>"
        )

    def click(self) -> None:
        """Invoke the caller's handler with the classified link."""
        if self.parsed is None or not self.parsed.is_embeddable or self.on_click is None:
            return
        self.on_click(self.parsed)
