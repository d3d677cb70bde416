"""YouTube iframe embed."""

from __future__ import annotations

from html import escape
from typing import ClassVar
from urllib.parse import urlencode

from filmcollab.embeds.base import BaseEmbed
from filmcollab.embeds.script_loader import ScriptLoader
from filmcollab.utils.url_parser import ParsedVideo, Provider


class YouTubeEmbed(BaseEmbed):
    """Render a YouTube video as an autoplaying, muted, looping iframe.

    Looping a single video requires ``playlist`` to name the video itself.
    """

    name: ClassVar[str] = "youtube"
    provider: ClassVar[Provider] = Provider.YOUTUBE

    EMBED_URL = "https://www.youtube.com/embed/{video_id}"
    ALLOW = (
        "accelerometer; autoplay; clipboard-write; encrypted-media; "
        "gyroscope; picture-in-picture; web-share"
    )

    @classmethod
    def embed_url(cls, video_id: str) -> str:
        """Build the player URL for a video ID."""
        params = {
            "autoplay": "1",
            "mute": "1",
            "loop": "1",
            "playlist": video_id,
            "playsinline": "1",
            "rel": "0",
        }
        return f"{cls.EMBED_URL.format(video_id=video_id)}?{urlencode(params)}"

    def render(self, parsed: ParsedVideo, script_loader: ScriptLoader) -> str:
        src = self.embed_url(parsed.video_id or "")
        return (
            '<div class="embed-frame embed-frame--youtube" style="aspect-ratio: 9/16; max-width: 325px">'
            f'<iframe src="{escape(src)}" title="YouTube video player" frameborder="0" '
            f'allow="{self.ALLOW}" allowfullscreen></iframe>'
            "</div>"
        )
