"""Instagram iframe embed."""

from __future__ import annotations

from html import escape
from typing import ClassVar

from filmcollab.embeds.base import BaseEmbed
from filmcollab.embeds.script_loader import ScriptLoader
from filmcollab.utils.url_parser import ParsedVideo, Provider


class InstagramEmbed(BaseEmbed):
    """Render an Instagram reel or post through Instagram's own embed page.

    A direct iframe needs no third-party script.
    """

    name: ClassVar[str] = "instagram"
    provider: ClassVar[Provider] = Provider.INSTAGRAM

    EMBED_URL = "https://www.instagram.com/reel/{video_id}/embed/"
    ALLOW = "autoplay; clipboard-write; encrypted-media; picture-in-picture; web-share"

    @classmethod
    def embed_url(cls, video_id: str) -> str:
        return cls.EMBED_URL.format(video_id=video_id)

    def render(self, parsed: ParsedVideo, script_loader: ScriptLoader) -> str:
        src = self.embed_url(parsed.video_id or "")
        return (
            '<div class="embed-frame embed-frame--instagram" style="width: 100%; max-width: 400px">'
            f'<iframe src="{escape(src)}" title="Instagram Reel" '
            'style="width: 100%; height: 600px; border: none; border-radius: 8px; overflow: hidden" '
            f'allow="{self.ALLOW}" allowfullscreen></iframe>'
            "</div>"
        )
