"""TikTok blockquote embed.

The blockquote is inert markup until TikTok's ``embed.js`` runs and turns
it into a player. The script is requested through the page's
``ScriptLoader`` so it is fetched lazily and only once per page.
"""

from __future__ import annotations

from html import escape
from typing import ClassVar

from filmcollab.embeds.base import EXTERNAL_LINK_ATTRS, BaseEmbed
from filmcollab.embeds.script_loader import ScriptLoader
from filmcollab.utils.url_parser import ParsedVideo, Provider, extract_tiktok_username


class TikTokEmbed(BaseEmbed):
    """Render a TikTok video as a ``tiktok-embed`` blockquote."""

    name: ClassVar[str] = "tiktok"
    provider: ClassVar[Provider] = Provider.TIKTOK

    SCRIPT_URL = "https://www.tiktok.com/embed.js"
    PROFILE_URL = "https://www.tiktok.com/@{username}?refer=embed"

    @classmethod
    def profile_url(cls, username: str) -> str:
        return cls.PROFILE_URL.format(username=username)

    def render(self, parsed: ParsedVideo, script_loader: ScriptLoader) -> str:
        username = extract_tiktok_username(parsed.url)
        handle = escape(f"@{username}")
        blockquote = (
            f'<blockquote class="tiktok-embed" cite="{escape(parsed.url)}" '
            f'data-video-id="{escape(parsed.video_id or "")}" '
            'style="max-width: 325px; min-width: 325px">'
            "<section>"
            f'<a title="{handle}" href="{escape(self.profile_url(username))}" {EXTERNAL_LINK_ATTRS}>'
            f"{handle}</a>"
            "</section>"
            "</blockquote>"
        )
        return (
            '<div class="embed-frame embed-frame--tiktok">'
            f"{blockquote}{script_loader.script_tag(self.SCRIPT_URL)}"
            "</div>"
        )
