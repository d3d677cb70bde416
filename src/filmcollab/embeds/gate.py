"""Click-to-load video embed.

A ``VideoEmbed`` starts ``UNLOADED`` and shows only a placeholder, so a
list of movies does not pull a third-party iframe or script for every
entry. ``load()`` (the "Load Video" action) moves it to ``LOADED`` once;
there is no way back within the same embed.
"""

from __future__ import annotations

import logging
from enum import Enum

from filmcollab.embeds.base import render_icon, render_label, render_open_in_link
from filmcollab.embeds.fallback import render_link_fallback
from filmcollab.embeds.registry import get_embed_for_provider
from filmcollab.embeds.script_loader import ScriptLoader
from filmcollab.utils.url_parser import ParsedVideo, parse_video_url

logger = logging.getLogger(__name__)


class EmbedState(str, Enum):
    """Load-gate states."""

    UNLOADED = "unloaded"
    LOADED = "loaded"


class VideoEmbed:
    """Social link rendered behind a load gate.

    Args:
        url: Raw social link, may be None or empty
        auto_load: Start in ``LOADED`` and skip the gate
        script_loader: Page-level loader shared by every embed on a page;
            a private one is created when omitted
    """

    def __init__(
        self,
        url: str | None,
        auto_load: bool = False,
        script_loader: ScriptLoader | None = None,
    ) -> None:
        self.url = url
        self.parsed: ParsedVideo | None = parse_video_url(url)
        self.script_loader = script_loader if script_loader is not None else ScriptLoader()
        self._state = EmbedState.LOADED if auto_load else EmbedState.UNLOADED

    @property
    def state(self) -> EmbedState:
        return self._state

    @property
    def is_loaded(self) -> bool:
        return self._state == EmbedState.LOADED

    def load(self) -> bool:
        """Handle the "Load Video" action.

        Returns:
            True if this call loaded the embed, False if it was already loaded
        """
        if self._state == EmbedState.LOADED:
            return False
        self._state = EmbedState.LOADED
        logger.debug("Loaded embed for %s", self.url)
        return True

    def render(self) -> str:
        """Render the current state as HTML.

        Returns:
            Empty string when there is no URL, a "View Video" link for
            unrecognized links, otherwise the placeholder or native embed
        """
        parsed = self.parsed
        if parsed is None:
            return ""
        if not parsed.is_embeddable:
            return render_link_fallback(parsed.url)
        if self._state == EmbedState.UNLOADED:
            return self._render_placeholder(parsed)
        return self._render_loaded(parsed)

    def _render_placeholder(self, parsed: ParsedVideo) -> str:
        return (
            f'<div class="video-embed" data-provider="{parsed.provider.value}" data-state="unloaded">'
            '<div class="video-embed__provider">'
            f"{render_icon(parsed.provider)}{render_label(parsed.provider)}"
            "</div>"
            '<button type="button" class="button load-video" data-action="load-video">'
            '<i class="icon icon-play" aria-hidden="true"></i>Load Video</button>'
            f"{render_open_in_link(parsed)}"
            "</div>"
        )

    def _render_loaded(self, parsed: ParsedVideo) -> str:
        embed = get_embed_for_provider(parsed.provider)
        body = embed.render(parsed, self.script_loader) if embed else ""
        return (
            f'<div class="video-embed" data-provider="{parsed.provider.value}" data-state="loaded">'
            f"{body}{render_open_in_link(parsed)}"
            "</div>"
        )

    def __repr__(self) -> str:
        provider = self.parsed.provider.value if self.parsed else None
        return f"{self.__class__.__name__}(provider={provider!r}, state={self._state.value!r})"
