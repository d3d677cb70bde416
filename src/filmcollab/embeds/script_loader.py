"""Page-level loader for third-party embed scripts."""

from __future__ import annotations

import logging
from html import escape

logger = logging.getLogger(__name__)


class ScriptLoader:
    """Tracks which third-party scripts a rendered page has asked for.

    Requesting the same script twice is a no-op, so any number of embeds on
    one page share a single script tag. Once the page is torn down with
    ``close()`` late requests are ignored.
    """

    def __init__(self) -> None:
        self._requested: list[str] = []
        self._closed = False

    @property
    def scripts(self) -> list[str]:
        """Script URLs requested so far, in request order."""
        return list(self._requested)

    @property
    def closed(self) -> bool:
        return self._closed

    def is_requested(self, src: str) -> bool:
        return src in self._requested

    def request(self, src: str) -> bool:
        """Request a script.

        Args:
            src: Script URL

        Returns:
            True if this call added the script, False if it was already
            requested or the page is gone
        """
        if self._closed:
            logger.debug("Ignoring script request after teardown: %s", src)
            return False
        if src in self._requested:
            return False
        self._requested.append(src)
        logger.debug("Queued lazy script %s", src)
        return True

    def script_tag(self, src: str) -> str:
        """Request a script and return its tag the first time only."""
        if not self.request(src):
            return ""
        return render_script_tag(src)

    def close(self) -> None:
        """Mark the hosting page as torn down."""
        self._closed = True

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(scripts={self._requested!r}, closed={self._closed})"


def render_script_tag(src: str) -> str:
    """Render a non-blocking script tag."""
    return f'<script async src="{escape(src)}"></script>'
