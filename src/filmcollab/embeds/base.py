"""Base embed class and shared markup helpers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from html import escape
from typing import ClassVar

from filmcollab.embeds.script_loader import ScriptLoader
from filmcollab.utils.url_parser import ParsedVideo, Provider, get_provider_display_name

# Icon names per provider (rendered as CSS icon classes)
PROVIDER_ICONS: dict[Provider, str] = {
    Provider.YOUTUBE: "youtube",
    Provider.TIKTOK: "tiktok",
    Provider.INSTAGRAM: "instagram",
    Provider.UNKNOWN: "play",
}

EXTERNAL_LINK_ATTRS = 'target="_blank" rel="noopener noreferrer"'


class BaseEmbed(ABC):
    """Abstract base class for provider-specific native embeds.

    Subclasses should implement:
    - render(): Build the embed markup for a parsed video

    Attributes:
        name: Human-readable name of the embed
        provider: Provider this embed renders
    """

    name: ClassVar[str] = "base"
    provider: ClassVar[Provider] = Provider.UNKNOWN

    @classmethod
    def can_handle(cls, parsed: ParsedVideo) -> bool:
        """Check if this embed can render the parsed video."""
        return parsed.provider == cls.provider and bool(parsed.video_id)

    @abstractmethod
    def render(self, parsed: ParsedVideo, script_loader: ScriptLoader) -> str:
        """Render the native embed.

        Args:
            parsed: Classified video (provider matches this embed)
            script_loader: Page-level loader for any third-party script

        Returns:
            HTML markup
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, provider={self.provider.value!r})"


def render_icon(provider: Provider) -> str:
    """Render the provider icon."""
    icon = PROVIDER_ICONS[provider]
    return f'<i class="icon icon-{icon}" aria-hidden="true"></i>'


def render_label(provider: Provider) -> str:
    return f'<span class="provider-label">{escape(get_provider_display_name(provider))}</span>'


def render_external_link(url: str, text: str, css_class: str = "external-link") -> str:
    """Render an outbound link that opens in a new tab."""
    return (
        f'<a class="{css_class}" href="{escape(url)}" {EXTERNAL_LINK_ATTRS}>'
        f'<i class="icon icon-external-link" aria-hidden="true"></i>{escape(text)}</a>'
    )


def render_open_in_link(parsed: ParsedVideo) -> str:
    """Render the secondary "Open in <Provider>" link."""
    return render_external_link(
        parsed.url,
        f"Open in {get_provider_display_name(parsed.provider)}",
        css_class="external-link open-in",
    )
