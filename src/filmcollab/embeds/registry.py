"""Provider to embed dispatch."""

from __future__ import annotations

from filmcollab.embeds.base import BaseEmbed
from filmcollab.embeds.instagram import InstagramEmbed
from filmcollab.embeds.tiktok import TikTokEmbed
from filmcollab.embeds.youtube import YouTubeEmbed
from filmcollab.utils.url_parser import Provider

# UNKNOWN has no native embed; it renders as a plain link
EMBEDS: dict[Provider, type[BaseEmbed] | None] = {
    Provider.YOUTUBE: YouTubeEmbed,
    Provider.TIKTOK: TikTokEmbed,
    Provider.INSTAGRAM: InstagramEmbed,
    Provider.UNKNOWN: None,
}

_missing = [p.value for p in Provider if p not in EMBEDS]
if _missing:
    raise RuntimeError(f"No embed registered for providers: {', '.join(_missing)}")


def get_embed_for_provider(provider: Provider) -> BaseEmbed | None:
    """Get the native embed for a provider.

    Args:
        provider: Classified provider

    Returns:
        Embed instance, or None when the provider only gets a link
    """
    embed_cls = EMBEDS[provider]
    return embed_cls() if embed_cls else None


def get_embed_names() -> list[str]:
    """Names of all registered native embeds."""
    return [cls.name for cls in EMBEDS.values() if cls is not None]
