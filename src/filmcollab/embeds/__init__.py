"""Video embeds for social links.

Supported providers:
- YouTube (iframe player)
- TikTok (blockquote + lazily loaded embed.js)
- Instagram (iframe to the provider's embed page)

Unrecognized links fall back to a plain "View Video" link.
"""

from __future__ import annotations

from .base import PROVIDER_ICONS, BaseEmbed
from .fallback import render_link_fallback
from .gate import EmbedState, VideoEmbed
from .instagram import InstagramEmbed
from .preview import VideoPreview
from .registry import EMBEDS, get_embed_for_provider, get_embed_names
from .script_loader import ScriptLoader
from .tiktok import TikTokEmbed
from .youtube import YouTubeEmbed

__all__ = [
    "BaseEmbed",
    "YouTubeEmbed",
    "TikTokEmbed",
    "InstagramEmbed",
    "EMBEDS",
    "PROVIDER_ICONS",
    "get_embed_for_provider",
    "get_embed_names",
    "EmbedState",
    "VideoEmbed",
    "VideoPreview",
    "ScriptLoader",
    "render_link_fallback",
]
