"""URL parsing utilities for social video links.

Supports:
- YouTube: youtube.com/watch, youtu.be, youtube.com/shorts, /embed, /live
- TikTok: tiktok.com/@user/video/xxx, m.tiktok.com/v/xxx, vm/vt.tiktok.com, tiktok.com/t/xxx
- Instagram: instagram.com/reel/xxx, /reels/xxx, /p/xxx, /tv/xxx

Anything else is classified as ``Provider.UNKNOWN`` and keeps its URL so it
can still be offered as an external link.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from urllib.parse import urlsplit


class Provider(str, Enum):
    """Video platforms a social link can belong to."""

    YOUTUBE = "youtube"
    TIKTOK = "tiktok"
    INSTAGRAM = "instagram"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ParsedVideo:
    """Classification of a social link.

    ``video_id`` is set if and only if the provider is recognized.
    """

    provider: Provider
    video_id: str | None
    url: str

    def __post_init__(self) -> None:
        if (self.provider == Provider.UNKNOWN) != (not self.video_id):
            raise ValueError(
                f"video_id must be set exactly when provider is known "
                f"(provider={self.provider.value}, video_id={self.video_id!r})"
            )

    @property
    def is_embeddable(self) -> bool:
        """Check if a native embed exists for this link."""
        return self.provider != Provider.UNKNOWN

    @property
    def display_name(self) -> str:
        return get_provider_display_name(self.provider)


# Patterns are matched from the start of "<host><path>[?<query>]", with the
# host lowercased, so a provider name elsewhere in the URL never counts.

# YouTube URL patterns
YOUTUBE_PATTERNS = [
    # Standard watch URLs (v= may follow other query params)
    r"(?:www\.|m\.|music\.)?youtube\.com/watch\?(?:[^#]*&)?v=(?P<video_id>[a-zA-Z0-9_-]{11})",
    # Short share URLs
    r"youtu\.be/(?P<video_id>[a-zA-Z0-9_-]{11})",
    # Shorts
    r"(?:www\.|m\.)?youtube\.com/shorts/(?P<video_id>[a-zA-Z0-9_-]{11})",
    # Embed and live URLs
    r"(?:www\.|m\.)?youtube\.com/(?:embed|live)/(?P<video_id>[a-zA-Z0-9_-]{11})",
]

# TikTok URL patterns
TIKTOK_PATTERNS = [
    # Standard video URLs
    r"(?:www\.|m\.)?tiktok\.com/@[\w.-]+/video/(?P<video_id>\d+)",
    # Mobile share URLs
    r"m\.tiktok\.com/v/(?P<video_id>\d+)",
    # Short redirector URLs (the code stands in for the numeric ID)
    r"(?:vm|vt)\.tiktok\.com/(?P<video_id>[a-zA-Z0-9]+)",
    r"(?:www\.)?tiktok\.com/t/(?P<video_id>[a-zA-Z0-9]+)",
]

# Instagram URL patterns
INSTAGRAM_PATTERNS = [
    r"(?:www\.)?instagram\.com/(?:reels?|p|tv)/(?P<video_id>[A-Za-z0-9_-]+)",
]

# Registrable domains of each provider (subdomains included)
PROVIDER_HOSTS: dict[Provider, tuple[str, ...]] = {
    Provider.YOUTUBE: ("youtube.com", "youtu.be"),
    Provider.TIKTOK: ("tiktok.com",),
    Provider.INSTAGRAM: ("instagram.com",),
}

# Fixed priority order: the first provider with a matching pattern wins
PROVIDER_PATTERNS: dict[Provider, list[re.Pattern[str]]] = {
    Provider.YOUTUBE: [re.compile(p) for p in YOUTUBE_PATTERNS],
    Provider.TIKTOK: [re.compile(p) for p in TIKTOK_PATTERNS],
    Provider.INSTAGRAM: [re.compile(p) for p in INSTAGRAM_PATTERNS],
}

PROVIDER_DISPLAY_NAMES: dict[Provider, str] = {
    Provider.YOUTUBE: "YouTube",
    Provider.TIKTOK: "TikTok",
    Provider.INSTAGRAM: "Instagram",
    Provider.UNKNOWN: "Video",
}

DEFAULT_TIKTOK_USERNAME = "user"

_TIKTOK_USERNAME_RE = re.compile(r"/@([\w.-]+)")

for _provider in Provider:
    if _provider not in PROVIDER_DISPLAY_NAMES:
        raise RuntimeError(f"Missing display name for provider {_provider.value}")


def get_provider_display_name(provider: Provider) -> str:
    """Get the short human label for a provider ("YouTube", "TikTok", ...)."""
    return PROVIDER_DISPLAY_NAMES[Provider(provider)]


def _match_target(url: str) -> str | None:
    """Build the ``<host><path>[?<query>]`` string the patterns match against.

    Returns:
        None when the URL has no usable http(s) host
    """
    if "://" not in url:
        url = f"https://{url.lstrip('/')}"
    try:
        parts = urlsplit(url)
        host = parts.hostname
    except ValueError:
        return None
    if not host or parts.scheme.lower() not in ("http", "https"):
        return None
    target = f"{host}{parts.path}"
    if parts.query:
        target += f"?{parts.query}"
    return target


def _host_matches(host: str, domain: str) -> bool:
    return host == domain or host.endswith(f".{domain}")


def detect_provider(url: str) -> Provider:
    """Detect which provider a URL belongs to by its host.

    Args:
        url: Social link

    Returns:
        Provider enum value (UNKNOWN when the host is not a provider's)
    """
    target = _match_target(url)
    if target is None:
        return Provider.UNKNOWN
    host = target.split("/", 1)[0].split("?", 1)[0]
    for provider, domains in PROVIDER_HOSTS.items():
        if any(_host_matches(host, domain) for domain in domains):
            return provider
    return Provider.UNKNOWN


def extract_video_id(url: str, provider: Provider) -> str | None:
    """Extract the provider's content identifier from a URL.

    Args:
        url: Social link
        provider: Provider whose patterns to try

    Returns:
        Video ID, or None if no pattern matches the host and path
    """
    target = _match_target(url)
    if target is None:
        return None
    for pattern in PROVIDER_PATTERNS.get(provider, []):
        match = pattern.match(target)
        if match:
            return match.group("video_id")
    return None


def extract_tiktok_username(url: str) -> str:
    """Best-effort TikTok username from a URL, without the leading ``@``.

    Falls back to ``"user"`` when the path carries no ``@handle``.
    """
    target = _match_target(url)
    path = target.split("?", 1)[0] if target else ""
    match = _TIKTOK_USERNAME_RE.search(path)
    return match.group(1) if match else DEFAULT_TIKTOK_USERNAME


def parse_video_url(url: str | None) -> ParsedVideo | None:
    """Classify a social link and extract its video ID.

    Providers are tried in priority order (YouTube, TikTok, Instagram) and
    the first matching pattern wins. Never raises: missing input gives
    None, anything unrecognized or malformed gives a ``Provider.UNKNOWN``
    result that keeps the URL.

    Args:
        url: Raw social link text, possibly empty or None

    Returns:
        ParsedVideo, or None when there is nothing to render

    Examples:
        >>> parse_video_url("https://youtu.be/dQw4w9WgXcQ")
        ParsedVideo(provider=<Provider.YOUTUBE: 'youtube'>, video_id='dQw4w9WgXcQ', ...)

        >>> parse_video_url("https://example.com/video").provider
        <Provider.UNKNOWN: 'unknown'>
    """
    if not url or not url.strip():
        return None

    url = url.strip()
    for provider in PROVIDER_PATTERNS:
        video_id = extract_video_id(url, provider)
        if video_id:
            return ParsedVideo(provider=provider, video_id=video_id, url=url)

    return ParsedVideo(provider=Provider.UNKNOWN, video_id=None, url=url)


def is_embeddable_url(url: str | None) -> bool:
    """Check if URL has a native embed.

    Args:
        url: Social link to check

    Returns:
        True if the link maps to a known provider and video ID
    """
    parsed = parse_video_url(url)
    return parsed is not None and parsed.is_embeddable
