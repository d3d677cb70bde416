"""Utility functions for filmcollab."""

from .url_parser import (
    DEFAULT_TIKTOK_USERNAME,
    ParsedVideo,
    Provider,
    detect_provider,
    extract_tiktok_username,
    extract_video_id,
    get_provider_display_name,
    is_embeddable_url,
    parse_video_url,
)

__all__ = [
    # Classification
    "Provider",
    "ParsedVideo",
    "parse_video_url",
    "detect_provider",
    "extract_video_id",
    "is_embeddable_url",
    # Display helpers
    "get_provider_display_name",
    "extract_tiktok_username",
    "DEFAULT_TIKTOK_USERNAME",
]
