"""Utility modules for htmlscrub."""

from .url_utils import get_scheme, get_data_mediatype, normalize_url, escape_attribute_url

__all__ = ["get_scheme", "get_data_mediatype", "normalize_url", "escape_attribute_url"]
