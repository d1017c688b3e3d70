"""URL utilities for scheme detection and attribute escaping."""

import html
import re
from typing import Optional


# Browsers ignore these inside a scheme, so 'jav\tascript:' is still javascript:
_IGNORED_CHARS_RE = re.compile(r"[`\x00-\x20\x7f-\xa0\s\ufffd]+")

_SCHEME_RE = re.compile(r"^([a-z0-9][-+.a-z0-9]*):")

_UNSAFE_ATTRIBUTE_CHARS_RE = re.compile(r'[ "]')


def normalize_url(url: str) -> str:
    """
    Reduce a URL to the form a browser uses to pick its scheme.

    HTML entities are decoded, characters browsers skip over are removed and
    the result is lower-cased.

    Args:
        url: The raw attribute value

    Returns:
        The normalized URL
    """
    return _IGNORED_CHARS_RE.sub('', html.unescape(url)).lower()


def get_scheme(url: str) -> Optional[str]:
    """
    Extract the scheme of a URL.

    Args:
        url: The raw attribute value

    Returns:
        The lower-cased scheme, or None for a relative reference
    """
    match = _SCHEME_RE.match(normalize_url(url))
    if match is None:
        return None
    return match.group(1)


def get_data_mediatype(url: str) -> Optional[str]:
    """
    Extract the media type of a data: URI (e.g. "image/png").

    Args:
        url: The raw attribute value

    Returns:
        The lower-cased media type, or None if the URI has no media type
    """
    normalized = normalize_url(url)
    if not normalized.startswith('data:'):
        return None
    mediatype = re.split(r'[;,]', normalized[len('data:'):], maxsplit=1)[0]
    return mediatype or None


def escape_attribute_url(url: str) -> str:
    """
    Percent-encode spaces and double quotes in a URL-valued attribute.

    Args:
        url: The attribute value

    Returns:
        The value with ' ' and '"' replaced by '%20' and '%22'
    """
    return _UNSAFE_ATTRIBUTE_CHARS_RE.sub(lambda m: '%{:02X}'.format(ord(m.group(0))), url)
