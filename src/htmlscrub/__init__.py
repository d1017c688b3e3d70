"""htmlscrub - policy-driven sanitization of HTML fragments and CSS."""

from .core import (
    Directive,
    FullSanitizer,
    FullTextExtractor,
    LinkSanitizer,
    PermitScrubber,
    PolicyParser,
    SafeListSanitizer,
    Scrubber,
    TargetScrubber,
    walk,
)
from .core.sanitizer import sanitize, sanitize_css, sanitize_full_text, sanitize_links

__version__ = "0.1.0"

__all__ = [
    "Directive",
    "FullSanitizer",
    "FullTextExtractor",
    "LinkSanitizer",
    "PermitScrubber",
    "PolicyParser",
    "SafeListSanitizer",
    "Scrubber",
    "TargetScrubber",
    "walk",
    "sanitize",
    "sanitize_css",
    "sanitize_full_text",
    "sanitize_links",
]
