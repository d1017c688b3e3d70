"""Core scrubbing modules for htmlscrub."""

from .walker import Directive, walk
from .scrubbers import Scrubber, PermitScrubber, TargetScrubber
from .text import FullTextExtractor
from .sanitizer import FullSanitizer, LinkSanitizer, SafeListSanitizer
from .parser import PolicyParser

__all__ = [
    "Directive",
    "walk",
    "Scrubber",
    "PermitScrubber",
    "TargetScrubber",
    "FullTextExtractor",
    "FullSanitizer",
    "LinkSanitizer",
    "SafeListSanitizer",
    "PolicyParser",
]
