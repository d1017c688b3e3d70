"""HTML sanitizers composing the walker, a scrubber and the text extractor."""

import logging
from html import escape
from typing import Iterable, Optional

from . import safelist
from .document import parse_fragment, remove_nodes, serialize_fragment
from .scrubbers import PermitScrubber, TargetScrubber
from .text import FullTextExtractor
from .validators import scrub_css
from .walker import walk


logger = logging.getLogger(__name__)


class FullSanitizer:
    """Removes all markup and returns the text of a fragment."""

    # Elements whose content is never wanted as text
    REMOVED_TAGS = frozenset({'script', 'style', 'form'})

    def __init__(self):
        self.scrubber = PermitScrubber(tags=(), prune=False)
        # Block and line-break elements survive so the extractor can lay out lines
        self.layout_scrubber = PermitScrubber(
            tags=safelist.BLOCK_ELEMENTS | safelist.LINE_BREAK_ELEMENTS,
            attributes=(),
            prune=False,
        )

    def sanitize(
        self,
        html_content: Optional[str],
        preserve_whitespace: bool = False,
        encode_special_chars: bool = True,
    ) -> Optional[str]:
        """
        Strip every tag from HTML content.

        Args:
            html_content: The HTML content to sanitize
            preserve_whitespace: Keep block elements on separate lines
            encode_special_chars: Escape &, < and > in the result so it can
                be embedded in HTML as is

        Returns:
            The text content, or None if html_content is None

        Example:
            >>> FullSanitizer().sanitize("<b>Bold</b> no more!")
            'Bold no more!'
        """
        if not html_content:
            return html_content

        fragment = parse_fragment(html_content)
        remove_nodes(fragment, self.REMOVED_TAGS)
        walk(fragment, self.layout_scrubber if preserve_whitespace else self.scrubber)

        text = FullTextExtractor(preserve_whitespace=preserve_whitespace).extract(fragment)
        if encode_special_chars:
            text = escape(text, quote=False)
        return text


class LinkSanitizer:
    """Removes links (and every href) while keeping the link text."""

    def __init__(self):
        self.scrubber = TargetScrubber(tags={'a'}, attributes={'href'}, prune=False)

    def sanitize(self, html_content: Optional[str]) -> Optional[str]:
        """
        Strip <a> tags and href attributes from HTML content.

        Args:
            html_content: The HTML content to sanitize

        Returns:
            Sanitized HTML content, or None if html_content is None
        """
        if not html_content:
            return html_content

        fragment = parse_fragment(html_content)
        walk(fragment, self.scrubber)
        return serialize_fragment(fragment)


class SafeListSanitizer:
    """
    Sanitizes HTML against a safelist of tags and attributes.

    Without explicit tags or attributes the default safelists in
    htmlscrub.core.safelist apply.
    """

    def __init__(
        self,
        prune: bool = False,
        url_schemes: Optional[Iterable[str]] = None,
        css_properties: Optional[Iterable[str]] = None,
    ):
        """
        Initialize the sanitizer.

        Args:
            prune: Default for removing disallowed elements with their content
            url_schemes: Allowed URI schemes (default: safelist.ALLOWED_PROTOCOLS)
            css_properties: Allowed CSS properties (default: safelist.ALLOWED_CSS_PROPERTIES)
        """
        self.prune = prune
        self.url_schemes = url_schemes
        self.css_properties = css_properties
        self._default_scrubbers = {
            prune_mode: TargetScrubber(prune=prune_mode, url_schemes=url_schemes, css_properties=css_properties)
            for prune_mode in (False, True)
        }

    def _build_scrubber(self, tags, attributes, prune: bool):
        if tags is None and attributes is None:
            return self._default_scrubbers[bool(prune)]
        return PermitScrubber(
            tags=tags if tags is not None else safelist.ALLOWED_ELEMENTS,
            attributes=attributes,
            prune=prune,
            url_schemes=self.url_schemes,
            css_properties=self.css_properties,
        )

    def sanitize(
        self,
        html_content: Optional[str],
        tags: Optional[Iterable[str]] = None,
        attributes: Optional[Iterable[str]] = None,
        scrubber=None,
        prune: Optional[bool] = None,
    ) -> Optional[str]:
        """
        Sanitize HTML content.

        Args:
            html_content: The HTML content to sanitize
            tags: Allowed element names; "comment" keeps comments
            attributes: Allowed attribute names
            scrubber: A custom scrubber used instead of the built-in ones
            prune: Remove disallowed elements with their content
                (default: the value given to the constructor)

        Returns:
            Sanitized HTML content, or None if html_content is None
        """
        if not html_content:
            return html_content

        if prune is None:
            prune = self.prune
        if tags is not None:
            tags = {tag.lower() for tag in tags}

        fragment = parse_fragment(html_content)

        if scrubber is None:
            scrubber = self._build_scrubber(tags, attributes, prune)
        if isinstance(scrubber, PermitScrubber) and not scrubber.keeps_comments():
            remove_nodes(fragment, comments=True)

        logger.debug(f"Sanitizing {len(html_content)} characters with {scrubber!r}")
        walk(fragment, scrubber)
        return serialize_fragment(fragment)

    def sanitize_css(self, style: Optional[str]) -> Optional[str]:
        """
        Remove unsafe declarations from a CSS declaration list.

        Args:
            style: The CSS to sanitize, e.g. "color: red; width: expression(x)"

        Returns:
            The surviving declarations, or None if style is None
        """
        if style is None:
            return None
        return scrub_css(
            style,
            self.css_properties if self.css_properties is not None else safelist.ALLOWED_CSS_PROPERTIES,
            self.url_schemes if self.url_schemes is not None else safelist.ALLOWED_PROTOCOLS,
        )


def sanitize(
    html_content: Optional[str],
    tags: Optional[Iterable[str]] = None,
    attributes: Optional[Iterable[str]] = None,
    scrubber=None,
    prune: bool = False,
) -> Optional[str]:
    """
    Convenience function to sanitize HTML against a safelist.

    Args:
        html_content: The HTML content to sanitize
        tags: Allowed element names (default: the element safelist)
        attributes: Allowed attribute names (default: the attribute safelist)
        scrubber: A custom scrubber used instead of the built-in ones
        prune: Remove disallowed elements with their content

    Returns:
        Sanitized HTML content
    """
    return _safe_list_sanitizer.sanitize(html_content, tags=tags, attributes=attributes, scrubber=scrubber, prune=prune)


def sanitize_full_text(html_content: Optional[str], preserve_whitespace: bool = False) -> Optional[str]:
    """Convenience function to strip all markup from HTML content."""
    return _full_sanitizer.sanitize(html_content, preserve_whitespace=preserve_whitespace)


def sanitize_links(html_content: Optional[str]) -> Optional[str]:
    """Convenience function to remove links from HTML content."""
    return _link_sanitizer.sanitize(html_content)


def sanitize_css(style: Optional[str]) -> Optional[str]:
    """Convenience function to sanitize a CSS declaration list."""
    return _safe_list_sanitizer.sanitize_css(style)


_full_sanitizer = FullSanitizer()
_link_sanitizer = LinkSanitizer()
_safe_list_sanitizer = SafeListSanitizer()
