"""Attribute value and CSS declaration validation."""

import logging
import re
from typing import Callable, Iterable, Mapping, Optional

import tinycss2

from . import safelist
from ..utils.url_utils import escape_attribute_url, get_data_mediatype, get_scheme


logger = logging.getLogger(__name__)

AttributeRule = Callable[[str], Optional[str]]

# Hex colours, rgb() fragments and numbers with optional units.
_CSS_KEYWORDISH_RE = re.compile(
    r"\A(#[0-9a-f]+|rgb\(\d+%?,\d*%?,?\d*%?\)?"
    r"|-?\d{0,3}\.?\d{0,10}(ch|cm|r?em|ex|in|lh|mm|pc|pt|px|q|vmax|vmin|vw|vh|%|,|\))?)\Z",
    re.IGNORECASE,
)

_DATA_ATTRIBUTE_RE = re.compile(r"\Adata-[\w-]+\Z")


def is_safe_uri(value: str, schemes: Iterable[str] = safelist.ALLOWED_PROTOCOLS) -> bool:
    """
    Check whether a URI-valued attribute may be kept.

    A value without a scheme is a relative reference and always safe. A
    value with a scheme is safe only if the scheme is allowed; data: URIs
    must also carry an allowed media type.

    Args:
        value: The raw attribute value
        schemes: Allowed lower-case schemes

    Returns:
        True if the value is safe
    """
    scheme = get_scheme(value)
    if scheme is None:
        return True
    if scheme not in schemes:
        return False
    if scheme == 'data':
        return get_data_mediatype(value) in safelist.ALLOWED_URI_DATA_MEDIATYPES
    return True


def is_data_attribute(name: str) -> bool:
    """Check for a custom data-* attribute name."""
    return _DATA_ATTRIBUTE_RE.match(name) is not None


def _is_unsafe_css_value(tokens, schemes) -> bool:
    """Look for url() with a bad scheme or a disallowed function, recursively."""
    for token in tokens:
        if token.type == 'url':
            if not is_safe_uri(token.value, schemes):
                return True
        elif token.type == 'function':
            if token.lower_name == 'url':
                url = ''.join(arg.value for arg in token.arguments if arg.type == 'string')
                if not is_safe_uri(url, schemes):
                    return True
            elif token.lower_name not in safelist.ALLOWED_CSS_FUNCTIONS:
                return True
            elif _is_unsafe_css_value(token.arguments, schemes):
                return True
        elif token.type in ('() block', '[] block', '{} block'):
            if _is_unsafe_css_value(token.content, schemes):
                return True
        elif token.type in ('bad-url', 'error'):
            return True
    return False


def _scrub_css_value(name: str, tokens) -> list[str]:
    shorthand = name.split('-')[0] in safelist.SHORTHAND_CSS_PROPERTIES
    parts = []
    for token in tokens:
        if token.type in ('whitespace', 'comment'):
            continue
        if token.type == 'literal' and token.value == ',' and parts:
            parts[-1] += ','
            continue
        if token.type == 'ident' and shorthand:
            keyword = token.value
            if keyword.lower() not in safelist.ALLOWED_CSS_KEYWORDS and not _CSS_KEYWORDISH_RE.match(keyword):
                continue
        parts.append(token.serialize())
    return parts


def scrub_css(
    style: str,
    properties: Iterable[str] = safelist.ALLOWED_CSS_PROPERTIES,
    schemes: Iterable[str] = safelist.ALLOWED_PROTOCOLS,
) -> str:
    """
    Remove unsafe declarations from a CSS declaration list.

    The list is tokenized with tinycss2. Declarations survive when their
    property is allowed and their value holds neither a url() with a
    disallowed scheme nor a function outside the allowed set (which covers
    IE's expression()).

    Args:
        style: A style attribute value or standalone declaration list
        properties: Allowed lower-case property names
        schemes: Allowed URI schemes inside url()

    Returns:
        The surviving declarations in their original order, each rendered
        as "name:value;", or an empty string
    """
    if not style:
        return ''

    properties = frozenset(properties)
    schemes = frozenset(schemes)
    kept = []
    for declaration in tinycss2.parse_declaration_list(style, skip_comments=True, skip_whitespace=True):
        if declaration.type != 'declaration':
            continue

        name = declaration.lower_name
        if name not in properties:
            logger.debug(f"Dropping CSS property {name!r}")
            continue
        if _is_unsafe_css_value(declaration.value, schemes):
            logger.debug(f"Dropping unsafe value for CSS property {name!r}")
            continue

        value = _scrub_css_value(name, declaration.value)
        if not value:
            continue
        if declaration.important:
            value.append('!important')
        kept.append(f"{name}:{' '.join(value)};")

    return ''.join(kept)


def scrub_local_references(value: str) -> str:
    """
    Drop url() references that point outside the current document.

    Used for SVG presentation attributes such as fill or mask, where only
    url(#id) is meaningful.
    """
    kept = []
    for token in tinycss2.parse_component_value_list(value):
        if token.type == 'url':
            if not token.value.startswith('#'):
                continue
        elif token.type == 'function' and token.lower_name == 'url':
            url = ''.join(arg.value for arg in token.arguments if arg.type == 'string')
            if not url.startswith('#'):
                continue
        kept.append(token.serialize())
    return ''.join(kept).strip()


def scrub_attribute_value(
    tag: str,
    name: str,
    value: str,
    schemes: Iterable[str] = safelist.ALLOWED_PROTOCOLS,
    css_properties: Iterable[str] = safelist.ALLOWED_CSS_PROPERTIES,
) -> Optional[str]:
    """
    Validate the value of an attribute that passed the name check.

    Args:
        tag: Lower-case element name
        name: Lower-case attribute name
        value: The attribute value
        schemes: Allowed URI schemes
        css_properties: Allowed CSS properties for style attributes

    Returns:
        The value to keep (possibly rewritten), or None to drop the attribute
    """
    if name in safelist.URI_ATTRIBUTES and not is_safe_uri(value, schemes):
        logger.debug(f"Dropping unsafe {name} on <{tag}>: {value!r}")
        return None

    if name in safelist.SVG_ATTR_VAL_ALLOWS_REF:
        value = scrub_local_references(value)

    if name == 'xlink:href' and tag in safelist.SVG_ALLOW_LOCAL_HREF and not value.lstrip().startswith('#'):
        return None

    if name == 'src' and not value.strip():
        return None

    if name == 'style':
        value = scrub_css(value, css_properties, schemes)
        if not value:
            return None

    if name in safelist.BROKEN_ESCAPING_ATTRIBUTES:
        qualifying_tag = safelist.BROKEN_ESCAPING_ATTRIBUTES[name]
        if qualifying_tag is None or qualifying_tag == tag:
            value = escape_attribute_url(value)

    return value


def scrub_attributes(
    node,
    tag: str,
    keep: Callable[[str], bool],
    schemes: Iterable[str] = safelist.ALLOWED_PROTOCOLS,
    css_properties: Iterable[str] = safelist.ALLOWED_CSS_PROPERTIES,
    rules: Optional[Mapping[str, AttributeRule]] = None,
) -> None:
    """
    Filter the attributes of an element in place.

    An attribute with a rule is handed to the rule, which returns the value
    to keep or None. Otherwise the attribute is dropped unless keep(name)
    holds, and surviving values go through scrub_attribute_value().

    Args:
        node: The lxml element
        tag: Its lower-case name
        keep: Predicate over attribute names
        schemes: Allowed URI schemes
        css_properties: Allowed CSS properties
        rules: Optional attribute name -> callable overrides for this tag
    """
    for name, value in list(node.attrib.items()):
        lower_name = name.lower()
        rule = rules.get(lower_name) if rules else None

        if rule is not None:
            new_value = rule(value)
        elif not keep(lower_name):
            new_value = None
        else:
            new_value = scrub_attribute_value(tag, lower_name, value, schemes, css_properties)

        if new_value is None:
            del node.attrib[name]
        elif new_value != value:
            node.set(name, new_value)
