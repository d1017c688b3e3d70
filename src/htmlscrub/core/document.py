"""Parsing markup fragments into lxml trees and serializing them back."""

import re
from html import escape

from lxml import html, etree

from .walker import is_element, node_name, prune_node


# Characters lxml refuses to store in a tree
_INVALID_CHARS_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]")

# End tags that would close the wrapper document early
_DOCUMENT_END_TAGS_RE = re.compile(r"</\s*(?:body|html)\b[^>]*>", re.IGNORECASE)


def parse_fragment(markup: str) -> html.HtmlElement:
    """
    Parse an HTML fragment.

    The fragment is wrapped in a document so libxml2 puts it inside <body>,
    whatever the markup starts with. Leading text is kept, and stray
    </body> or </html> tags do not cut the fragment short.

    Args:
        markup: The HTML fragment

    Returns:
        The <body> element holding the fragment's nodes
    """
    markup = _INVALID_CHARS_RE.sub('', markup)
    markup = _DOCUMENT_END_TAGS_RE.sub('', markup)
    document = html.document_fromstring(f"<html><body>{markup}</body></html>")
    return document.find('body')


def serialize_fragment(root) -> str:
    """
    Serialize the children of a fragment container, without the container.

    Args:
        root: The element returned by parse_fragment()

    Returns:
        The HTML markup of the fragment
    """
    parts = []
    if root.text:
        parts.append(escape(root.text, quote=False))
    for child in root:
        parts.append(etree.tostring(child, encoding='unicode', method='html', with_tail=True))
    return ''.join(parts)


def remove_nodes(root, tags=(), comments: bool = True) -> None:
    """
    Remove whole subtrees before a fragment is scrubbed.

    Args:
        root: The fragment container
        tags: Element names removed together with their content
        comments: Also remove comments and processing instructions
    """
    doomed = []
    for node in root.iterdescendants():
        if is_element(node):
            if node_name(node) in tags:
                doomed.append(node)
        elif comments:
            doomed.append(node)

    # Children come after their ancestors in document order, so removing in
    # reverse never touches a node that is already detached.
    for node in reversed(doomed):
        prune_node(node)
