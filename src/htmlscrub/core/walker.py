"""Mutation-safe traversal of lxml trees driven by a scrubber."""

import logging
from enum import Enum
from typing import Protocol, runtime_checkable


logger = logging.getLogger(__name__)


class Directive(Enum):
    """What the walker does with a node after the scrubber has seen it."""
    CONTINUE = 'continue'  # keep node, scrub attributes, descend
    STOP = 'stop'          # keep node and subtree untouched
    PRUNE = 'prune'        # remove node and subtree
    STRIP = 'strip'        # remove node, keep its children in place


@runtime_checkable
class ScrubPolicy(Protocol):
    """The two capabilities walk() needs from a scrubber.

    A scrubber may also define scrub_attributes(node), which is called for
    every element that gets CONTINUE.
    """

    def skip_node(self, node) -> bool: ...

    def decide(self, node) -> Directive: ...


def is_element(node) -> bool:
    """True for elements; False for comments, processing instructions and entities."""
    return isinstance(node.tag, str)


def node_name(node) -> str:
    """Lower-case local name of an element."""
    tag = node.tag
    if tag.startswith('{'):
        tag = tag.split('}', 1)[1]
    return tag.lower()


def _append_text(parent, previous, text: str) -> None:
    if previous is None:
        parent.text = (parent.text or '') + text
    else:
        previous.tail = (previous.tail or '') + text


def prune_node(node) -> None:
    """
    Remove a node and its whole subtree.

    The node's tail text belongs to the parent's content, so it is moved to
    the preceding sibling (or the parent) before the node is detached.
    """
    parent = node.getparent()
    if node.tail:
        _append_text(parent, node.getprevious(), node.tail)
    parent.remove(node)


def strip_node(node) -> list:
    """
    Remove a node but splice its children into the parent at its position.

    Text directly inside the node and the node's own tail are kept in
    document order.

    Returns:
        The children that were moved, in order
    """
    parent = node.getparent()
    previous = node.getprevious()
    children = list(node)

    if node.text:
        _append_text(parent, previous, node.text)
    if node.tail:
        if children:
            last = children[-1]
            last.tail = (last.tail or '') + node.tail
        else:
            _append_text(parent, previous, node.tail)

    index = parent.index(node)
    parent[index:index + 1] = children
    return children


def walk(root, scrubber) -> None:
    """
    Scrub every descendant of root in place, in document order.

    root itself is a container (the fragment's body) and is never handed to
    the scrubber. Each element is first checked with scrubber.skip_node();
    a skipped element is kept as is but its children are still walked.
    Otherwise scrubber.decide() picks a Directive.

    Children are pushed on the work stack before their parent is edited, so
    no node is looked up through the tree after it has been detached.

    Args:
        root: An lxml element
        scrubber: An object implementing ScrubPolicy

    Raises:
        TypeError: If the scrubber returns something that is not a Directive
    """
    scrub_attributes = getattr(scrubber, 'scrub_attributes', None)
    stack = list(reversed(root))

    while stack:
        node = stack.pop()
        if not is_element(node):
            continue

        if scrubber.skip_node(node):
            stack.extend(reversed(node))
            continue

        directive = scrubber.decide(node)

        if directive is Directive.CONTINUE:
            if scrub_attributes is not None:
                scrub_attributes(node)
            stack.extend(reversed(node))
        elif directive is Directive.STOP:
            continue
        elif directive is Directive.PRUNE:
            logger.debug(f"Pruning <{node_name(node)}>")
            prune_node(node)
        elif directive is Directive.STRIP:
            logger.debug(f"Stripping <{node_name(node)}>")
            stack.extend(reversed(strip_node(node)))
        else:
            raise TypeError(
                f"{type(scrubber).__name__}.decide() must return a Directive, got {directive!r}"
            )
