"""Reduction of a scrubbed tree to plain text."""

from typing import Iterable, Optional

from . import safelist
from .walker import is_element, node_name


_ENTER = 0
_TEXT = 1
_BREAK = 2


class FullTextExtractor:
    """
    Extracts the text of a tree in document order.

    By default tags are simply elided. With preserve_whitespace=True, block
    elements are surrounded by line breaks and line-break elements become a
    single newline, so paragraphs and list items stay on separate lines.
    """

    def __init__(
        self,
        preserve_whitespace: bool = False,
        block_elements: Optional[Iterable[str]] = None,
        line_break_elements: Optional[Iterable[str]] = None,
    ):
        """
        Initialize the extractor.

        Args:
            preserve_whitespace: Emit line breaks around block elements
            block_elements: Element names treated as blocks
                (default: safelist.BLOCK_ELEMENTS)
            line_break_elements: Element names rendered as one newline
                (default: safelist.LINE_BREAK_ELEMENTS)
        """
        self.preserve_whitespace = preserve_whitespace
        self.block_elements = frozenset(block_elements) if block_elements is not None else safelist.BLOCK_ELEMENTS
        self.line_break_elements = (
            frozenset(line_break_elements) if line_break_elements is not None else safelist.LINE_BREAK_ELEMENTS
        )

    @staticmethod
    def _ensure_newline(parts: list[str]) -> None:
        if not parts or not parts[-1].endswith('\n'):
            parts.append('\n')

    def extract(self, root) -> str:
        """
        Extract the text below root.

        Args:
            root: An lxml element; its own tail is not included

        Returns:
            The text content, verbatim apart from the added line breaks
        """
        parts: list[str] = []
        stack = [(_ENTER, root)]

        while stack:
            action, item = stack.pop()

            if action == _TEXT:
                parts.append(item)
                continue
            if action == _BREAK:
                self._ensure_newline(parts)
                continue

            node = item
            if not is_element(node):
                # Comments and processing instructions carry no text of their own
                continue

            name = node_name(node)
            if self.preserve_whitespace and name in self.line_break_elements:
                parts.append('\n')
                continue

            block = self.preserve_whitespace and node is not root and name in self.block_elements
            if block:
                self._ensure_newline(parts)
            if node.text:
                parts.append(node.text)

            pending = []
            for child in node:
                pending.append((_ENTER, child))
                if child.tail:
                    pending.append((_TEXT, child.tail))
            if block:
                pending.append((_BREAK, None))
            stack.extend(reversed(pending))

        return ''.join(parts)
