"""Tests for plain text extraction."""

from lxml import etree

from htmlscrub.core.document import parse_fragment
from htmlscrub.core.text import FullTextExtractor


def extract(markup, **kwargs):
    return FullTextExtractor(**kwargs).extract(parse_fragment(markup))


class TestCollapsedText:
    """Test extraction without whitespace preservation."""

    def test_tags_are_elided(self):
        """Test that markup disappears and text stays in order."""
        assert extract('<p>Hello <b>world</b></p><p>again</p>') == 'Hello worldagain'

    def test_tail_text(self):
        """Test that text between elements is kept."""
        assert extract('a<i>b</i>c<u>d</u>e') == 'abcde'

    def test_line_breaks_are_elided(self):
        """Test that <br> adds nothing."""
        assert extract('a<br>b') == 'ab'

    def test_comments_have_no_text(self):
        """Test that comment content is never extracted."""
        assert extract('a<!-- hidden -->b') == 'ab'

    def test_text_is_verbatim(self):
        """Test that entities are decoded and spacing kept."""
        assert extract('<p>1 &lt; 2  &amp; 3</p>') == '1 < 2  & 3'


class TestPreservedWhitespace:
    """Test extraction with preserve_whitespace=True."""

    def test_blocks_on_separate_lines(self):
        """Test that block elements are surrounded by newlines."""
        assert extract('<p>one</p><p>two</p>', preserve_whitespace=True) == '\none\ntwo\n'

    def test_line_break(self):
        """Test that <br> becomes a newline."""
        assert extract('a<br>b', preserve_whitespace=True) == 'a\nb'

    def test_nested_blocks(self):
        """Test that nested blocks do not pile up blank lines."""
        result = extract('<div>a<p>b</p>c</div>', preserve_whitespace=True)
        assert result == '\na\nb\nc\n'

    def test_inline_elements_stay_inline(self):
        """Test that inline elements add no breaks."""
        assert extract('<span>a</span><em>b</em>', preserve_whitespace=True) == 'ab'

    def test_root_is_not_a_block(self):
        """Test that the element passed in gets no surrounding breaks."""
        root = etree.fromstring('<p>x<b>y</b></p>')
        assert FullTextExtractor(preserve_whitespace=True).extract(root) == 'xy'

    def test_custom_block_elements(self):
        """Test caller-supplied block and line-break element sets."""
        result = extract(
            '<span>a</span><p>b</p><hr>c',
            preserve_whitespace=True,
            block_elements={'span'},
            line_break_elements={'hr'},
        )
        assert result == '\na\nb\nc'
