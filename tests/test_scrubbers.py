"""Tests for PermitScrubber and TargetScrubber."""

import pytest

from htmlscrub.core.document import parse_fragment
from htmlscrub.core.scrubbers import PermitScrubber, Scrubber, TargetScrubber
from htmlscrub.core.walker import Directive


class TestPermitScrubber:
    """Test the allow-list policy."""

    def test_strip_disallowed_child(self, scrub):
        """Test that a disallowed empty element disappears."""
        assert scrub('<a><img/></a>', PermitScrubber(tags=['a'])) == '<a></a>'

    def test_strip_keeps_text(self, scrub):
        """Test that stripping keeps the content of disallowed elements."""
        scrubber = PermitScrubber(tags=['a'])
        assert scrub('<a><span>text</span></a>', scrubber) == '<a>text</a>'

    def test_prune_drops_text(self, scrub):
        """Test that prune mode removes the content of disallowed elements."""
        scrubber = PermitScrubber(tags=['a'], prune=True)
        assert scrub('<a><span>text</span></a>', scrubber) == '<a></a>'

    def test_no_tags_strips_everything(self, scrub):
        """Test that the default (empty) tag list keeps only text."""
        assert scrub('<p>Hello <b>world</b></p>', PermitScrubber()) == 'Hello world'

    def test_tags_are_case_insensitive(self, scrub):
        """Test that tag names are matched case-insensitively."""
        assert scrub('<A>x</A>', PermitScrubber(tags=['A'])) == '<a>x</a>'

    def test_attribute_allow_list(self, scrub):
        """Test that only listed attributes survive."""
        scrubber = PermitScrubber(tags=['a'], attributes=['href'])
        result = scrub('<a href="/x" title="t" onclick="evil()">x</a>', scrubber)
        assert result == '<a href="/x">x</a>'

    def test_empty_attribute_list_drops_all(self, scrub):
        """Test that an explicit empty attribute list removes every attribute."""
        scrubber = PermitScrubber(tags=['p'], attributes=[])
        assert scrub('<p class="c" id="i">x</p>', scrubber) == '<p>x</p>'

    def test_default_attribute_safelist(self, scrub):
        """Test that attributes default to the built-in safelist."""
        scrubber = PermitScrubber(tags=['p'])
        result = scrub('<p class="c" onclick="evil()" data-id="3">x</p>', scrubber)
        assert result == '<p class="c" data-id="3">x</p>'

    def test_disallowed_scheme_removes_attribute(self, scrub):
        """Test that javascript: links lose their href."""
        scrubber = PermitScrubber(tags=['a'], attributes=['href'])
        assert scrub('<a href="javascript:alert(1)">x</a>', scrubber) == '<a>x</a>'

    def test_custom_url_schemes(self, scrub):
        """Test that url_schemes replaces the default scheme list."""
        scrubber = PermitScrubber(tags=['a'], attributes=['href'], url_schemes=['https'])
        result = scrub('<a href="https://a.example/">1</a><a href="http://b.example/">2</a>', scrubber)
        assert result == '<a href="https://a.example/">1</a><a>2</a>'

    def test_style_attribute_is_scrubbed(self, scrub):
        """Test that style values go through the CSS check."""
        scrubber = PermitScrubber(tags=['p'], attributes=['style'])
        result = scrub('<p style="color: red; behavior: url(x.htc)">x</p>', scrubber)
        assert result == '<p style="color:red;">x</p>'

    def test_empty_style_is_removed(self, scrub):
        """Test that a style with no safe declarations is dropped entirely."""
        scrubber = PermitScrubber(tags=['p'], attributes=['style'])
        result = scrub('<p style="width: expression(alert(1))">x</p>', scrubber)
        assert result == '<p>x</p>'

    def test_attribute_rules_rewrite(self, scrub):
        """Test that an attribute rule can rewrite a value outside the allow-list."""
        scrubber = PermitScrubber(
            tags=['a'],
            attributes=[],
            attribute_rules={'a': {'rel': lambda value: 'nofollow'}},
        )
        assert scrub('<a rel="me" href="/x">x</a>', scrubber) == '<a rel="nofollow">x</a>'

    def test_attribute_rules_drop(self, scrub):
        """Test that an attribute rule returning None drops the attribute."""
        scrubber = PermitScrubber(
            tags=['img'],
            attribute_rules={'img': {'src': lambda value: value if value.startswith('/') else None}},
        )
        result = scrub('<img src="http://evil.example/x.png"><img src="/ok.png">', scrubber)
        assert result == '<img><img src="/ok.png">'

    def test_comments_kept_only_when_allowed(self):
        """Test the comment pseudo-tag."""
        assert PermitScrubber(tags=['comment']).keeps_comments()
        assert not PermitScrubber(tags=['p']).keeps_comments()

    def test_configuration_is_read_only(self):
        """Test that the configuration cannot be changed after construction."""
        scrubber = PermitScrubber(tags=['a'], attributes=['href'], prune=True)

        assert scrubber.tags == frozenset({'a'})
        assert scrubber.attributes == frozenset({'href'})
        assert scrubber.prune is True
        with pytest.raises(AttributeError):
            scrubber.tags = {'script'}

    def test_decide(self):
        """Test the directive returned for kept and dropped elements."""
        fragment = parse_fragment('<a>x</a><b>y</b>')
        a, b = fragment

        assert PermitScrubber(tags=['a']).decide(a) is Directive.CONTINUE
        assert PermitScrubber(tags=['a']).decide(b) is Directive.STRIP
        assert PermitScrubber(tags=['a'], prune=True).decide(b) is Directive.PRUNE

    def test_repr(self):
        """Test the debugging representation."""
        assert repr(PermitScrubber(tags=['b', 'a'])) == "PermitScrubber(tags=['a', 'b'], prune=False)"


class TestTargetScrubber:
    """Test the deny-list policy."""

    def test_targeted_tag_is_stripped(self, scrub):
        """Test that listed tags are removed and the rest kept."""
        result = scrub('<p><img src="a.png">x</p>', TargetScrubber(tags=['img']))
        assert result == '<p>x</p>'

    def test_targeted_tag_is_pruned(self, scrub):
        """Test prune mode for listed tags."""
        result = scrub('<div><span>gone</span>kept</div>', TargetScrubber(tags=['span'], prune=True))
        assert result == '<div>kept</div>'

    def test_default_safelist_strips_unknown_elements(self, scrub):
        """Test that with no tags, elements outside the safelist are targeted."""
        result = scrub('<p>ok</p><script>alert(1)</script>', TargetScrubber())
        assert result == '<p>ok</p>alert(1)'

    def test_default_safelist_prunes_unknown_elements(self, scrub):
        """Test prune mode with the default safelist."""
        result = scrub('<p>ok</p><script>alert(1)</script><iframe src="x"></iframe>', TargetScrubber(prune=True))
        assert result == '<p>ok</p>'

    def test_targeted_attributes_are_removed(self, scrub):
        """Test that listed attributes are removed and the rest kept."""
        scrubber = TargetScrubber(tags=['b'], attributes=['class'])
        assert scrub('<p class="x" id="y">t</p>', scrubber) == '<p id="y">t</p>'

    def test_default_attribute_safelist(self, scrub):
        """Test that with no attributes, those outside the safelist are removed."""
        scrubber = TargetScrubber(tags=['b'])
        assert scrub('<p onclick="x()" title="t">t</p>', scrubber) == '<p title="t">t</p>'

    def test_surviving_uri_attributes_are_checked(self, scrub):
        """Test that attributes that are not targeted still get the URI check."""
        scrubber = TargetScrubber(tags=['b'], attributes=['class'])
        assert scrub('<img src="javascript:alert(1)" alt="a">', scrubber) == '<img alt="a">'

    @pytest.mark.parametrize('html', [
        '<b>x</b><i>y</i>',
        '<div><b><b>nested</b></b></div>',
        '<table><tr><td><b>cell</b></td></tr></table>',
        '<b>unclosed <i>markup',
    ])
    def test_targeted_tags_never_survive(self, html):
        """Test that no targeted element is left anywhere in the tree."""
        from htmlscrub.core.walker import walk

        fragment = parse_fragment(html)
        walk(fragment, TargetScrubber(tags=['b', 'i']))
        assert not [node for node in fragment.iterdescendants() if node.tag in ('b', 'i')]

    def test_comments(self):
        """Test which target scrubbers keep comments."""
        assert not TargetScrubber().keeps_comments()
        assert TargetScrubber(tags=['a']).keeps_comments()
        assert not TargetScrubber(tags=['a', 'comment']).keeps_comments()


class TestScrubberBase:
    """Test the Scrubber base class."""

    def test_defaults(self, scrub):
        """Test that the base class keeps elements and scrubs attributes."""
        result = scrub('<custom onclick="x()" title="t">x</custom>', Scrubber())
        assert result == '<custom title="t">x</custom>'

    def test_subclass_decide(self, scrub):
        """Test a custom scrubber overriding decide()."""
        class DropImages(Scrubber):
            def decide(self, node):
                return Directive.PRUNE if node.tag == 'img' else Directive.CONTINUE

        assert scrub('<p>a<img src="x.png">b</p>', DropImages()) == '<p>ab</p>'
