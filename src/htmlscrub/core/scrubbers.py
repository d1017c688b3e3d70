"""Permit- and target-based scrubbing policies."""

from typing import Iterable, Mapping, Optional

from . import safelist
from .validators import AttributeRule, is_data_attribute, scrub_attributes
from .walker import Directive, node_name


def _normalize(names: Optional[Iterable[str]]) -> frozenset[str]:
    return frozenset(name.lower() for name in names or ())


class Scrubber:
    """
    Base class for scrub policies.

    Subclasses override decide(); the default keeps every element and applies
    the default attribute safelist to it.
    """

    def __init__(
        self,
        url_schemes: Optional[Iterable[str]] = None,
        css_properties: Optional[Iterable[str]] = None,
        attribute_rules: Optional[Mapping[str, Mapping[str, AttributeRule]]] = None,
    ):
        """
        Initialize the value-checking configuration shared by all scrubbers.

        Args:
            url_schemes: Allowed URI schemes (default: safelist.ALLOWED_PROTOCOLS)
            css_properties: Allowed CSS properties in style attributes
                (default: safelist.ALLOWED_CSS_PROPERTIES)
            attribute_rules: Per-tag mapping of attribute name to a callable
                returning the value to keep, or None to drop the attribute
        """
        self._url_schemes = _normalize(url_schemes) if url_schemes is not None else safelist.ALLOWED_PROTOCOLS
        self._css_properties = (
            _normalize(css_properties) if css_properties is not None else safelist.ALLOWED_CSS_PROPERTIES
        )
        self._attribute_rules = {
            tag.lower(): {name.lower(): rule for name, rule in rules.items()}
            for tag, rules in (attribute_rules or {}).items()
        }

    @property
    def url_schemes(self) -> frozenset[str]:
        return self._url_schemes

    @property
    def css_properties(self) -> frozenset[str]:
        return self._css_properties

    def skip_node(self, node) -> bool:
        """Return True to leave a node untouched while still walking its children."""
        return False

    def decide(self, node) -> Directive:
        return Directive.CONTINUE

    def keep_attribute(self, name: str) -> bool:
        return name in safelist.ALLOWED_ATTRIBUTES or is_data_attribute(name)

    def scrub_attributes(self, node) -> None:
        tag = node_name(node)
        scrub_attributes(
            node,
            tag,
            self.keep_attribute,
            self._url_schemes,
            self._css_properties,
            self._attribute_rules.get(tag),
        )


class PermitScrubber(Scrubber):
    """
    Keeps only the elements and attributes it is told about.

    Elements outside tags are stripped (children kept in place) or, with
    prune=True, removed together with their content.
    """

    def __init__(
        self,
        tags: Optional[Iterable[str]] = None,
        attributes: Optional[Iterable[str]] = None,
        prune: bool = False,
        **kwargs,
    ):
        """
        Initialize the scrubber.

        Args:
            tags: Allowed element names (default: none, every element goes)
            attributes: Allowed attribute names (default: the attribute safelist)
            prune: Remove disallowed elements with their subtree instead of
                stripping them
            **kwargs: url_schemes, css_properties, attribute_rules
        """
        super().__init__(**kwargs)
        self._tags = _normalize(tags)
        self._attributes = _normalize(attributes) if attributes is not None else None
        self._prune = bool(prune)

    @property
    def tags(self) -> frozenset[str]:
        return self._tags

    @property
    def attributes(self) -> Optional[frozenset[str]]:
        return self._attributes

    @property
    def prune(self) -> bool:
        return self._prune

    def keep_node(self, node) -> bool:
        return node_name(node) in self._tags

    def keeps_comments(self) -> bool:
        """Comments survive only when "comment" is an allowed tag."""
        return 'comment' in self._tags

    def decide(self, node) -> Directive:
        if self.keep_node(node):
            return Directive.CONTINUE
        return Directive.PRUNE if self._prune else Directive.STRIP

    def keep_attribute(self, name: str) -> bool:
        if self._attributes is None:
            return super().keep_attribute(name)
        return name in self._attributes

    def __repr__(self):
        return f"{type(self).__name__}(tags={sorted(self._tags)!r}, prune={self._prune!r})"


class TargetScrubber(PermitScrubber):
    """
    Removes the elements and attributes it is told about and keeps the rest.

    With no tags, every element missing from the default element safelist is
    targeted; with no attributes, every attribute missing from the default
    attribute safelist is removed.
    """

    def keep_node(self, node) -> bool:
        name = node_name(node)
        if self._tags:
            return name not in self._tags
        return name in safelist.ALLOWED_ELEMENTS

    def keeps_comments(self) -> bool:
        return bool(self._tags) and 'comment' not in self._tags

    def keep_attribute(self, name: str) -> bool:
        if self._attributes:
            return name not in self._attributes
        return Scrubber.keep_attribute(self, name)
