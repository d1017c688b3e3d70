"""Parser for TOML scrub policy files."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from .scrubbers import PermitScrubber, TargetScrubber


logger = logging.getLogger(__name__)

_LIST_FIELDS = ('tags', 'attributes', 'url_schemes', 'css_properties')


class PolicyParser:
    """Parser for TOML scrub policy files."""

    def __init__(self, filepath: Path | str):
        """
        Initialize the parser with a policy file path.

        Args:
            filepath: Path to the policy file
        """
        self.filepath = Path(filepath)
        self.data: dict[str, Any] = {}
        self._parse()

    def _parse(self) -> None:
        """Parse the policy file."""
        with open(self.filepath, 'rb') as f:
            self.data = tomllib.load(f)

        self._validate()
        logger.info(f"Loaded {self.mode} policy from {self.filepath}")

    def _validate(self) -> None:
        """Validate the parsed policy data."""
        mode = self.data.get('mode', 'permit')
        if mode not in ('permit', 'target'):
            raise ValueError("'mode' must be 'permit' or 'target'")

        for key in _LIST_FIELDS:
            if key not in self.data:
                continue
            value = self.data[key]
            if not isinstance(value, list):
                raise ValueError(f"'{key}' must be a list of strings")
            for i, item in enumerate(value):
                if not isinstance(item, str) or not item.strip():
                    raise ValueError(f"'{key}' item {i} must be a non-empty string")

        if 'prune' in self.data and not isinstance(self.data['prune'], bool):
            raise ValueError("'prune' must be a boolean (true or false)")

        if mode == 'permit' and 'tags' not in self.data:
            raise ValueError("'tags' is required for a permit policy")

        unknown = set(self.data) - {'mode', 'prune', *_LIST_FIELDS}
        if unknown:
            raise ValueError(f"Unknown policy keys: {', '.join(sorted(unknown))}")

    @property
    def mode(self) -> str:
        """Get the policy mode, 'permit' or 'target'."""
        return self.data.get('mode', 'permit')

    @property
    def tags(self) -> list[str] | None:
        return self.data.get('tags')

    @property
    def attributes(self) -> list[str] | None:
        return self.data.get('attributes')

    @property
    def prune(self) -> bool:
        return self.data.get('prune', False)

    @property
    def url_schemes(self) -> list[str] | None:
        return self.data.get('url_schemes')

    @property
    def css_properties(self) -> list[str] | None:
        return self.data.get('css_properties')

    def build_scrubber(self) -> PermitScrubber:
        """
        Build the scrubber this policy describes.

        Returns:
            A PermitScrubber, or a TargetScrubber for mode = "target"
        """
        scrubber_class = TargetScrubber if self.mode == 'target' else PermitScrubber
        return scrubber_class(
            tags=self.tags,
            attributes=self.attributes,
            prune=self.prune,
            url_schemes=self.url_schemes,
            css_properties=self.css_properties,
        )
