"""Shared fixtures for htmlscrub tests."""

import pytest
from pathlib import Path
import tempfile
import shutil

from htmlscrub.core.document import parse_fragment, serialize_fragment
from htmlscrub.core.walker import walk


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path)


@pytest.fixture
def scrub():
    """
    Return a helper that parses markup, walks it with a scrubber and
    serializes the result.
    """
    def _scrub(markup, scrubber):
        fragment = parse_fragment(markup)
        walk(fragment, scrubber)
        return serialize_fragment(fragment)

    return _scrub


@pytest.fixture
def permit_policy_file(temp_dir):
    """Create a valid permit-mode policy file."""
    content = """
mode = "permit"
tags = ["p", "a", "em"]
attributes = ["href", "title"]
prune = true
url_schemes = ["https"]
"""
    policy_path = temp_dir / 'permit.toml'
    policy_path.write_text(content)
    return policy_path


@pytest.fixture
def target_policy_file(temp_dir):
    """Create a valid target-mode policy file."""
    content = """
mode = "target"
tags = ["img", "table"]
attributes = ["class"]
"""
    policy_path = temp_dir / 'target.toml'
    policy_path.write_text(content)
    return policy_path
