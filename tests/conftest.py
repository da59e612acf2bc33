"""Pytest configuration and shared fixtures for the mdedit test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from mdedit.ast import (
    Bold,
    Division,
    Heading,
    Italic,
    Link,
    ListItem,
    OrderedList,
    Paragraph,
    Text,
    UnorderedList,
)
from mdedit.editing import Editor

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def sample_tree() -> Division:
    """Provide a small document covering every serializable node kind.

    Returns
    -------
    Division
        Root with a heading, a formatted paragraph and both list kinds.

    """
    return Division(
        children=[
            Heading(level=2, children=[Text("Notes")]),
            Paragraph(
                children=[
                    Text("Some "),
                    Bold(children=[Text("bold")]),
                    Text(" and "),
                    Italic(children=[Text("italic")]),
                    Text(" text, plus "),
                    Link(href="http://example.com", children=[Text("a link")]),
                ]
            ),
            UnorderedList(children=[ListItem(children=[Text("one")]), ListItem(children=[Text("two")])]),
            OrderedList(children=[ListItem(children=[Text("first")]), ListItem(children=[Text("second")])]),
        ]
    )


@pytest.fixture
def hello_root() -> Division:
    """Provide a root holding a single ``hello world`` text run."""
    return Division(children=[Text("hello world")])


@pytest.fixture
def hello_editor(hello_root: Division) -> Editor:
    """Provide an editor session over ``hello_root`` with no selection."""
    return Editor(hello_root)


@pytest.fixture
def isolated_config(monkeypatch, tmp_path):
    """Run in an empty directory with no config file in reach.

    Yields
    ------
    Path
        The working directory.

    """
    monkeypatch.delenv("MDEDIT_CONFIG", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setenv("USERPROFILE", str(tmp_path / "home"))
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    yield workdir
