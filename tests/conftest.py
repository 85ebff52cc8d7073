"""Pytest configuration and shared fixtures for the bb2html test suite.

This module provides shared fixtures, test configuration, and Hypothesis
profiles that are used across the entire test suite.
"""

import logging
import os
from typing import Generator

import pytest
from hypothesis import Phase, Verbosity, settings

from bb2html import BBCodeHtmlParser

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests - full pipeline tests")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def parser() -> BBCodeHtmlParser:
    """Provide a parser with default options."""
    return BBCodeHtmlParser()


@pytest.fixture
def restore_root_logging() -> Generator[None, None, None]:
    """Restore root logger handlers and level after a test reconfigures logging."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    try:
        yield
    finally:
        for handler in root_logger.handlers:
            if handler not in handlers:
                handler.close()
        root_logger.handlers[:] = handlers
        root_logger.setLevel(level)


@pytest.fixture
def sample_post() -> str:
    """Provide an HTML-escaped forum post using most supported tags.

    Returns
    -------
    str
        Sample BBCode text

    """
    return (
        "[b]Release notes[/b]\n"
        "[quote=http://forum.example/t/1]Is it out yet?[/quote]\n"
        "Yes! See [url=http://example.com/notes]the notes[/url] or [url]http://example.com[/url].\n"
        "[ulist]\n"
        "* faster parsing[/ulist]\n"
        "[code]if (a &lt; b) { [b]not bold[/b] }[/code]\n"
        "[size=2][color=red]Thanks![/color][/size]"
    )
