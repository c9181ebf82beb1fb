"""Pytest configuration and shared fixtures for md2nexus test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import logging
import os

import pytest
from hypothesis import HealthCheck, Phase, Verbosity, settings

# Register custom Hypothesis profiles
_suppressed = [HealthCheck.function_scoped_fixture]
settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose, suppress_health_check=_suppressed)
settings.register_profile("dev", max_examples=50, suppress_health_check=_suppressed)
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate],
    suppress_health_check=_suppressed,
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch, tmp_path_factory):
    """Keep user and repository config files out of every test.

    The CLI discovers config files from the working directory and the home
    directory, so both are pointed at an empty directory.

    """
    empty = tmp_path_factory.mktemp("isolated_home")
    monkeypatch.setenv("HOME", str(empty))
    monkeypatch.setenv("USERPROFILE", str(empty))
    monkeypatch.delenv("MD2NEXUS_CONFIG", raising=False)
    monkeypatch.chdir(empty)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Undo handler and level changes made by ``configure_logging``."""
    root_logger = logging.getLogger()
    saved_level = root_logger.level
    saved_handlers = list(root_logger.handlers)
    yield
    for handler in root_logger.handlers:
        if handler not in saved_handlers:
            handler.close()
    root_logger.handlers[:] = saved_handlers
    root_logger.setLevel(saved_level)


@pytest.fixture
def sample_markdown() -> str:
    """Provide sample Markdown content for testing.

    Returns
    -------
    str
        A document touching most of the supported constructs.

    """
    return """# Sample Mod

This is a **sample mod** with *italic text* and some `inline code`.

## Features

- Item 1
- Item 2

1. First step
2. Second step

```ini
[General]
enabled=1
```

| Setting | Default |
|---------|---------|
| speed   | `1.0`   |

> Use at your own risk.

---

See [the wiki](https://example.com/wiki) for more.
"""
