"""Test configuration and fixtures."""

import pytest
from pathlib import Path
import tempfile

from blasttext.providers.catalog_localizer import load_catalog_from_string
from blasttext.config.loader import load_config_from_string


LOREM = "Lorem ipsum dolor sit amet, voluptua. At et ea rebum."


@pytest.fixture
def lorem():
    """Provide the reference text used across delimiter tests."""
    return LOREM


@pytest.fixture
def sample_config_yaml():
    """Provide a sample config YAML for testing."""
    return """
version: 1
delimiter: custom
pattern: "(um)"
locale: de_DE
"""


@pytest.fixture
def sample_config(sample_config_yaml):
    """Provide a loaded config object for testing."""
    return load_config_from_string(sample_config_yaml)


@pytest.fixture
def sample_catalog_yaml():
    """Provide a sample localization catalog YAML for testing."""
    return """
en:
  greeting: "Hello World. How are you?"
  farewell: "Goodbye."
de:
  greeting: "Hallo Welt. Wie geht es dir?"
"""


@pytest.fixture
def sample_localizer(sample_catalog_yaml):
    """Provide a catalog localizer defaulting to English."""
    return load_catalog_from_string(sample_catalog_yaml, default_locale="en_US")


def _temp_yaml(content):
    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False, encoding='utf-8') as f:
        f.write(content)
        return Path(f.name)


@pytest.fixture
def temp_config_file(sample_config_yaml):
    """Provide a temporary config file for testing."""
    temp_path = _temp_yaml(sample_config_yaml)

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


@pytest.fixture
def temp_catalog_file(sample_catalog_yaml):
    """Provide a temporary catalog file for testing."""
    temp_path = _temp_yaml(sample_catalog_yaml)

    yield temp_path

    if temp_path.exists():
        temp_path.unlink()


class SimpleTestLogger:
    """Simple logger for testing that captures messages."""

    def __init__(self):
        self.messages = []

    def info(self, msg: str, **kv):
        self.messages.append(('info', msg, kv))

    def warn(self, msg: str, **kv):
        self.messages.append(('warn', msg, kv))

    def error(self, msg: str, **kv):
        self.messages.append(('error', msg, kv))

    def clear(self):
        """Clear captured messages."""
        self.messages.clear()


class SimpleTestMeter:
    """Simple meter for testing that captures counters and observations."""

    def __init__(self):
        self.counters = []
        self.observations = []

    def inc(self, name: str, amount: int = 1, **tags: str):
        self.counters.append((name, amount, tags))

    def observe(self, name: str, value: float, **tags: str):
        self.observations.append((name, value, tags))


@pytest.fixture
def test_logger():
    """Provide a test logger that captures messages."""
    return SimpleTestLogger()


@pytest.fixture
def test_meter():
    """Provide a test meter that captures metrics."""
    return SimpleTestMeter()
