from __future__ import annotations

# Standard Library Imports
import logging
import sys
from typing import TYPE_CHECKING

# Third Party Imports
import pytest

# fabletime Imports
from fabletime.common.behavioral_config import BehavioralConfig
from fabletime.data.named_store import NamedStore
from fabletime.locale.registry import LocaleRegistry, setLocaleRegistry

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _resetConfig() -> Iterator[None]:
    """Automatically restore the default configuration after each test.

    Note:
        This is used so tests can patch config values without leaking them into other tests.
    """
    yield
    BehavioralConfig()


@pytest.fixture(scope="session", name="test_logger")
def getTestLoggerObject() -> logging.Logger:
    """Create a custom :class:`logging.Logger` object."""
    logger = logging.getLogger("Unit Test Logger")
    logger.setLevel(logging.DEBUG)
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    logger.addHandler(handler)
    return logger


@pytest.fixture(name="named_store")
def getNamedStore(test_logger: logging.Logger) -> NamedStore:
    """Create a non-shared, in-memory :class:`.NamedStore` for a single test."""
    return NamedStore(db_path="sqlite://", prefix="unit-test", logger=test_logger)


@pytest.fixture(name="registry")
def getLocaleRegistry(named_store: NamedStore) -> Iterator[LocaleRegistry]:
    """Create a :class:`.LocaleRegistry` and install it as the process-wide registry.

    Yields:
        :class:`.LocaleRegistry`: registry backed by an isolated in-memory store
    """
    registry = LocaleRegistry(named_store)
    setLocaleRegistry(registry)
    yield registry
    setLocaleRegistry(None)


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest options without an .ini file."""
    config.addinivalue_line("markers", "calendar: mark test as a calendar arithmetic test")
    config.addinivalue_line("markers", "locale: mark test as a locale or era test")
    config.addinivalue_line("markers", "format: mark test as a formatter test")
