import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Pytest hook to run before collecting tests.

    Sets the environment before any application module is imported, so the
    module-level app in ``app.py`` picks up test logging (WARNING, console
    only).
    """
    os.environ["ENV"] = session.config.option.env
    os.environ["LOG_DIR"] = ""


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = Path(item.fspath)

        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture()
def storefront():
    """A freshly seeded storefront for every test."""
    from storefront import Storefront

    return Storefront.seeded()


@pytest.fixture()
def app_settings():
    from settings import Settings

    return Settings(env="test", log_level="WARNING", log_dir=None)
