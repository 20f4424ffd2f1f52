import pathlib
import sys

import pytest

p = str(pathlib.Path(__file__).resolve().parents[1])
sys.path.insert(0, p) if p not in sys.path else None

from taxengine.config import get_settings  # noqa: E402
from taxengine.core.rules import load_default_rules  # noqa: E402
from tests.fixtures.rules import make_fixture_rules  # noqa: E402


@pytest.fixture(scope="session")
def rules():
    return load_default_rules()


@pytest.fixture
def fixture_rules():
    return make_fixture_rules()


@pytest.fixture
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
