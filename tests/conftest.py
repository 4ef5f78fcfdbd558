import pytest

from splitsettle.config import get_settings
from splitsettle.models import Participant


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def people():
    return {name: Participant(name) for name in "ABCDE"}
