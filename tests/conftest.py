import pytest

from insight_seo.config import ContentSettings, Settings
from insight_seo.engine import SEOEngine


@pytest.fixture
def content_settings():
    return ContentSettings(spellcheck_enabled=False)


@pytest.fixture
def settings(content_settings):
    return Settings(content=content_settings)


@pytest.fixture
def engine(settings):
    return SEOEngine(settings)
