import pytest

from knob import Settings, optopt


@pytest.fixture
def port_settings() -> Settings:
    settings = Settings()
    settings.opt(optopt("p", "port", "The port to bind to", "eg: 4000"))
    return settings
