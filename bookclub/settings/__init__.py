# Standard library imports
import os

# Local application imports
from bookclub.settings.dev import DevSettings, TestSettings
from bookclub.settings.production import ProductionSettings


def get_settings() -> DevSettings | TestSettings | ProductionSettings:
    """
    Return an instance of the appropriate settings class
    based on the ENVIRONMENT environment variable.
    """
    env = os.environ.get("ENVIRONMENT", "dev").lower()
    if env == "production":
        return ProductionSettings()  # type: ignore[call-arg]
    if env == "test":
        return TestSettings()  # type: ignore[call-arg]
    return DevSettings()  # type: ignore[call-arg]


settings = get_settings()
