# Local application imports
from bookclub.settings.common import CommonSettings


class DevSettings(CommonSettings):
    DEBUG_MODE: bool = True
    SQL_ECHO: bool = True


class TestSettings(CommonSettings):
    DEBUG_MODE: bool = False
    JWT_SECRET_KEY: str = "test-secret-key"
