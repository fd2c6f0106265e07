# Local application imports
from bookclub.core.monitoring.logging import get_contextual_logger, get_logger
from bookclub.core.monitoring.sentry import setup_sentry

__all__ = ["get_contextual_logger", "get_logger", "setup_sentry"]
