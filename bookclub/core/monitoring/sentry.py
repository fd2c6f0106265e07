# Standard library imports
import logging

# Third-party imports
import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration

# Local application imports
from bookclub.settings import settings


def setup_sentry() -> bool:
    """
    Initialise Sentry once for production deployments.

    Warnings become breadcrumbs, errors become events, and the FastAPI
    integration traces requests.

    Returns:
        True if Sentry was initialised by this call.
    """
    if settings.ENVIRONMENT != "production" or not settings.SENTRY_DSN:
        return False
    if sentry_sdk.get_client().is_active():
        return False

    sentry_logging = LoggingIntegration(
        level=logging.WARNING,
        event_level=logging.ERROR,
    )
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        integrations=[sentry_logging, FastApiIntegration()],
        environment=settings.ENVIRONMENT,
        traces_sample_rate=1.0,
    )
    return True
