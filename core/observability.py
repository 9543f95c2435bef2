import os
from logging import ERROR as LOG_ERROR

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration

# Only report errors when a DSN is configured outside the test environment
sentry_dsn = os.getenv("SENTRY_DSN")
is_test_env = os.getenv("CI") == "true" or os.getenv("ENVIRONMENT") == "test"


def init_error_reporting() -> bool:
    """Initialise Sentry; returns True when reporting is active"""
    if not sentry_dsn or is_test_env:
        return False

    sentry_sdk.init(
        dsn=sentry_dsn,
        integrations=[
            FastApiIntegration(),
            LoggingIntegration(level=None, event_level=LOG_ERROR),
        ],
        traces_sample_rate=float(os.getenv("SENTRY_TRACE_RATE", "0.20")),
        environment=os.getenv("ENVIRONMENT", "development"),
        release=os.getenv("GIT_SHA", "dev"),
    )
    return True


error_reporting_enabled = init_error_reporting()
