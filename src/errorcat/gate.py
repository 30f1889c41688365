"""Decide whether errors may be forwarded to the crash-reporting service."""

from errorcat.config import TEST_ENVIRONMENT, ReportingSettings


def can_report(settings: ReportingSettings) -> bool:
    """True outside the test environment when a Rollbar key is configured.

    Ineligibility is a normal outcome, never an error.
    """
    return settings.environment != TEST_ENVIRONMENT and bool(settings.rollbar_key)
