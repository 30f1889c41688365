"""Rollbar transport.

Thin wrapper over the rollbar module so the facade can be tested with a fake
transport. Rollbar is initialized with the thread handler: every send happens
on a background thread and its outcome is never observed by the caller.
"""

from collections.abc import Mapping
from typing import Any, Protocol

import rollbar


class Transport(Protocol):
    def init(self, access_token: str, environment: str) -> None: ...

    def send(self, error: object, payload: Mapping[str, Any]) -> None: ...


class RollbarTransport:
    """Sends errors to Rollbar. Call init() once per process before send()."""

    handler = "thread"

    def init(self, access_token: str, environment: str) -> None:
        rollbar.init(access_token, environment=environment, handler=self.handler)

    def send(self, error: object, payload: Mapping[str, Any]) -> None:
        payload_data = dict(payload)
        if isinstance(error, BaseException):
            rollbar.report_exc_info(
                (type(error), error, error.__traceback__),
                payload_data=payload_data,
            )
        else:
            # Non-exception values (dicts, None, ...) have no traceback
            rollbar.report_message(repr(error), level="error", payload_data=payload_data)
