"""Classified HTTP errors.

Callers build these through ErrorCat.create() so that every classified error
is logged and reported on the way out. The responder turns them into
{"statusCode": ..., "error": "...", "message": "..."} bodies.
"""

from collections.abc import Mapping
from typing import Any

from starlette.exceptions import HTTPException

from errorcat.schemas.error import ErrorBody


class StructuredError(HTTPException):
    """HTTP error with a status code, a client-safe message and optional data.

    status_code is not validated; supplying a real HTTP status is the caller's
    job. status_code and message (detail) can't be rebound once set. data is
    kept as given and never mutated here.
    """

    _frozen_fields = frozenset({"status_code", "detail", "_data"})

    def __init__(
        self,
        status_code: int,
        message: str,
        data: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(status_code=status_code, detail=message)
        self._data: Mapping[str, Any] = data if data is not None else {}

    def __setattr__(self, name: str, value: object) -> None:
        if name in self._frozen_fields and name in self.__dict__:
            raise AttributeError(f"{self.__class__.__name__}.{name} is read-only")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if name in self._frozen_fields:
            raise AttributeError(f"{self.__class__.__name__}.{name} is read-only")
        super().__delattr__(name)

    @property
    def message(self) -> str:
        return self.detail

    @property
    def data(self) -> Mapping[str, Any]:
        return self._data

    @property
    def output(self) -> ErrorBody:
        return ErrorBody.build(self.status_code, self.message, self._data)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(status_code={self.status_code!r}, message={self.message!r})"
