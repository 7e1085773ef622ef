"""
Centralized exception handling decorator for API route functions.

The :func:`handle_exceptions` decorator wraps an endpoint handler, catching any
uncaught exceptions and converting them into :class:`fastapi.HTTPException`
responses.  HTTPExceptions raised by the handler are propagated untouched, thus
preserving status codes and detail messages defined locally.  Engine errors
(:class:`~engine.errors.CorrelationError` and its subclasses) describe bad
caller input and become a ``400`` carrying the error message.  All other
exceptions are logged with their traceback and turned into a ``500`` with a
generic detail, so internal state never reaches the client.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import inspect
import logging
from functools import wraps
from typing import Any, Callable, TypeVar, cast

from fastapi import HTTPException

from engine.errors import CorrelationError

F = TypeVar("F", bound=Callable[..., Any])

log = logging.getLogger(__name__)

INTERNAL_ERROR_DETAIL = "Internal server error"


def _translate(func: Callable[..., Any], exc: Exception) -> HTTPException:
    if isinstance(exc, CorrelationError):
        return HTTPException(status_code=400, detail=str(exc))
    log.exception("unhandled error in %s", func.__name__)
    return HTTPException(status_code=500, detail=INTERNAL_ERROR_DETAIL)


def handle_exceptions(func: F) -> F:
    """Decorator that converts uncaught exceptions to HTTP errors.

    * :class:`HTTPException` is re-raised verbatim.
    * :class:`CorrelationError` becomes ``HTTPException(400, str(exc))``.
    * Anything else becomes ``HTTPException(500, "Internal server error")``.

    The decorator works with both regular and async functions.
    """

    if inspect.iscoroutinefunction(func):
        @wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as exc:
                raise _translate(func, exc) from exc

        return cast(F, async_wrapper)

    @wraps(func)
    def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except HTTPException:
            raise
        except Exception as exc:
            raise _translate(func, exc) from exc

    return cast(F, sync_wrapper)
