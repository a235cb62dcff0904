"""Translation of backing store failures into domain errors."""

import asyncio
from functools import wraps
from typing import Awaitable, Callable, ParamSpec, TypeVar

import logfire
from sqlalchemy.exc import SQLAlchemyError

from collab.domain.error import StorageError

P = ParamSpec("P")
T = TypeVar("T")


def translate_storage_errors(
    func: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[T]]:
    """Raise ``StorageError`` for database and timeout failures.

    Domain errors raised inside the repository method pass through
    unchanged.
    """

    @wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        try:
            return await func(*args, **kwargs)
        except (SQLAlchemyError, asyncio.TimeoutError, OSError) as e:
            logfire.error(
                "Storage operation failed",
                operation=func.__qualname__,
                error_type=type(e).__name__,
                error=str(e),
            )
            raise StorageError(f"Storage unavailable: {type(e).__name__}") from e

    return wrapper
