import inspect
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, ParamSpec, TypeVar

from loguru import logger

P = ParamSpec("P")
R = TypeVar("R")


def log_errors(func: Callable[P, R]) -> Callable[P, R]:
    """Log any exception escaping the wrapped function or coroutine, then re-raise.

    The line reads ``[qualname] ExcType: message`` so a failing Storefront call
    can be traced without the stack.

    Usage::

        @log_errors
        async def _post(self, payload: dict) -> httpx.Response: ...
    """

    if inspect.iscoroutinefunction(func):

        @wraps(func)
        async def async_wrapper(*args: P.args, **kwargs: P.kwargs) -> Any:
            try:
                return await func(*args, **kwargs)
            except Exception as exc:
                logger.error(f"[{func.__qualname__}] {type(exc).__name__}: {exc}")
                raise

        return async_wrapper  # type: ignore[return-value]

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return func(*args, **kwargs)
        except Exception as exc:
            logger.error(f"[{func.__qualname__}] {type(exc).__name__}: {exc}")
            raise

    return wrapper


def log_failures(
    func: Callable[P, Awaitable[R]],
) -> Callable[P, Awaitable[R]]:
    """Log a warning whenever the decorated coroutine returns a failed ``Result``.

    Service operations report failures as values rather than exceptions, so
    ``log_errors`` never sees them.
    """

    @wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        result = await func(*args, **kwargs)
        if getattr(result, "success", True) is False:
            logger.warning(
                f"[{func.__qualname__}] {getattr(result, 'kind', None)}: "
                f"{getattr(result, 'message', None)}"
            )
        return result

    return wrapper
