"""
Gateway decorators for common functionality.

This module provides the decorator that turns transport, configuration and
payload errors raised inside a provider gateway into ``UpstreamError``.
"""

import functools
import inspect
from typing import Any, Awaitable, Callable, Dict, Optional, ParamSpec, TypeVar

import pydantic
import structlog

from pinstats.core.enums import Provider
from pinstats.core.exceptions import ConfigurationError, UpstreamError
from pinstats.core.http import HTTPError

logger = structlog.get_logger(__name__)

# Type variables for generic decorator typing
P = ParamSpec("P")
R = TypeVar("R")

# Errors that mean "this provider's data could not be obtained"
UPSTREAM_FAILURES = (
    HTTPError,
    ConfigurationError,
    pydantic.ValidationError,
    KeyError,
    TypeError,
    ValueError,
)


def upstream_error_handler(
    provider: Provider,
    operation: Optional[str] = None,
    include_context: bool = True,
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """
    Decorator for gateway coroutines that talk to one upstream provider.

    :param provider: Provider the decorated coroutine fetches from
    :param operation: Operation name for logs (defaults to the function name)
    :param include_context: Whether to include call arguments in the log context
    :returns: Decorated coroutine raising ``UpstreamError`` on failure

    :example:
        @upstream_error_handler(Provider.IFPA)
        async def fetch_stats(self, player_id: int) -> IFPAStats:
            ...
    """

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        operation_name = operation or func.__name__
        signature = inspect.signature(func)

        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            context: Dict[str, Any] = {
                "provider": provider.value,
                "operation": operation_name,
            }
            if include_context:
                bound = signature.bind(*args, **kwargs)
                for name, value in bound.arguments.items():
                    if name != "self":
                        context[name] = str(value)[:200] if value is not None else None

            try:
                return await func(*args, **kwargs)
            except UpstreamError:
                raise
            except UPSTREAM_FAILURES as e:
                logger.warning(
                    "Upstream fetch failed",
                    error_type=e.__class__.__name__,
                    error=str(e),
                    status_code=getattr(e, "status_code", None),
                    **context,
                )
                raise UpstreamError(provider, e, operation=operation_name) from e

        return wrapper

    return decorator
