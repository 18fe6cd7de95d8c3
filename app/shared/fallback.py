"""Best-effort evaluation of pure computations."""

import logging
from collections.abc import Callable
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def with_default(func: Callable[..., T], default: T, *args: Any, **kwargs: Any) -> T:
    """Return ``func(*args, **kwargs)``, or ``default`` if it raises.

    Only for local computations such as decoding a cached payload. Store
    reads and writes must not go through here: their failures have to reach
    the caller as internal errors.
    """
    try:
        return func(*args, **kwargs)
    except Exception as e:
        logger.debug("Falling back to default for %s: %s", getattr(func, "__name__", func), e)
        return default
