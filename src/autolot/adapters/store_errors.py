"""Translation of SQLAlchemy failures into domain StoreError."""

from __future__ import annotations

import functools
import logging
from typing import Callable, ParamSpec, TypeVar

from sqlalchemy.exc import SQLAlchemyError

from autolot.domain.errors import StoreError

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


def translate_store_errors(func: Callable[P, R]) -> Callable[P, R]:
    """Re-raise any SQLAlchemyError from a repository method as StoreError."""

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return func(*args, **kwargs)
        except SQLAlchemyError as exc:
            logger.error(
                "Store operation failed",
                exc_info=exc,
                extra={"operation": func.__qualname__, "error_type": type(exc).__name__},
            )
            raise StoreError(
                "Store operation failed", operation=func.__qualname__
            ) from exc

    return wrapper
