"""Per-operation failure boundary for route handlers."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from autolot.domain.errors import DomainError, OperationFailedError, StoreError

logger = logging.getLogger(__name__)


@contextmanager
def operation_boundary(failure_message: str) -> Iterator[None]:
    """
    Run a route body so that only meaningful errors reach the caller.

    - Domain errors (unauthorized, forbidden, not found, validation) pass through
    - StoreError and any unexpected exception become
      OperationFailedError(failure_message); the cause is logged, never exposed

    Usage:
        with operation_boundary("Failed to fetch cars"):
            result = use_case.execute(request)
    """
    try:
        yield
    except StoreError as exc:
        logger.error(
            "Operation failed in store",
            exc_info=exc,
            extra={"operation_error": failure_message, "context": exc.context},
        )
        raise OperationFailedError(failure_message) from exc
    except DomainError:
        raise
    except Exception as exc:
        logger.error(
            "Operation failed unexpectedly",
            exc_info=exc,
            extra={"operation_error": failure_message, "error_type": type(exc).__name__},
        )
        raise OperationFailedError(failure_message) from exc
