"""ViewInvalidator implementations."""

from __future__ import annotations

import logging

import httpx

from autolot.ports.view_invalidator import ViewInvalidator

logger = logging.getLogger(__name__)


class LoggingViewInvalidator(ViewInvalidator):
    """Used when no revalidation webhook is configured."""

    def invalidate(self, *paths: str) -> None:
        logger.info("Views invalidated", extra={"paths": list(paths)})


class WebhookViewInvalidator(ViewInvalidator):
    """
    Asks the frontend to purge cached pages via an HTTP webhook.

    Sends ``POST <url>`` with ``{"paths": [...]}``. Invalidation runs after
    the mutation is applied, so a failing webhook is logged and never fails
    the request; the page simply stays stale until its next revalidation.
    """

    def __init__(
        self,
        url: str,
        token: str | None = None,
        timeout: float = 5.0,
        client: httpx.Client | None = None,
    ) -> None:
        """
        Args:
            url: Webhook endpoint
            token: Optional bearer token for the webhook
            timeout: Request timeout in seconds
            client: Injected client (tests); a new one is created per call otherwise
        """
        self._url = url
        self._token = token
        self._timeout = timeout
        self._client = client

    def invalidate(self, *paths: str) -> None:
        if not paths:
            return

        headers = {"Authorization": f"Bearer {self._token}"} if self._token else {}
        payload = {"paths": list(paths)}

        try:
            if self._client is not None:
                response = self._client.post(self._url, json=payload, headers=headers)
            else:
                with httpx.Client(timeout=self._timeout) as client:
                    response = client.post(self._url, json=payload, headers=headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "Revalidation webhook rejected request",
                extra={"paths": list(paths), "status_code": exc.response.status_code},
            )
            return
        except httpx.HTTPError as exc:
            logger.warning(
                "Revalidation webhook unavailable",
                exc_info=exc,
                extra={"paths": list(paths)},
            )
            return

        logger.info("Views invalidated", extra={"paths": list(paths)})


class DeferredViewInvalidator(ViewInvalidator):
    """
    Buffers invalidations until flush().

    The HTTP layer flushes after the request's transaction commits, so the
    frontend never re-renders a page from data that is not yet visible.
    """

    def __init__(self, target: ViewInvalidator) -> None:
        self._target = target
        self._pending: dict[str, None] = {}  # Ordered set

    @property
    def pending(self) -> list[str]:
        return list(self._pending)

    def invalidate(self, *paths: str) -> None:
        self._pending.update(dict.fromkeys(paths))

    def flush(self) -> None:
        if not self._pending:
            return
        paths, self._pending = list(self._pending), {}
        self._target.invalidate(*paths)
